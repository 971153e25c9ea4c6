"""API models module."""

from playlist_link.api.models.errors import ErrorCodes, ErrorResponse
from playlist_link.api.models.requests import (
    PlaylistsResponse,
    PlaylistVideosResponse,
    SyncDownloadResponse,
    SyncUploadRequest,
    SyncUploadResponse,
)

__all__ = [
    "ErrorCodes",
    "ErrorResponse",
    "PlaylistsResponse",
    "PlaylistVideosResponse",
    "SyncDownloadResponse",
    "SyncUploadRequest",
    "SyncUploadResponse",
]
