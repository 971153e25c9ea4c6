"""Pydantic models for API requests and responses."""

from typing import Any

from pydantic import BaseModel, Field

from playlist_link.youtube.schemas import CamelModel, PlaylistSummary, VideoPage

# =============================================================================
# Request Models
# =============================================================================


class SyncUploadRequest(BaseModel):
    """Body of a sync upload; ``data`` may be any JSON value except null."""

    data: Any = Field(
        default=None,
        description="Client state to store",
        examples=[{"favorites": ["PLrAXtmErZgOeiKm4sgNOknGvNjby9efdf"]}],
    )


# =============================================================================
# Response Models
# =============================================================================


class PlaylistsResponse(BaseModel):
    """All playlists of a channel."""

    playlists: list[PlaylistSummary]


class PlaylistVideosResponse(VideoPage):
    """One page of playlist videos.

    ``playlistTitle`` is only filled in on the first page.
    """

    playlist_title: str | None = None


class SyncUploadResponse(CamelModel):
    """Acknowledgement of a stored upload."""

    message: str = Field(..., examples=["Data uploaded successfully"])


class SyncDownloadResponse(CamelModel):
    """The currently stored sync data."""

    data: Any
