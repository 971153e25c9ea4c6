"""Core package for the playlist link service."""

from playlist_link.core.config import Settings, get_settings
from playlist_link.core.exceptions import (
    ChannelNotFoundError,
    ConfigurationError,
    InvalidInputError,
    NotFoundError,
    PlaylistLinkError,
    PlaylistNotFoundError,
    SyncDataNotFoundError,
    UpstreamError,
)
from playlist_link.core.http_session import close_all_clients, get_client
from playlist_link.core.logging_config import log_resolution_event, setup_logging

__all__ = [
    "Settings",
    "get_settings",
    # Errors
    "PlaylistLinkError",
    "ConfigurationError",
    "InvalidInputError",
    "NotFoundError",
    "ChannelNotFoundError",
    "PlaylistNotFoundError",
    "SyncDataNotFoundError",
    "UpstreamError",
    # Logging
    "setup_logging",
    "log_resolution_event",
    # HTTP
    "get_client",
    "close_all_clients",
]
