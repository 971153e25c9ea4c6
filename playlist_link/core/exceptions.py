"""Custom exceptions for the playlist link service."""


class PlaylistLinkError(Exception):
    """Base exception for service errors."""

    pass


class ConfigurationError(PlaylistLinkError):
    """Required configuration is missing or invalid."""

    pass


class InvalidInputError(PlaylistLinkError):
    """A required parameter is missing or malformed."""

    pass


class NotFoundError(PlaylistLinkError):
    """Lookup yielded nothing."""

    error_code = "NOT_FOUND"


class ChannelNotFoundError(NotFoundError):
    """No channel matched the identifier."""

    error_code = "CHANNEL_NOT_FOUND"


class PlaylistNotFoundError(NotFoundError):
    """Playlist does not exist or is not visible."""

    error_code = "PLAYLIST_NOT_FOUND"


class SyncDataNotFoundError(NotFoundError):
    """Nothing has been uploaded to the sync slot yet."""

    error_code = "SYNC_DATA_NOT_FOUND"


class UpstreamError(PlaylistLinkError):
    """YouTube Data API call failed (transport, quota or malformed response)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
