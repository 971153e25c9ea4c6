"""Error bodies returned by the API.

Every failure carries a stable ``error_code`` and the request ID that also
appears in the ``X-Request-ID`` header and the server log.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Common error body. ``error`` is the category, ``error_code`` the specific cause."""

    error: str = Field(..., examples=["BAD_REQUEST"])
    error_code: str = Field(..., examples=["INVALID_PARAMETER"])
    message: str = Field(..., examples=["Handle is required"])
    details: dict[str, Any] | None = None
    request_id: str = Field(..., examples=["5b0f8f0e-6a55-4d0c-9a55-2f1f0c8f7a11"])
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class BadRequestErrorResponse(ErrorResponse):
    """Missing ``handle``, ``channelId`` or upload data."""

    error: str = Field(default="BAD_REQUEST", frozen=True)
    error_code: str = Field(default="INVALID_PARAMETER")


class ValidationErrorResponse(ErrorResponse):
    """Query or body of the wrong type, keyed by field location."""

    error: str = Field(default="VALIDATION_ERROR", frozen=True)
    details: dict[str, Any] = Field(default_factory=dict)  # type: ignore[assignment]


class NotFoundErrorResponse(ErrorResponse):
    """No channel matched, the playlist is gone, or the sync slot is empty."""

    error: str = Field(default="NOT_FOUND", frozen=True)
    error_code: str = Field(..., examples=["CHANNEL_NOT_FOUND", "PLAYLIST_NOT_FOUND", "SYNC_DATA_NOT_FOUND"])


class UpstreamErrorResponse(ErrorResponse):
    """The YouTube Data API call failed. Its status and reason stay in the log."""

    error: str = Field(default="UPSTREAM_ERROR", frozen=True)
    error_code: str = Field(default="EXTERNAL_SERVICE_ERROR", frozen=True)
    message: str = Field(default="Failed to fetch data from YouTube API.")


class InternalServerErrorResponse(ErrorResponse):
    """Unhandled exception or missing API key."""

    error: str = Field(default="INTERNAL_SERVER_ERROR", frozen=True)
    error_code: str = Field(default="INTERNAL_ERROR", frozen=True)
    message: str = Field(default="An unexpected error occurred. Please try again later.")


class ErrorCodes:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PARAMETER = "INVALID_PARAMETER"

    NOT_FOUND = "NOT_FOUND"
    CHANNEL_NOT_FOUND = "CHANNEL_NOT_FOUND"
    PLAYLIST_NOT_FOUND = "PLAYLIST_NOT_FOUND"
    SYNC_DATA_NOT_FOUND = "SYNC_DATA_NOT_FOUND"

    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
