"""Async client for the YouTube Data API v3.

Thin typed façade over the read endpoints the service needs. Each public
method issues exactly one GET and returns the raw resources; projection into
schemas happens in the callers.
"""

import logging
import time
from collections.abc import Sequence
from typing import Any

import httpx

from playlist_link.core.config import Settings, get_settings
from playlist_link.core.constants import (
    CHANNEL_PARTS,
    DEFAULT_SEARCH_RESULTS,
    PLAYLIST_ITEM_PARTS,
    PLAYLIST_PARTS,
    VIDEO_PARTS,
    YOUTUBE_API_BASE_URL,
    YOUTUBE_MAX_IDS_PER_CALL,
    YOUTUBE_MAX_RESULTS,
)
from playlist_link.core.exceptions import ConfigurationError, UpstreamError
from playlist_link.core.http_session import get_client
from playlist_link.core.metrics import record_youtube_api_call
from playlist_link.youtube.schemas import Page

logger = logging.getLogger(__name__)

RawPage = Page[dict[str, Any]]


def _error_details(response: httpx.Response) -> tuple[str | None, str]:
    """Pull reason and message out of a Google API error body."""
    try:
        error = response.json().get("error") or {}
    except (ValueError, AttributeError):
        return None, response.reason_phrase or "unknown error"

    if not isinstance(error, dict):
        return None, str(error)

    errors = error.get("errors") or []
    reason = errors[0].get("reason") if errors and isinstance(errors[0], dict) else None
    return reason, error.get("message") or response.reason_phrase or "unknown error"


class YouTubeClient:
    """YouTube Data API client authenticated with an API key.

    Args:
        api_key: YouTube Data API key
        base_url: API root, without trailing slash
        http_client: Shared ``httpx.AsyncClient``; the cached "youtube" client
            is used when omitted
        timeout: Request timeout in seconds for the cached client
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = YOUTUBE_API_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ConfigurationError("YOUTUBE_API_KEY is not configured")

        self._api_key = api_key.strip()
        self.base_url = base_url.rstrip("/")
        self._http = http_client or get_client("youtube", timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "YouTubeClient":
        settings = settings or get_settings()
        return cls(
            api_key=settings.youtube_api_key,
            base_url=settings.youtube_api_base_url,
            timeout=settings.youtube_api_timeout,
        )

    async def _list(self, resource: str, params: dict[str, Any]) -> dict[str, Any]:
        """GET ``/{resource}`` and return the decoded JSON body.

        Raises:
            UpstreamError: On transport failure, non-2xx status or a body that
                is not a JSON object
        """
        operation = f"{resource}.list"
        query = {key: value for key, value in params.items() if value is not None}
        query["key"] = self._api_key

        start = time.perf_counter()
        try:
            response = await self._http.get(f"{self.base_url}/{resource}", params=query)
        except httpx.HTTPError as e:
            record_youtube_api_call(operation, time.perf_counter() - start, "transport_error")
            raise UpstreamError(f"{operation} request failed: {e}") from e

        duration = time.perf_counter() - start

        if response.is_error:
            reason, message = _error_details(response)
            record_youtube_api_call(operation, duration, "http_error")
            raise UpstreamError(
                f"{operation} returned HTTP {response.status_code}: {message}",
                status_code=response.status_code,
                reason=reason,
            )

        try:
            payload = response.json()
        except ValueError as e:
            record_youtube_api_call(operation, duration, "malformed")
            raise UpstreamError(f"{operation} returned invalid JSON") from e

        if not isinstance(payload, dict):
            record_youtube_api_call(operation, duration, "malformed")
            raise UpstreamError(f"{operation} returned an unexpected payload")

        record_youtube_api_call(operation, duration)
        logger.debug(
            "%s ok (%d items, %.0fms)", operation, len(payload.get("items") or []), duration * 1000
        )
        return payload

    @staticmethod
    def _page(payload: dict[str, Any]) -> RawPage:
        page_info = payload.get("pageInfo") or {}
        return RawPage(
            items=payload.get("items") or [],
            next_cursor=payload.get("nextPageToken") or None,
            total_count=page_info.get("totalResults"),
        )

    async def lookup_channel_by_id(self, channel_id: str) -> list[dict[str, Any]]:
        """channels.list by ID with snippet, statistics and contentDetails."""
        payload = await self._list("channels", {"part": CHANNEL_PARTS, "id": channel_id})
        return payload.get("items") or []

    async def lookup_channel_by_handle(self, handle: str) -> list[dict[str, Any]]:
        """channels.list by exact @handle; returns ID-only resources."""
        payload = await self._list("channels", {"part": "id", "forHandle": handle})
        return payload.get("items") or []

    async def search_channels(
        self,
        query: str,
        max_results: int = DEFAULT_SEARCH_RESULTS,
    ) -> list[dict[str, Any]]:
        """search.list restricted to channels."""
        payload = await self._list(
            "search",
            {
                "part": "snippet",
                "type": "channel",
                "q": query,
                "maxResults": max_results,
            },
        )
        return payload.get("items") or []

    async def list_playlists(
        self,
        channel_id: str,
        page_token: str | None = None,
        max_results: int = YOUTUBE_MAX_RESULTS,
    ) -> RawPage:
        """One page of a channel's playlists."""
        payload = await self._list(
            "playlists",
            {
                "part": PLAYLIST_PARTS,
                "channelId": channel_id,
                "maxResults": max_results,
                "pageToken": page_token,
            },
        )
        return self._page(payload)

    async def get_playlists(self, playlist_ids: Sequence[str]) -> list[dict[str, Any]]:
        """playlists.list by ID."""
        payload = await self._list(
            "playlists",
            {"part": PLAYLIST_PARTS, "id": ",".join(playlist_ids)},
        )
        return payload.get("items") or []

    async def list_playlist_items(
        self,
        playlist_id: str,
        page_token: str | None = None,
        max_results: int = YOUTUBE_MAX_RESULTS,
    ) -> RawPage:
        """One page of playlist membership entries in playlist position order."""
        payload = await self._list(
            "playlistItems",
            {
                "part": PLAYLIST_ITEM_PARTS,
                "playlistId": playlist_id,
                "maxResults": max_results,
                "pageToken": page_token,
            },
        )
        return self._page(payload)

    async def list_video_details(self, video_ids: Sequence[str]) -> list[dict[str, Any]]:
        """videos.list for up to 50 IDs. Result order is not guaranteed.

        Raises:
            ValueError: If more IDs are passed than one call accepts
        """
        if len(video_ids) > YOUTUBE_MAX_IDS_PER_CALL:
            raise ValueError(
                f"videos.list accepts at most {YOUTUBE_MAX_IDS_PER_CALL} ids, got {len(video_ids)}"
            )
        if not video_ids:
            return []

        payload = await self._list("videos", {"part": VIDEO_PARTS, "id": ",".join(video_ids)})
        return payload.get("items") or []
