"""Pytest fixtures and configuration.

This module provides:
- An in-memory stand-in for the YouTube Data API client
- Builders for raw YouTube API resources
- Test client for FastAPI wired to the fake client
- A clean sync store for every test
"""

from collections.abc import Generator, Sequence
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from playlist_link.api.app import create_app
from playlist_link.api.dependencies import get_settings_dep, get_youtube_client
from playlist_link.core.config import Settings
from playlist_link.database.sync_store import SyncStore, get_sync_store
from playlist_link.youtube.client import RawPage

# =============================================================================
# Test Data
# =============================================================================

MRBEAST_ID = "UCX6OQ3DkcsbYNE6H8uQQuVA"
GOOGLE_DEV_ID = "UC_x5XG1OV2P6uZZ5FSM9Ttw"
OTHER_CHANNEL_ID = "UCBcRF18a7Qf58cCRy5xuWwQ"


def thumbnails(*sizes: str, prefix: str = "https://i.ytimg.com/t") -> dict[str, Any]:
    return {size: {"url": f"{prefix}/{size}.jpg"} for size in sizes}


def channel_item(
    channel_id: str,
    title: str = "Some Channel",
    *,
    handle: str | None = "@somechannel",
    video_count: Any = "42",
    description: str = "About this channel",
) -> dict[str, Any]:
    snippet: dict[str, Any] = {
        "title": title,
        "description": description,
        "thumbnails": thumbnails("default", "medium", "high"),
    }
    if handle:
        snippet["customUrl"] = handle
    statistics = {} if video_count is None else {"videoCount": video_count}
    return {"kind": "youtube#channel", "id": channel_id, "snippet": snippet, "statistics": statistics}


def search_item(channel_id: str, title: str = "Search Hit") -> dict[str, Any]:
    return {
        "kind": "youtube#searchResult",
        "id": {"kind": "youtube#channel", "channelId": channel_id},
        "snippet": {
            "channelId": channel_id,
            "title": title,
            "description": f"{title} description",
            "thumbnails": thumbnails("default", "medium"),
        },
    }


def playlist_item(playlist_id: str, title: str = "Playlist", item_count: int = 3) -> dict[str, Any]:
    return {
        "kind": "youtube#playlist",
        "id": playlist_id,
        "snippet": {"title": title, "thumbnails": thumbnails("default", "medium")},
        "contentDetails": {"itemCount": item_count},
    }


def playlist_entry(video_id: str | None) -> dict[str, Any]:
    """A playlistItems resource; ``None`` builds a placeholder without a video."""
    resource: dict[str, Any] = {"kind": "youtube#video"}
    if video_id:
        resource["videoId"] = video_id
    entry: dict[str, Any] = {
        "kind": "youtube#playlistItem",
        "snippet": {"title": "entry", "resourceId": resource},
    }
    if video_id:
        entry["contentDetails"] = {"videoId": video_id}
    return entry


def video_item(
    video_id: str,
    title: str | None = None,
    duration: str = "PT4M13S",
    published_at: str = "2024-01-15T10:00:00Z",
) -> dict[str, Any]:
    return {
        "kind": "youtube#video",
        "id": video_id,
        "snippet": {
            "title": title or f"Video {video_id}",
            "publishedAt": published_at,
            "thumbnails": thumbnails("default", "medium"),
        },
        "contentDetails": {"duration": duration},
    }


# =============================================================================
# Fake YouTube client
# =============================================================================


class FakeYouTubeClient:
    """In-memory replacement for ``YouTubeClient``.

    Pages are keyed by ``(owner_id, page_token)``; the first page has token
    ``None``. Every call is recorded in ``calls`` as ``(method, args)``.
    ``videos.list`` answers in reverse request order, the way the real API
    is free to.
    """

    def __init__(self) -> None:
        self.channels: dict[str, dict[str, Any]] = {}
        self.handles: dict[str, str] = {}
        self.search_results: dict[str, list[dict[str, Any]]] = {}
        self.playlists: dict[str, dict[str, Any]] = {}
        self.playlist_pages: dict[tuple[str, str | None], RawPage] = {}
        self.item_pages: dict[tuple[str, str | None], RawPage] = {}
        self.videos: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, Any]] = []
        self._failures: dict[str, tuple[Exception, int]] = {}

    # -- setup helpers --------------------------------------------------------

    def add_channel(self, item: dict[str, Any]) -> None:
        self.channels[item["id"]] = item
        handle = (item.get("snippet") or {}).get("customUrl")
        if handle:
            self.handles[handle.lower()] = item["id"]

    def add_playlists(self, channel_id: str, pages: Sequence[Sequence[dict[str, Any]]]) -> None:
        total = sum(len(page) for page in pages)
        self._paginate(self.playlist_pages, channel_id, pages, total)
        for page in pages:
            for item in page:
                self.playlists[item["id"]] = item

    def add_playlist_items(
        self,
        playlist_id: str,
        pages: Sequence[Sequence[dict[str, Any]]],
        total: int | None = None,
    ) -> None:
        total = sum(len(page) for page in pages) if total is None else total
        self._paginate(self.item_pages, playlist_id, pages, total)

    def add_videos(self, *items: dict[str, Any]) -> None:
        for item in items:
            self.videos[item["id"]] = item

    def fail(self, method: str, exc: Exception, after: int = 0) -> None:
        """Make ``method`` raise ``exc`` once it has succeeded ``after`` times."""
        self._failures[method] = (exc, after)

    def calls_to(self, method: str) -> list[Any]:
        return [args for name, args in self.calls if name == method]

    @staticmethod
    def _paginate(
        store: dict[tuple[str, str | None], RawPage],
        key: str,
        pages: Sequence[Sequence[dict[str, Any]]],
        total: int,
    ) -> None:
        for index, items in enumerate(pages):
            token = None if index == 0 else f"{key}-page-{index + 1}"
            next_token = f"{key}-page-{index + 2}" if index + 1 < len(pages) else None
            store[(key, token)] = RawPage(items=list(items), next_cursor=next_token, total_count=total)

    def _record(self, method: str, args: Any) -> None:
        self.calls.append((method, args))
        if method in self._failures:
            exc, after = self._failures[method]
            if len(self.calls_to(method)) > after:
                raise exc

    # -- client interface -----------------------------------------------------

    async def lookup_channel_by_id(self, channel_id: str) -> list[dict[str, Any]]:
        self._record("lookup_channel_by_id", channel_id)
        item = self.channels.get(channel_id)
        return [item] if item else []

    async def lookup_channel_by_handle(self, handle: str) -> list[dict[str, Any]]:
        self._record("lookup_channel_by_handle", handle)
        channel_id = self.handles.get(handle.lower())
        return [{"kind": "youtube#channel", "id": channel_id}] if channel_id else []

    async def search_channels(self, query: str, max_results: int = 10) -> list[dict[str, Any]]:
        self._record("search_channels", (query, max_results))
        return list(self.search_results.get(query, []))[:max_results]

    async def list_playlists(
        self,
        channel_id: str,
        page_token: str | None = None,
        max_results: int = 50,
    ) -> RawPage:
        self._record("list_playlists", (channel_id, page_token, max_results))
        return self.playlist_pages.get((channel_id, page_token)) or RawPage(total_count=0)

    async def get_playlists(self, playlist_ids: Sequence[str]) -> list[dict[str, Any]]:
        self._record("get_playlists", list(playlist_ids))
        return [self.playlists[pid] for pid in playlist_ids if pid in self.playlists]

    async def list_playlist_items(
        self,
        playlist_id: str,
        page_token: str | None = None,
        max_results: int = 50,
    ) -> RawPage:
        self._record("list_playlist_items", (playlist_id, page_token, max_results))
        return self.item_pages.get((playlist_id, page_token)) or RawPage(total_count=0)

    async def list_video_details(self, video_ids: Sequence[str]) -> list[dict[str, Any]]:
        self._record("list_video_details", list(video_ids))
        assert len(video_ids) <= 50, "videos.list accepts at most 50 ids"
        found = [self.videos[vid] for vid in video_ids if vid in self.videos]
        return list(reversed(found))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_youtube() -> FakeYouTubeClient:
    """Create an empty fake YouTube client."""
    return FakeYouTubeClient()


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: API key set, no metrics endpoint, no static files."""
    return Settings(youtube_api_key="test-key", prometheus_enabled=False, static_dir=None)


@pytest.fixture(autouse=True)
def sync_store() -> Generator[SyncStore, None, None]:
    """Provide the global sync store, emptied before and after each test."""
    store = get_sync_store()
    store.clear()
    yield store
    store.clear()


@pytest.fixture
def app(fake_youtube: FakeYouTubeClient, test_settings: Settings) -> Generator[FastAPI, None, None]:
    """Create FastAPI application wired to the fake YouTube client.

    Yields:
        FastAPI application instance
    """
    test_app = create_app(test_settings)
    test_app.dependency_overrides[get_settings_dep] = lambda: test_settings
    test_app.dependency_overrides[get_youtube_client] = lambda: fake_youtube
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create test client for FastAPI application.

    Args:
        app: FastAPI application

    Yields:
        TestClient instance
    """
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
