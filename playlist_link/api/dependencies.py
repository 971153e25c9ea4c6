"""FastAPI dependencies for the API module.

Routers receive their collaborators through these functions, so tests can
swap the YouTube client with ``app.dependency_overrides``.
"""

from fastapi import Depends

from playlist_link.core.config import Settings, get_settings
from playlist_link.database.sync_store import SyncStore, get_sync_store
from playlist_link.youtube.client import YouTubeClient
from playlist_link.youtube.playlists import PlaylistLister
from playlist_link.youtube.resolver import ChannelResolver
from playlist_link.youtube.videos import PlaylistVideoAggregator


def get_settings_dep() -> Settings:
    """Dependency to get application settings."""
    return get_settings()


def get_youtube_client(settings: Settings = Depends(get_settings_dep)) -> YouTubeClient:
    """Dependency to get a YouTube Data API client.

    Raises:
        ConfigurationError: If no API key is configured
    """
    return YouTubeClient.from_settings(settings)


def get_channel_resolver(
    client: YouTubeClient = Depends(get_youtube_client),
    settings: Settings = Depends(get_settings_dep),
) -> ChannelResolver:
    return ChannelResolver(client, search_max_results=settings.youtube_search_max_results)


def get_playlist_lister(
    client: YouTubeClient = Depends(get_youtube_client),
    settings: Settings = Depends(get_settings_dep),
) -> PlaylistLister:
    return PlaylistLister(client, page_size=settings.youtube_page_size)


def get_video_aggregator(
    client: YouTubeClient = Depends(get_youtube_client),
    settings: Settings = Depends(get_settings_dep),
) -> PlaylistVideoAggregator:
    return PlaylistVideoAggregator(client, page_size=settings.youtube_page_size)


def get_sync_store_dep() -> SyncStore:
    """Dependency to get the process-wide sync store."""
    return get_sync_store()
