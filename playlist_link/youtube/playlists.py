"""Playlist listing for a channel."""

import logging

from playlist_link.core.constants import YOUTUBE_MAX_RESULTS
from playlist_link.core.exceptions import InvalidInputError, PlaylistNotFoundError
from playlist_link.youtube.client import YouTubeClient
from playlist_link.youtube.schemas import PlaylistSummary

logger = logging.getLogger(__name__)


class PlaylistLister:
    """Fetch playlist summaries from the YouTube Data API."""

    def __init__(self, client: YouTubeClient, page_size: int = YOUTUBE_MAX_RESULTS) -> None:
        self.client = client
        self.page_size = page_size

    async def list_all(self, channel_id: str) -> list[PlaylistSummary]:
        """
        List every playlist of a channel.

        Follows page cursors until the last page; playlists keep the order the
        API returns them in.

        Args:
            channel_id: Canonical channel ID

        Returns:
            All playlist summaries of the channel

        Raises:
            InvalidInputError: If the channel ID is blank
            UpstreamError: If any page request fails
        """
        channel_id = (channel_id or "").strip()
        if not channel_id:
            raise InvalidInputError("Channel ID is required")

        playlists: list[PlaylistSummary] = []
        page_token: str | None = None
        pages = 0

        while True:
            page = await self.client.list_playlists(
                channel_id,
                page_token=page_token,
                max_results=self.page_size,
            )
            pages += 1
            playlists.extend(PlaylistSummary.from_api(item) for item in page.items)

            page_token = page.next_cursor
            if not page_token:
                break

        logger.info(
            "Listed %d playlists for %s in %d page(s)",
            len(playlists),
            channel_id,
            pages,
            extra={"channel_id": channel_id, "playlists": len(playlists)},
        )
        return playlists

    async def get_playlist(self, playlist_id: str) -> PlaylistSummary:
        """
        Look up a single playlist.

        Raises:
            PlaylistNotFoundError: If the playlist does not exist or is private
        """
        items = await self.client.get_playlists([playlist_id])
        if not items:
            raise PlaylistNotFoundError(f"Playlist not found: {playlist_id}")
        return PlaylistSummary.from_api(items[0])
