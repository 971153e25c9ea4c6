"""Playlist video pages with merged per-video details."""

import logging
from collections.abc import Iterator, Sequence
from typing import TypeVar

from playlist_link.core.constants import YOUTUBE_MAX_IDS_PER_CALL, YOUTUBE_MAX_RESULTS
from playlist_link.youtube.client import YouTubeClient
from playlist_link.youtube.schemas import VideoDetail, VideoPage, video_id_from_playlist_item

logger = logging.getLogger(__name__)

T = TypeVar("T")


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield successive ``size``-length slices of ``items``."""
    for i in range(0, len(items), size):
        yield items[i : i + size]


class PlaylistVideoAggregator:
    """Build playlist pages of detailed videos in playlist order.

    Each call handles a single page; callers paginate by passing the returned
    ``next_cursor`` back in.
    """

    def __init__(self, client: YouTubeClient, page_size: int = YOUTUBE_MAX_RESULTS) -> None:
        self.client = client
        self.page_size = page_size

    async def fetch_page(self, playlist_id: str, cursor: str | None = None) -> VideoPage:
        """
        Fetch one page of a playlist with video details.

        Args:
            playlist_id: YouTube playlist ID
            cursor: Opaque page token from a previous page, None for the first

        Returns:
            Videos in playlist position order, the forward cursor and the
            playlist's total membership count

        Raises:
            UpstreamError: If any API call fails; no partial page is returned
        """
        page = await self.client.list_playlist_items(
            playlist_id,
            page_token=cursor,
            max_results=self.page_size,
        )
        total_count = page.total_count or 0

        if not page.items:
            return VideoPage(videos=[], next_cursor=None, total_count=total_count)

        # Deleted and private placeholders carry no video reference
        video_ids = [
            video_id
            for video_id in (video_id_from_playlist_item(item) for item in page.items)
            if video_id
        ]

        details: dict[str, VideoDetail] = {}
        for batch in chunked(video_ids, YOUTUBE_MAX_IDS_PER_CALL):
            for item in await self.client.list_video_details(batch):
                detail = VideoDetail.from_api(item)
                details[detail.id] = detail

        # videos.list does not preserve request order; playlist order wins
        videos = [details[video_id] for video_id in video_ids if video_id in details]

        dropped = len(page.items) - len(videos)
        if dropped:
            logger.debug(
                "Dropped %d unavailable entries from playlist %s page",
                dropped,
                playlist_id,
            )

        return VideoPage(videos=videos, next_cursor=page.next_cursor, total_count=total_count)
