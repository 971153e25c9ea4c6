"""Playlist video endpoints."""

import logging

from fastapi import APIRouter, Depends, Path, Query

from playlist_link.api.dependencies import get_playlist_lister, get_video_aggregator
from playlist_link.api.models.requests import PlaylistVideosResponse
from playlist_link.youtube.playlists import PlaylistLister
from playlist_link.youtube.videos import PlaylistVideoAggregator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/playlist", tags=["playlists"])


@router.get(
    "/{playlist_id}",
    response_model=PlaylistVideosResponse,
    summary="List playlist videos",
    description="""
    Get one page of a playlist's videos with duration and publish date.

    Videos are returned in playlist order. Deleted and private videos are
    left out, so a page may hold fewer videos than `totalCount` suggests.

    **Pagination:**
    - Omit `pageToken` for the first page
    - Pass the returned `nextCursor` as `pageToken` for the next page
    - `nextCursor` is `null` on the last page
    """,
    operation_id="list_playlist_videos",
    responses={
        404: {"description": "Playlist not found"},
        500: {"description": "YouTube API failure"},
    },
)
async def list_playlist_videos(
    playlist_id: str = Path(
        ...,
        min_length=1,
        description="YouTube playlist ID",
        examples=["PLrAXtmErZgOeiKm4sgNOknGvNjby9efdf"],
    ),
    page_token: str | None = Query(
        default=None,
        alias="pageToken",
        description="Opaque cursor returned as nextCursor by the previous page",
    ),
    aggregator: PlaylistVideoAggregator = Depends(get_video_aggregator),
    lister: PlaylistLister = Depends(get_playlist_lister),
) -> PlaylistVideosResponse:
    """Get one page of playlist videos.

    Raises:
        PlaylistNotFoundError: If the playlist is unknown (404, first page only)
        UpstreamError: If the YouTube API fails (500)
    """
    playlist_title: str | None = None
    if not page_token:
        playlist_title = (await lister.get_playlist(playlist_id)).title

    page = await aggregator.fetch_page(playlist_id, cursor=page_token or None)

    return PlaylistVideosResponse(
        videos=page.videos,
        next_cursor=page.next_cursor,
        total_count=page.total_count,
        playlist_title=playlist_title,
    )
