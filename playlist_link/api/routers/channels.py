"""Channel endpoints.

This module provides endpoints for:
- Resolving a channel ID, URL, @handle or search text to a channel
- Listing all playlists of a channel
"""

import logging

from fastapi import APIRouter, Depends, Query

from playlist_link.api.dependencies import get_channel_resolver, get_playlist_lister
from playlist_link.api.models.requests import PlaylistsResponse
from playlist_link.core.exceptions import InvalidInputError
from playlist_link.youtube.playlists import PlaylistLister
from playlist_link.youtube.resolver import ChannelResolver
from playlist_link.youtube.schemas import ChannelCandidates, ResolvedChannel

logger = logging.getLogger(__name__)

router = APIRouter(tags=["channels"])


@router.get(
    "/find-channel",
    response_model=ResolvedChannel | ChannelCandidates,
    summary="Find channel",
    description="""
    Resolve a channel from user input.

    Accepted input, tried in this order:
    - Channel ID (`UC...`)
    - Channel URL (`https://www.youtube.com/channel/UC...`)
    - Handle (`@name` or `https://www.youtube.com/@name`)
    - Free-text search

    When search matches several channels the response is
    `{"multiple": true, "candidates": [...]}` and the client picks one.
    """,
    operation_id="find_channel",
    responses={
        200: {
            "description": "Resolved channel or disambiguation candidates",
            "content": {
                "application/json": {
                    "example": {
                        "id": "UCX6OQ3DkcsbYNE6H8uQQuVA",
                        "title": "MrBeast",
                        "thumbnailUrl": "https://yt3.ggpht.com/example=s88",
                        "description": "SUBSCRIBE FOR A COOKIE!",
                        "handle": "@mrbeast",
                        "videoCount": 812,
                    }
                }
            },
        },
        400: {"description": "Missing input"},
        404: {"description": "Channel not found"},
        500: {"description": "YouTube API failure"},
    },
)
async def find_channel(
    handle: str | None = Query(
        default=None,
        description="Channel ID, channel URL, @handle or search text",
        examples=["@mrbeast"],
    ),
    resolver: ChannelResolver = Depends(get_channel_resolver),
) -> ResolvedChannel | ChannelCandidates:
    """Resolve a channel identifier.

    Raises:
        InvalidInputError: If no input was given (400)
        ChannelNotFoundError: If nothing matches (404)
        UpstreamError: If the YouTube API fails (500)
    """
    if not handle or not handle.strip():
        raise InvalidInputError("Handle is required")

    return await resolver.resolve(handle)


@router.get(
    "/channel-playlists",
    response_model=PlaylistsResponse,
    summary="List channel playlists",
    description="List every public playlist of a channel, following all result pages.",
    operation_id="list_channel_playlists",
    responses={
        400: {"description": "Missing channel ID"},
        500: {"description": "YouTube API failure"},
    },
)
async def list_channel_playlists(
    channel_id: str | None = Query(
        default=None,
        alias="channelId",
        description="Canonical channel ID",
        examples=["UCX6OQ3DkcsbYNE6H8uQQuVA"],
    ),
    lister: PlaylistLister = Depends(get_playlist_lister),
) -> PlaylistsResponse:
    """List all playlists of a channel."""
    if not channel_id or not channel_id.strip():
        raise InvalidInputError("Channel ID is required")

    playlists = await lister.list_all(channel_id)
    return PlaylistsResponse(playlists=playlists)
