"""YouTube channel resolution and playlist browsing."""

from .client import YouTubeClient
from .playlists import PlaylistLister
from .resolver import ChannelResolver, extract_channel_id, extract_handle, match_channel_id
from .schemas import (
    ChannelCandidate,
    ChannelCandidates,
    Page,
    PlaylistSummary,
    ResolvedChannel,
    VideoDetail,
    VideoPage,
)
from .videos import PlaylistVideoAggregator

__all__ = [
    # Client
    "YouTubeClient",
    # Resolver
    "ChannelResolver",
    "match_channel_id",
    "extract_channel_id",
    "extract_handle",
    # Listing
    "PlaylistLister",
    "PlaylistVideoAggregator",
    # Schemas
    "ResolvedChannel",
    "ChannelCandidate",
    "ChannelCandidates",
    "PlaylistSummary",
    "VideoDetail",
    "VideoPage",
    "Page",
]
