"""Playlist Link - resolve YouTube channels and browse their playlists."""

from playlist_link.youtube import ChannelResolver, PlaylistLister, PlaylistVideoAggregator, YouTubeClient

__version__ = "1.0.0"
__all__ = ["ChannelResolver", "PlaylistLister", "PlaylistVideoAggregator", "YouTubeClient"]
