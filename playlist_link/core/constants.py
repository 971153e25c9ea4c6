"""Application constants and metadata.

This module centralizes all application-wide constants for:
- Application metadata
- YouTube Data API limits and identifier patterns
- API tags
"""

import re
from datetime import datetime, timezone

# Application start time (for uptime calculation)
START_TIME = datetime.now(timezone.utc)

# =============================================================================
# Application Metadata
# =============================================================================

APP_NAME = "Playlist Link API"
APP_DESCRIPTION = """
Find a YouTube channel, browse its playlists and page through playlist videos.

## Features

- **Channel Lookup**: Resolve a channel ID, channel URL, @handle or free-text query
- **Playlists**: List every playlist of a channel
- **Playlist Videos**: Page through a playlist with durations and publish dates
- **Sync Slot**: Upload and download a single JSON document
"""
APP_VERSION = "1.0.0"

API_PREFIX = "/api"

# =============================================================================
# YouTube Data API
# =============================================================================

YOUTUBE_API_BASE_URL = "https://www.googleapis.com/youtube/v3"

# Upper bound the API accepts for maxResults and for comma-joined id lists
YOUTUBE_MAX_RESULTS = 50
YOUTUBE_MAX_IDS_PER_CALL = 50

DEFAULT_SEARCH_RESULTS = 10

CHANNEL_ID_RE = re.compile(r"^UC[A-Za-z0-9_-]{20,}$")
CHANNEL_URL_RE = re.compile(r"channel/(UC[A-Za-z0-9_-]{22})(?![A-Za-z0-9_-])")
# Handles may hold any letters, so capture up to the next path, query or fragment delimiter
HANDLE_URL_RE = re.compile(r"/(@[^/?#\s]+)")

CHANNEL_PARTS = "snippet,statistics,contentDetails"
PLAYLIST_PARTS = "snippet,contentDetails"
PLAYLIST_ITEM_PARTS = "snippet,contentDetails"
VIDEO_PARTS = "snippet,contentDetails"

# =============================================================================
# API Tags and Descriptions
# =============================================================================

API_TAGS = [
    {
        "name": "channels",
        "description": "Channel lookup and playlist listing endpoints.",
    },
    {
        "name": "playlists",
        "description": "Paginated playlist video listing.",
    },
    {
        "name": "sync",
        "description": "Single-slot upload/download of client data.",
    },
    {
        "name": "health",
        "description": "Health check and monitoring endpoints.",
    },
]
