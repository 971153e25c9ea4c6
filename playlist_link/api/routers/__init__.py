"""API routers module."""

from playlist_link.api.routers.channels import router as channels_router
from playlist_link.api.routers.health import router as health_router
from playlist_link.api.routers.playlists import router as playlists_router
from playlist_link.api.routers.sync import router as sync_router

__all__ = [
    "channels_router",
    "playlists_router",
    "sync_router",
    "health_router",
]
