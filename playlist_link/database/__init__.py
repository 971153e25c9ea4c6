"""In-process storage for the playlist link service."""

from playlist_link.database.sync_store import SyncStore, get_sync_store

__all__ = ["SyncStore", "get_sync_store"]
