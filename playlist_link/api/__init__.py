"""REST API module for the playlist link service."""

from playlist_link.api.app import create_app

__all__ = ["create_app"]
