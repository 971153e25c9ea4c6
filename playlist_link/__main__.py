"""Entry point for running the package as a module."""

from playlist_link.cli import app

if __name__ == "__main__":
    app()
