"""CLI for the playlist link service."""

import asyncio
import json
from collections.abc import Awaitable
from typing import Any, TypeVar

import typer
from pydantic import BaseModel
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from playlist_link.core.config import Settings, get_settings_with_yaml
from playlist_link.core.exceptions import PlaylistLinkError
from playlist_link.core.http_session import close_all_clients
from playlist_link.core.logging_config import setup_logging
from playlist_link.youtube import (
    ChannelCandidates,
    ChannelResolver,
    PlaylistLister,
    PlaylistVideoAggregator,
    ResolvedChannel,
    VideoDetail,
    YouTubeClient,
)

T = TypeVar("T")

app = typer.Typer(help="Playlist Link - find YouTube channels and browse their playlists")
channel_app = typer.Typer(help="Channel commands")
playlist_app = typer.Typer(help="Playlist commands")
app.add_typer(channel_app, name="channel")
app.add_typer(playlist_app, name="playlist")
console = Console()


def _run(coro: Awaitable[T]) -> T:
    """Run a coroutine and close pooled HTTP clients afterwards."""

    async def _wrapper() -> T:
        try:
            return await coro
        finally:
            await close_all_clients()

    return asyncio.run(_wrapper())


def _settings() -> Settings:
    settings = get_settings_with_yaml()
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    return settings


def _client(settings: Settings) -> YouTubeClient:
    return YouTubeClient.from_settings(settings)


def _print_json(data: BaseModel | list[BaseModel] | dict[str, Any]) -> None:
    if isinstance(data, BaseModel):
        payload: Any = data.model_dump(mode="json", by_alias=True)
    elif isinstance(data, list):
        payload = [item.model_dump(mode="json", by_alias=True) for item in data]
    else:
        payload = data
    console.print_json(json.dumps(payload, ensure_ascii=False))


def _fail(e: Exception) -> typer.Exit:
    rprint(f"[red]✗ Error: {escape(str(e))}[/red]")
    return typer.Exit(1)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, help="Port (default from settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the HTTP API server."""
    import uvicorn

    settings = _settings()

    uvicorn.run(
        "playlist_link.api.app:create_app",
        factory=True,
        host=host or settings.server_host,
        port=port or settings.server_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@channel_app.command("find")
def channel_find(
    identifier: str = typer.Argument(..., help="Channel ID, channel URL, @handle or search text"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Resolve a channel."""
    try:
        settings = _settings()
        resolver = ChannelResolver(_client(settings), search_max_results=settings.youtube_search_max_results)
        result = _run(resolver.resolve(identifier))
    except PlaylistLinkError as e:
        raise _fail(e) from e

    if as_json:
        _print_json(result)
        return

    if isinstance(result, ChannelCandidates):
        _display_candidates(result)
    else:
        _display_channel(result)


def _display_channel(channel: ResolvedChannel) -> None:
    rprint(f"\n[bold blue]📺 {escape(channel.title)}[/bold blue]\n")

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan", width=14)
    table.add_column("Value", style="white")

    table.add_row("Channel ID", channel.id)
    table.add_row("Handle", channel.handle or "N/A")
    table.add_row("Videos", f"{channel.video_count:,}")
    table.add_row("Thumbnail", channel.thumbnail_url or "N/A")
    description = channel.description.strip().splitlines()
    table.add_row("Description", escape(description[0][:80]) if description else "")

    console.print(table)


def _display_candidates(result: ChannelCandidates) -> None:
    rprint(f"\n[yellow]Several channels match ({len(result.candidates)}). Pick one by ID:[/yellow]\n")

    table = Table()
    table.add_column("#", style="dim", justify="right")
    table.add_column("Channel ID", style="cyan")
    table.add_column("Title", style="white", max_width=40)

    for i, candidate in enumerate(result.candidates, 1):
        table.add_row(str(i), candidate.id, escape(candidate.title))

    console.print(table)


@channel_app.command("playlists")
def channel_playlists(
    channel_id: str = typer.Argument(..., help="Canonical channel ID (UC...)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """List all playlists of a channel."""
    try:
        settings = _settings()
        lister = PlaylistLister(_client(settings), page_size=settings.youtube_page_size)
        playlists = _run(lister.list_all(channel_id))
    except PlaylistLinkError as e:
        raise _fail(e) from e

    if as_json:
        _print_json({"playlists": [p.model_dump(mode="json", by_alias=True) for p in playlists]})
        return

    if not playlists:
        rprint("\n[yellow]This channel has no public playlists.[/yellow]\n")
        return

    table = Table(title="Playlists")
    table.add_column("Playlist ID", style="cyan")
    table.add_column("Title", style="white", max_width=50)
    table.add_column("Videos", style="green", justify="right")

    for playlist in playlists:
        table.add_row(playlist.id, escape(playlist.title), str(playlist.item_count))

    console.print(table)
    rprint(f"\n[green]Total: {len(playlists)} playlist(s)[/green]\n")


@playlist_app.command("videos")
def playlist_videos(
    playlist_id: str = typer.Argument(..., help="YouTube playlist ID"),
    page_token: str | None = typer.Option(None, "--page-token", help="Cursor of the page to show"),
    fetch_all: bool = typer.Option(False, "--all", help="Follow cursors until the last page"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """Show playlist videos, one page or all of them."""
    try:
        settings = _settings()
        aggregator = PlaylistVideoAggregator(_client(settings), page_size=settings.youtube_page_size)

        async def _collect() -> tuple[list[VideoDetail], str | None, int]:
            videos: list[VideoDetail] = []
            cursor = page_token
            while True:
                page = await aggregator.fetch_page(playlist_id, cursor)
                videos.extend(page.videos)
                cursor = page.next_cursor
                if not fetch_all or not cursor:
                    return videos, cursor, page.total_count

        videos, next_cursor, total_count = _run(_collect())
    except PlaylistLinkError as e:
        raise _fail(e) from e

    if as_json:
        _print_json(
            {
                "videos": [v.model_dump(mode="json", by_alias=True) for v in videos],
                "nextCursor": next_cursor,
                "totalCount": total_count,
            }
        )
        return

    table = Table(title=f"Playlist {playlist_id}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Video ID", style="cyan")
    table.add_column("Title", style="white", max_width=50)
    table.add_column("Duration", style="green")
    table.add_column("Published", style="dim")

    for i, video in enumerate(videos, 1):
        published = video.published_at.date().isoformat() if video.published_at else "N/A"
        table.add_row(str(i), video.id, escape(video.title), video.duration, published)

    console.print(table)
    rprint(f"\n[green]{len(videos)} of {total_count} video(s)[/green]")
    if next_cursor:
        rprint(f"[dim]Next page: --page-token {next_cursor}[/dim]\n")


if __name__ == "__main__":
    app()
