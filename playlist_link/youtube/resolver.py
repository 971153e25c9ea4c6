"""Channel resolver - turns a channel ID, URL, @handle or search text into a channel.

Strategies run in order of cost and precision:

1. canonical channel ID (no API call)
2. ``/channel/UC...`` URL (no API call)
3. exact @handle lookup (one call; failures fall through)
4. free-text search (one call; several hits end resolution with candidates)

Whatever ID the first decisive strategy yields is then expanded into full
channel details with one more call.
"""

import logging
from collections.abc import Awaitable, Callable
from urllib.parse import unquote

from playlist_link.core.constants import (
    CHANNEL_ID_RE,
    CHANNEL_URL_RE,
    DEFAULT_SEARCH_RESULTS,
    HANDLE_URL_RE,
)
from playlist_link.core.exceptions import ChannelNotFoundError, InvalidInputError, UpstreamError
from playlist_link.core.logging_config import log_resolution_event
from playlist_link.youtube.client import YouTubeClient
from playlist_link.youtube.schemas import (
    ChannelCandidate,
    ChannelCandidates,
    ResolvedChannel,
    channel_id_from_search_item,
)

logger = logging.getLogger(__name__)

# A strategy yields a channel ID, a terminal candidates outcome, or None to fall through
StrategyResult = str | ChannelCandidates | None
Strategy = Callable[[str], Awaitable[StrategyResult]]


def match_channel_id(identifier: str) -> str | None:
    """Return the identifier if it already is a canonical channel ID."""
    return identifier if CHANNEL_ID_RE.match(identifier) else None


def extract_channel_id(url: str) -> str | None:
    """Extract the channel ID embedded in a ``channel/UC...`` URL path."""
    match = CHANNEL_URL_RE.search(url)
    return match.group(1) if match else None


def extract_handle(identifier: str) -> str | None:
    """Return the @handle of a bare handle or of a ``youtube.com/@name`` URL."""
    if identifier.startswith("@"):
        return identifier
    if identifier.startswith(("http://", "https://", "www.", "youtube.com", "m.youtube.com")):
        match = HANDLE_URL_RE.search(identifier)
        if match:
            return unquote(match.group(1))
    return None


class ChannelResolver:
    """Resolve free-form channel input to a canonical channel.

    Args:
        client: YouTube Data API client
        search_max_results: Number of search hits requested for disambiguation
    """

    def __init__(
        self,
        client: YouTubeClient,
        search_max_results: int = DEFAULT_SEARCH_RESULTS,
    ) -> None:
        self.client = client
        self.search_max_results = search_max_results

    async def resolve(self, raw: str) -> ResolvedChannel | ChannelCandidates:
        """
        Resolve a channel identifier.

        Args:
            raw: Channel ID, channel URL, @handle or free text

        Returns:
            The resolved channel, or the candidates when search is ambiguous

        Raises:
            InvalidInputError: If the input is blank
            ChannelNotFoundError: If nothing matches
            UpstreamError: If a YouTube API call fails (handle lookup excepted)
        """
        identifier = (raw or "").strip()
        if not identifier:
            raise InvalidInputError("Channel identifier is required")

        strategies: list[tuple[str, Strategy]] = [
            ("channel_id", self._from_channel_id),
            ("channel_url", self._from_channel_url),
            ("handle", self._from_handle),
            ("search", self._from_search),
        ]

        for name, strategy in strategies:
            outcome = await strategy(identifier)
            if outcome is None:
                continue
            if isinstance(outcome, ChannelCandidates):
                return outcome
            log_resolution_event(logger, identifier, name, "resolved", channel_id=outcome)
            return await self.fetch_channel(outcome)

        log_resolution_event(logger, identifier, "search", "not_found")
        raise ChannelNotFoundError(f"Channel not found: {identifier}")

    async def fetch_channel(self, channel_id: str) -> ResolvedChannel:
        """
        Fetch full details for a canonical channel ID.

        Raises:
            ChannelNotFoundError: If the ID matches no channel
        """
        items = await self.client.lookup_channel_by_id(channel_id)
        if not items:
            log_resolution_event(logger, channel_id, "details", "not_found")
            raise ChannelNotFoundError(f"Channel not found: {channel_id}")
        return ResolvedChannel.from_api(items[0])

    async def _from_channel_id(self, identifier: str) -> StrategyResult:
        return match_channel_id(identifier)

    async def _from_channel_url(self, identifier: str) -> StrategyResult:
        if "channel/" not in identifier:
            return None
        channel_id = extract_channel_id(identifier)
        if channel_id is None:
            log_resolution_event(logger, identifier, "channel_url", "skipped")
        return channel_id

    async def _from_handle(self, identifier: str) -> StrategyResult:
        handle = extract_handle(identifier)
        if handle is None:
            return None

        try:
            items = await self.client.lookup_channel_by_handle(handle)
        except UpstreamError as e:
            # Exact-handle lookup has false negatives; search may still find it
            log_resolution_event(logger, identifier, "handle", "failed", error=str(e))
            return None

        if not items or not items[0].get("id"):
            log_resolution_event(logger, identifier, "handle", "not_found")
            return None
        return items[0]["id"]

    async def _from_search(self, identifier: str) -> StrategyResult:
        items = await self.client.search_channels(identifier, max_results=self.search_max_results)

        if not items:
            return None
        if len(items) == 1:
            return channel_id_from_search_item(items[0])

        log_resolution_event(logger, identifier, "search", "ambiguous", candidates=len(items))
        return ChannelCandidates(
            candidates=[ChannelCandidate.from_search_item(item) for item in items]
        )
