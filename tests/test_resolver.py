"""Tests for channel resolution.

This module tests:
- Identifier helpers (channel ID, channel URL, @handle)
- Strategy order and short-circuiting
- Handle lookup failures falling through to search
- Search outcomes (none, one, several)
"""

import pytest
from conftest import (
    GOOGLE_DEV_ID,
    MRBEAST_ID,
    OTHER_CHANNEL_ID,
    FakeYouTubeClient,
    channel_item,
    search_item,
)

from playlist_link.core.exceptions import ChannelNotFoundError, InvalidInputError, UpstreamError
from playlist_link.youtube.resolver import (
    ChannelResolver,
    extract_channel_id,
    extract_handle,
    match_channel_id,
)
from playlist_link.youtube.schemas import ChannelCandidates, ResolvedChannel


@pytest.fixture
def resolver(fake_youtube: FakeYouTubeClient) -> ChannelResolver:
    fake_youtube.add_channel(channel_item(MRBEAST_ID, "MrBeast", handle="@mrbeast", video_count="812"))
    fake_youtube.add_channel(channel_item(GOOGLE_DEV_ID, "Google for Developers", handle="@googledevelopers"))
    return ChannelResolver(fake_youtube)


class TestIdentifierHelpers:
    """Test the pure identifier parsing helpers."""

    def test_match_channel_id(self) -> None:
        assert match_channel_id(MRBEAST_ID) == MRBEAST_ID
        assert match_channel_id("UCshort") is None
        assert match_channel_id("mrbeast") is None

    def test_extract_channel_id_from_url(self) -> None:
        url = f"https://www.youtube.com/channel/{MRBEAST_ID}/videos"
        assert extract_channel_id(url) == MRBEAST_ID

    def test_extract_channel_id_without_match(self) -> None:
        assert extract_channel_id("https://www.youtube.com/channel/not-an-id") is None

    def test_extract_channel_id_rejects_overlong_id(self) -> None:
        assert extract_channel_id(f"https://www.youtube.com/channel/{MRBEAST_ID}X") is None
        assert extract_channel_id(f"https://www.youtube.com/channel/{MRBEAST_ID}?view=0") == MRBEAST_ID

    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("@mrbeast", "@mrbeast"),
            ("https://www.youtube.com/@mrbeast", "@mrbeast"),
            ("https://youtube.com/@mr.beast_6000/videos", "@mr.beast_6000"),
            ("youtube.com/@mrbeast", "@mrbeast"),
            ("https://www.youtube.com/@mrbeast?si=abc", "@mrbeast"),
            ("https://www.youtube.com/@abc한글채널", "@abc한글채널"),
            ("https://www.youtube.com/@%ED%95%9C%EA%B8%80/videos", "@한글"),
            ("mrbeast", None),
            ("cooking @home", None),
        ],
    )
    def test_extract_handle(self, identifier: str, expected: str | None) -> None:
        assert extract_handle(identifier) == expected


class TestResolveShortcuts:
    """Channel IDs and channel URLs never hit handle lookup or search."""

    async def test_canonical_id(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        result = await resolver.resolve(MRBEAST_ID)

        assert isinstance(result, ResolvedChannel)
        assert result.id == MRBEAST_ID
        assert result.title == "MrBeast"
        assert result.handle == "@mrbeast"
        assert result.video_count == 812
        assert fake_youtube.calls_to("lookup_channel_by_handle") == []
        assert fake_youtube.calls_to("search_channels") == []
        assert fake_youtube.calls_to("lookup_channel_by_id") == [MRBEAST_ID]

    async def test_channel_url(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        result = await resolver.resolve(f"https://www.youtube.com/channel/{GOOGLE_DEV_ID}")

        assert isinstance(result, ResolvedChannel)
        assert result.id == GOOGLE_DEV_ID
        assert fake_youtube.calls_to("search_channels") == []

    async def test_overlong_channel_url_is_not_truncated(
        self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient
    ) -> None:
        url = f"https://www.youtube.com/channel/{MRBEAST_ID}X"

        with pytest.raises(ChannelNotFoundError):
            await resolver.resolve(url)

        assert fake_youtube.calls_to("lookup_channel_by_id") == []
        assert fake_youtube.calls_to("search_channels") == [(url, 10)]

    async def test_input_is_trimmed(self, resolver: ChannelResolver) -> None:
        result = await resolver.resolve(f"  {MRBEAST_ID}\n")

        assert isinstance(result, ResolvedChannel)
        assert result.id == MRBEAST_ID

    async def test_unknown_canonical_id(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        with pytest.raises(ChannelNotFoundError):
            await resolver.resolve(OTHER_CHANNEL_ID)

        assert fake_youtube.calls_to("search_channels") == []

    @pytest.mark.parametrize("raw", ["", "   ", None])
    async def test_blank_input(self, resolver: ChannelResolver, raw: str | None) -> None:
        with pytest.raises(InvalidInputError):
            await resolver.resolve(raw)  # type: ignore[arg-type]


class TestResolveHandle:
    """Exact @handle lookup."""

    async def test_handle(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        result = await resolver.resolve("@mrbeast")

        assert isinstance(result, ResolvedChannel)
        assert result.id == MRBEAST_ID
        assert fake_youtube.calls_to("lookup_channel_by_handle") == ["@mrbeast"]
        assert fake_youtube.calls_to("search_channels") == []

    async def test_handle_url(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        result = await resolver.resolve("https://www.youtube.com/@googledevelopers/featured")

        assert isinstance(result, ResolvedChannel)
        assert result.id == GOOGLE_DEV_ID
        assert fake_youtube.calls_to("lookup_channel_by_handle") == ["@googledevelopers"]

    async def test_non_ascii_handle_url(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        fake_youtube.add_channel(channel_item(OTHER_CHANNEL_ID, "Korean Channel", handle="@abc한글채널"))
        fake_youtube.add_channel(channel_item("UCabcdefghijklmnopqrstuv", "Prefix Only", handle="@abc"))

        result = await resolver.resolve("https://www.youtube.com/@abc한글채널")

        assert isinstance(result, ResolvedChannel)
        assert result.id == OTHER_CHANNEL_ID
        assert fake_youtube.calls_to("lookup_channel_by_handle") == ["@abc한글채널"]

    async def test_percent_encoded_handle_url(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        fake_youtube.add_channel(channel_item(OTHER_CHANNEL_ID, "Korean Channel", handle="@한글"))

        result = await resolver.resolve("https://www.youtube.com/@%ED%95%9C%EA%B8%80")

        assert isinstance(result, ResolvedChannel)
        assert result.id == OTHER_CHANNEL_ID
        assert fake_youtube.calls_to("search_channels") == []

    async def test_unknown_handle_falls_through_to_search(
        self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient
    ) -> None:
        fake_youtube.search_results["@beast"] = [search_item(MRBEAST_ID, "MrBeast")]

        result = await resolver.resolve("@beast")

        assert isinstance(result, ResolvedChannel)
        assert result.id == MRBEAST_ID
        # The search query keeps the leading "@"
        assert fake_youtube.calls_to("search_channels") == [("@beast", 10)]

    async def test_handle_lookup_error_falls_through_to_search(
        self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient
    ) -> None:
        fake_youtube.fail("lookup_channel_by_handle", UpstreamError("boom", status_code=500))
        fake_youtube.search_results["@mrbeast"] = [search_item(MRBEAST_ID, "MrBeast")]

        result = await resolver.resolve("@mrbeast")

        assert isinstance(result, ResolvedChannel)
        assert result.id == MRBEAST_ID
        assert len(fake_youtube.calls_to("search_channels")) == 1


class TestResolveSearch:
    """Free-text search outcomes."""

    async def test_single_hit_is_resolved(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        fake_youtube.search_results["google developers"] = [search_item(GOOGLE_DEV_ID)]

        result = await resolver.resolve("google developers")

        assert isinstance(result, ResolvedChannel)
        assert result.id == GOOGLE_DEV_ID
        assert result.title == "Google for Developers"
        assert fake_youtube.calls_to("lookup_channel_by_handle") == []

    async def test_several_hits_return_candidates(
        self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient
    ) -> None:
        fake_youtube.search_results["beast"] = [
            search_item(MRBEAST_ID, "MrBeast"),
            search_item(OTHER_CHANNEL_ID, "Beast Reacts"),
        ]

        result = await resolver.resolve("beast")

        assert isinstance(result, ChannelCandidates)
        assert result.multiple is True
        assert [c.id for c in result.candidates] == [MRBEAST_ID, OTHER_CHANNEL_ID]
        assert result.candidates[1].title == "Beast Reacts"
        assert result.candidates[0].thumbnail_url.endswith("/default.jpg")
        # Candidates are returned as-is, without a details lookup
        assert fake_youtube.calls_to("lookup_channel_by_id") == []

    async def test_no_hits(self, resolver: ChannelResolver) -> None:
        with pytest.raises(ChannelNotFoundError):
            await resolver.resolve("no such channel anywhere")

    async def test_search_error_propagates(self, resolver: ChannelResolver, fake_youtube: FakeYouTubeClient) -> None:
        fake_youtube.fail("search_channels", UpstreamError("quota", status_code=403, reason="quotaExceeded"))

        with pytest.raises(UpstreamError):
            await resolver.resolve("anything")

    async def test_search_max_results(self, fake_youtube: FakeYouTubeClient) -> None:
        resolver = ChannelResolver(fake_youtube, search_max_results=3)

        with pytest.raises(ChannelNotFoundError):
            await resolver.resolve("nothing")

        assert fake_youtube.calls_to("search_channels") == [("nothing", 3)]


class TestChannelDetails:
    """Projection of channel details."""

    @pytest.mark.parametrize("video_count", [None, "not-a-number", "-5"])
    async def test_bad_video_count_is_zero(self, fake_youtube: FakeYouTubeClient, video_count: str | None) -> None:
        fake_youtube.add_channel(channel_item(MRBEAST_ID, handle=None, video_count=video_count))

        result = await ChannelResolver(fake_youtube).fetch_channel(MRBEAST_ID)

        assert result.video_count == 0
        assert result.handle is None

    async def test_channel_thumbnail_prefers_default(self, resolver: ChannelResolver) -> None:
        result = await resolver.fetch_channel(MRBEAST_ID)

        assert result.thumbnail_url.endswith("/default.jpg")

    async def test_resolution_is_repeatable(self, resolver: ChannelResolver) -> None:
        first = await resolver.resolve("@mrbeast")
        second = await resolver.resolve("@mrbeast")

        assert first == second
