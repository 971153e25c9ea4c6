"""Pydantic schemas for channels, playlists and videos.

Python attributes are snake_case; JSON uses the camelCase names the web
client expects (``thumbnailUrl``, ``nextCursor`` ...). The ``from_api``
constructors project raw YouTube Data API resources.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from playlist_link.core.exceptions import UpstreamError

T = TypeVar("T")

CHANNEL_THUMBNAILS = ("default", "medium", "high")
LISTING_THUMBNAILS = ("medium", "default")


def pick_thumbnail(
    thumbnails: Mapping[str, Any] | None,
    preference: Sequence[str] = LISTING_THUMBNAILS,
) -> str:
    """Return the first available thumbnail URL in preference order, or ''."""
    if not thumbnails:
        return ""
    for key in preference:
        url = (thumbnails.get(key) or {}).get("url")
        if url:
            return url
    return ""


def to_count(value: Any) -> int:
    """Parse a statistics counter; absent or non-numeric values count as 0."""
    try:
        count = int(value)
    except (TypeError, ValueError):
        return 0
    return max(count, 0)


def _require_id(item: Mapping[str, Any], kind: str) -> str:
    resource_id = item.get("id")
    if not isinstance(resource_id, str) or not resource_id:
        raise UpstreamError(f"Malformed {kind} resource: missing id")
    return resource_id


def channel_id_from_search_item(item: Mapping[str, Any]) -> str:
    """Extract the channel ID from a ``search.list`` result."""
    ref = item.get("id")
    channel_id = ref.get("channelId") if isinstance(ref, Mapping) else None
    channel_id = channel_id or (item.get("snippet") or {}).get("channelId")
    if not channel_id:
        raise UpstreamError("Malformed search result: missing channelId")
    return channel_id


def video_id_from_playlist_item(item: Mapping[str, Any]) -> str | None:
    """Return the video referenced by a playlist item, or None for placeholders."""
    resource = (item.get("snippet") or {}).get("resourceId") or {}
    return resource.get("videoId") or (item.get("contentDetails") or {}).get("videoId") or None


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResolvedChannel(CamelModel):
    """A channel resolved to its canonical ID."""

    id: str = Field(..., description="Canonical channel ID", examples=["UCX6OQ3DkcsbYNE6H8uQQuVA"])
    title: str
    thumbnail_url: str = ""
    description: str = ""
    handle: str | None = Field(default=None, description="Channel @handle (customUrl)")
    video_count: int = Field(default=0, ge=0)

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "ResolvedChannel":
        snippet = item.get("snippet") or {}
        statistics = item.get("statistics") or {}
        return cls(
            id=_require_id(item, "channel"),
            title=snippet.get("title") or "",
            thumbnail_url=pick_thumbnail(snippet.get("thumbnails"), CHANNEL_THUMBNAILS),
            description=snippet.get("description") or "",
            handle=snippet.get("customUrl") or None,
            video_count=to_count(statistics.get("videoCount")),
        )


class ChannelCandidate(CamelModel):
    """One search hit offered for disambiguation."""

    id: str
    title: str
    description: str = ""
    thumbnail_url: str = ""

    @classmethod
    def from_search_item(cls, item: Mapping[str, Any]) -> "ChannelCandidate":
        snippet = item.get("snippet") or {}
        return cls(
            id=channel_id_from_search_item(item),
            title=snippet.get("title") or snippet.get("channelTitle") or "",
            description=snippet.get("description") or "",
            thumbnail_url=pick_thumbnail(snippet.get("thumbnails"), CHANNEL_THUMBNAILS),
        )


class ChannelCandidates(CamelModel):
    """Search matched several channels; the caller has to pick one."""

    multiple: Literal[True] = True
    candidates: list[ChannelCandidate]


class PlaylistSummary(CamelModel):
    """A playlist as shown in a channel's playlist list."""

    id: str
    title: str
    thumbnail_url: str = ""
    item_count: int = Field(default=0, ge=0)

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "PlaylistSummary":
        snippet = item.get("snippet") or {}
        content_details = item.get("contentDetails") or {}
        return cls(
            id=_require_id(item, "playlist"),
            title=snippet.get("title") or "",
            thumbnail_url=pick_thumbnail(snippet.get("thumbnails")),
            item_count=to_count(content_details.get("itemCount")),
        )


class VideoDetail(CamelModel):
    """Video metadata merged into a playlist page."""

    id: str
    title: str
    thumbnail_url: str = ""
    published_at: datetime | None = None
    duration: str = Field(default="", description="ISO-8601 duration", examples=["PT4M13S"])

    @classmethod
    def from_api(cls, item: Mapping[str, Any]) -> "VideoDetail":
        snippet = item.get("snippet") or {}
        content_details = item.get("contentDetails") or {}
        return cls(
            id=_require_id(item, "video"),
            title=snippet.get("title") or "",
            thumbnail_url=pick_thumbnail(snippet.get("thumbnails")),
            published_at=snippet.get("publishedAt"),
            duration=content_details.get("duration") or "",
        )


class Page(BaseModel, Generic[T]):
    """One page of an upstream listing."""

    items: list[T] = Field(default_factory=list)
    next_cursor: str | None = None
    total_count: int | None = None


class VideoPage(CamelModel):
    """One page of detailed playlist videos in playlist order."""

    videos: list[VideoDetail] = Field(default_factory=list)
    next_cursor: str | None = Field(
        default=None,
        description="Opaque cursor for the next page; null on the last page",
    )
    total_count: int = Field(default=0, ge=0, description="Upstream playlist membership count")
