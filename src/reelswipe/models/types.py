"""Pydantic models for the ReelSwipe API.

Field names are snake_case in Python and serialized with the camelCase
aliases the browser client reads (``videoId``, ``videoUrl``,
``nextPageToken``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FeedItem(BaseModel):
    """Normalized item shared by every provider."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    platform: str = ""
    category: str = ""
    thumb: str = ""
    link: str = ""


class VideoIdItem(FeedItem):
    """Item that references a platform video by ID (YouTube)."""

    video_id: str = Field("", alias="videoId")


class VideoUrlItem(FeedItem):
    """Item that references a directly playable media URL."""

    video_url: str = Field("", alias="videoUrl")


@dataclass(frozen=True)
class FeedQuery:
    """Sanitized query handed to a provider adapter.

    ``count`` is already clamped. For Reddit ``term`` is the subreddit name.
    """

    term: str
    count: int
    cursor: str | None = None


@dataclass
class FeedPage:
    """One page of normalized items plus the upstream continuation token."""

    items: list[FeedItem] = field(default_factory=list)
    next_cursor: str | None = None


class FeedResponse(BaseModel):
    """Envelope for Pexels, Pixabay and Reddit routes."""

    items: list[VideoUrlItem]


class YouTubeFeedResponse(BaseModel):
    """Envelope for the YouTube route."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[VideoIdItem]
    next_page_token: str | None = Field(None, alias="nextPageToken")


class ErrorResponse(BaseModel):
    """Body returned when a provider call fails."""

    error: str
    details: str


class HealthStatus(BaseModel):
    """Liveness payload."""

    ok: Literal[True] = True
    app: str
