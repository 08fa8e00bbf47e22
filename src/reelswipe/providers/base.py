"""Base provider interface and the shared adapter error types."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping

import httpx

from reelswipe.config import AppConfig
from reelswipe.models.types import FeedPage, FeedQuery

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 10
MIN_COUNT = 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ProviderError(Exception):
    """Base class for provider adapter failures."""


class UpstreamError(ProviderError):
    """Upstream answered with a structured error body.

    The body is surfaced to the caller unmodified.
    """

    def __init__(self, platform: str, payload: dict[str, Any]):
        super().__init__(f"{platform} returned an error")
        self.platform = platform
        self.payload = payload


class ProviderFetchError(ProviderError):
    """Any other failure while fetching or reshaping provider data."""

    def __init__(self, platform: str, details: str):
        super().__init__(f"{platform} fetch failed: {details}")
        self.platform = platform
        self.details = details

    @classmethod
    def wrap(cls, platform: str, exc: BaseException) -> ProviderFetchError:
        """Build from an arbitrary exception, never leaving details empty."""
        return cls(platform, str(exc) or type(exc).__name__)


def parse_count(raw: str | None, default: int = DEFAULT_COUNT) -> int:
    """Parse a leading integer from a query value.

    Leading whitespace and a sign are accepted and trailing characters are
    ignored, so ``"12abc"`` is 12. Absent or unparseable input gives ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    return int(match.group(1))


def clamp_count(value: int, ceiling: int) -> int:
    """Clamp a requested count into ``[MIN_COUNT, ceiling]``."""
    return max(MIN_COUNT, min(value, ceiling))


def clean_text(value: str | None) -> str:
    """Trim a query value, treating None as empty."""
    return (value or "").strip()


def text(value: Any) -> str:
    """Coerce an upstream field to a string, mapping missing values to ''."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class ProviderBase(ABC):
    """Abstract base class for content providers.

    Subclasses set the class-level constants and implement ``search``.
    """

    key: ClassVar[str]
    platform: ClassVar[str]
    default_query: ClassVar[str]
    ceiling: ClassVar[int]
    default_count: ClassVar[int] = DEFAULT_COUNT

    def __init__(self, client: httpx.AsyncClient, config: AppConfig):
        self.client = client
        self.config = config

    def build_query(self, term: str | None, count: str | None, cursor: str | None = None) -> FeedQuery:
        """Sanitize raw request parameters into a FeedQuery.

        Args:
            term: Free-text query (or subreddit), trimmed; empty means default.
            count: Raw requested count, parsed then clamped.
            cursor: Opaque page token, trimmed; empty means none.

        Returns:
            FeedQuery ready to hand to ``search``.
        """
        return FeedQuery(
            term=clean_text(term) or self.default_query,
            count=clamp_count(parse_count(count, self.default_count), self.ceiling),
            cursor=clean_text(cursor) or None,
        )

    async def get_json(
        self,
        url: str,
        params: Mapping[str, str | int] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Issue one GET and decode the body as a JSON object.

        The upstream status code is not checked; the body is decoded either way.

        Raises:
            httpx.HTTPError: On transport failure or timeout.
            ValueError: If the body is not a JSON object.
        """
        logger.debug(f"{self.platform}: GET {url}")
        response = await self.client.get(url, params=params, headers=headers)
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {self.platform}, got {type(data).__name__}")
        return data

    @abstractmethod
    async def search(self, query: FeedQuery) -> FeedPage:
        """Fetch one page of normalized items.

        Args:
            query: Sanitized query.

        Returns:
            FeedPage with normalized items.
        """
