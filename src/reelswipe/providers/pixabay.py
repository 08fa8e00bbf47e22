"""Pixabay Videos API adapter."""

from __future__ import annotations

from typing import Any

from reelswipe.config import secret_value
from reelswipe.models.types import FeedPage, FeedQuery, VideoUrlItem
from reelswipe.providers.base import ProviderBase, text

SEARCH_URL = "https://pixabay.com/api/videos/"
VARIANT_PREFERENCE = ("medium", "small", "tiny")


def pick_variant(videos: dict[str, Any]) -> dict[str, Any] | None:
    """Return the first non-null encoding in preference order."""
    for name in VARIANT_PREFERENCE:
        variant = videos.get(name)
        if variant:
            return variant
    return None


class PixabayProvider(ProviderBase):
    """Searches Pixabay videos. Titles are synthesized from the query."""

    key = "pixabay"
    platform = "Pixabay"
    default_query = "travel"
    ceiling = 20

    async def search(self, query: FeedQuery) -> FeedPage:
        data = await self.get_json(
            SEARCH_URL,
            params={
                "key": secret_value(self.config.pixabay_api_key),
                "q": query.term,
                "per_page": query.count,
            },
        )
        return FeedPage(items=[self._to_item(hit, query.term) for hit in data.get("hits") or []])

    def _to_item(self, hit: dict[str, Any], term: str) -> VideoUrlItem:
        variant = pick_variant(hit.get("videos") or {}) or {}
        return VideoUrlItem(
            title=f"Pixabay: {term}",
            platform=self.platform,
            category=self.key,
            video_url=text(variant.get("url")),
            thumb=text(hit.get("userImageURL")),
            link=text(hit.get("pageURL")),
        )
