"""Pexels Videos API adapter."""

from __future__ import annotations

from typing import Any

from reelswipe.config import secret_value
from reelswipe.models.types import FeedPage, FeedQuery, VideoUrlItem
from reelswipe.providers.base import ProviderBase, text

SEARCH_URL = "https://api.pexels.com/videos/search"
PREFERRED_QUALITY = "sd"


def pick_video_file(files: list[dict[str, Any]]) -> dict[str, Any] | None:
    """Return the SD rendition if listed, else the first file."""
    for candidate in files:
        if candidate.get("quality") == PREFERRED_QUALITY:
            return candidate
    return files[0] if files else None


class PexelsProvider(ProviderBase):
    """Searches Pexels stock videos."""

    key = "pexels"
    platform = "Pexels"
    default_query = "nature"
    ceiling = 20

    async def search(self, query: FeedQuery) -> FeedPage:
        data = await self.get_json(
            SEARCH_URL,
            params={"query": query.term, "per_page": query.count},
            headers={"Authorization": secret_value(self.config.pexels_api_key)},
        )
        return FeedPage(items=[self._to_item(video, query.term) for video in data.get("videos") or []])

    def _to_item(self, video: dict[str, Any], term: str) -> VideoUrlItem:
        best = pick_video_file(video.get("video_files") or []) or {}
        uploader = text((video.get("user") or {}).get("name"))
        return VideoUrlItem(
            title=f"{term} by {uploader}" if uploader else f"{term} video",
            platform=self.platform,
            category=self.key,
            video_url=text(best.get("link")),
            thumb=text(video.get("image")),
            link=text(video.get("url")),
        )
