"""YouTube Data API v3 search adapter."""

from __future__ import annotations

from typing import Any

from reelswipe.config import secret_value
from reelswipe.models.types import FeedPage, FeedQuery, VideoIdItem
from reelswipe.providers.base import ProviderBase, UpstreamError, text

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
SHORTS_URL = "https://www.youtube.com/shorts/{video_id}"


class YouTubeProvider(ProviderBase):
    """Searches YouTube videos and forwards the upstream page token."""

    key = "youtube"
    platform = "YouTube"
    default_query = "trending shorts"
    ceiling = 25

    async def search(self, query: FeedQuery) -> FeedPage:
        params: dict[str, str | int] = {
            "part": "snippet",
            "type": "video",
            "maxResults": query.count,
            "q": query.term,
            "key": secret_value(self.config.youtube_api_key),
        }
        if query.cursor:
            params["pageToken"] = query.cursor

        data = await self.get_json(SEARCH_URL, params=params)
        if data.get("error"):
            raise UpstreamError(self.platform, data)

        return FeedPage(
            items=[self._to_item(entry) for entry in data.get("items") or []],
            next_cursor=text(data.get("nextPageToken")) or None,
        )

    def _to_item(self, entry: dict[str, Any]) -> VideoIdItem:
        snippet = entry.get("snippet") or {}
        thumbnail = (snippet.get("thumbnails") or {}).get("high") or {}
        video_id = text((entry.get("id") or {}).get("videoId"))
        return VideoIdItem(
            title=text(snippet.get("title")) or "YouTube Video",
            platform=self.platform,
            category=self.key,
            video_id=video_id,
            thumb=text(thumbnail.get("url")),
            link=SHORTS_URL.format(video_id=video_id),
        )
