"""Reddit adapter over the public subreddit JSON listing.

No API key is needed; Reddit only asks for a descriptive User-Agent.
Only native Reddit-hosted videos are returned.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from reelswipe.models.types import FeedPage, FeedQuery, VideoUrlItem
from reelswipe.providers.base import ProviderBase, text

LISTING_URL = "https://www.reddit.com/r/{subreddit}/hot.json"
PERMALINK_BASE = "https://www.reddit.com"


def video_url(post: dict[str, Any]) -> str:
    """Return the fallback media URL of a native video post, else ''."""
    if not post.get("is_video"):
        return ""
    reddit_video = (post.get("media") or {}).get("reddit_video") or {}
    return text(reddit_video.get("fallback_url"))


def thumbnail_url(post: dict[str, Any]) -> str:
    """Return the thumbnail only when it is an absolute URL.

    Reddit uses placeholders such as "self", "default" or "nsfw" otherwise.
    """
    thumb = text(post.get("thumbnail"))
    return thumb if thumb.startswith("http") else ""


class RedditProvider(ProviderBase):
    """Reads the "hot" listing of a subreddit."""

    key = "reddit"
    platform = "Reddit"
    default_query = "videos"
    ceiling = 25

    async def search(self, query: FeedQuery) -> FeedPage:
        url = LISTING_URL.format(subreddit=quote(query.term, safe=""))
        data = await self.get_json(
            url,
            params={"limit": query.count},
            headers={"User-Agent": self.config.reddit_user_agent},
        )
        children = (data.get("data") or {}).get("children") or []

        items: list[VideoUrlItem] = []
        for child in children:
            post = child.get("data") if isinstance(child, dict) else None
            if not post or not isinstance(post, dict):
                continue
            media_url = video_url(post)
            if not media_url:
                continue
            items.append(
                VideoUrlItem(
                    title=text(post.get("title")) or "Reddit Video",
                    platform=self.platform,
                    category=self.key,
                    video_url=media_url,
                    thumb=thumbnail_url(post),
                    link=f"{PERMALINK_BASE}{text(post.get('permalink'))}",
                )
            )
        return FeedPage(items=items)
