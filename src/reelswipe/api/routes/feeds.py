"""Provider feed endpoints.

GET /api/youtube  - YouTube search, with page token pass-through
GET /api/pexels   - Pexels video search
GET /api/pixabay  - Pixabay video search
GET /api/reddit   - Native videos from a subreddit's hot listing
"""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends, Query

from reelswipe.api.app import get_config, get_http_client
from reelswipe.config import AppConfig
from reelswipe.models.types import FeedPage, FeedQuery, FeedResponse, YouTubeFeedResponse
from reelswipe.providers.base import ProviderBase, ProviderFetchError, UpstreamError
from reelswipe.providers.factory import build_provider

logger = logging.getLogger(__name__)

router = APIRouter()


async def _fetch(provider: ProviderBase, query: FeedQuery) -> FeedPage:
    """Run one adapter search, wrapping every non-upstream failure.

    Raises:
        UpstreamError: Upstream returned a structured error body.
        ProviderFetchError: Anything else went wrong.
    """
    try:
        return await provider.search(query)
    except UpstreamError:
        raise
    except Exception as exc:
        logger.warning(
            f"{provider.platform} fetch failed: {exc!r}",
            extra={"provider": provider.key},
        )
        raise ProviderFetchError.wrap(provider.platform, exc) from exc


@router.get("/youtube", response_model=YouTubeFeedResponse)
async def youtube_feed(
    q: str | None = None,
    max_results: str | None = Query(None, alias="max"),
    page_token: str | None = Query(None, alias="pageToken"),
    client: httpx.AsyncClient = Depends(get_http_client),
    config: AppConfig = Depends(get_config),
) -> YouTubeFeedResponse:
    """Search YouTube.

    Returns:
        Items plus ``nextPageToken`` (null on the last page).

    Raises:
        UpstreamError: Rendered as 400 with the raw upstream body.
        ProviderFetchError: Rendered as 500.
    """
    provider = build_provider("youtube", client, config)
    page = await _fetch(provider, provider.build_query(q, max_results, page_token))
    return YouTubeFeedResponse(items=page.items, next_page_token=page.next_cursor)


@router.get("/pexels", response_model=FeedResponse)
async def pexels_feed(
    q: str | None = None,
    per_page: str | None = Query(None, alias="perPage"),
    client: httpx.AsyncClient = Depends(get_http_client),
    config: AppConfig = Depends(get_config),
) -> FeedResponse:
    """Search Pexels videos."""
    provider = build_provider("pexels", client, config)
    page = await _fetch(provider, provider.build_query(q, per_page))
    return FeedResponse(items=page.items)


@router.get("/pixabay", response_model=FeedResponse)
async def pixabay_feed(
    q: str | None = None,
    per_page: str | None = Query(None, alias="perPage"),
    client: httpx.AsyncClient = Depends(get_http_client),
    config: AppConfig = Depends(get_config),
) -> FeedResponse:
    """Search Pixabay videos."""
    provider = build_provider("pixabay", client, config)
    page = await _fetch(provider, provider.build_query(q, per_page))
    return FeedResponse(items=page.items)


@router.get("/reddit", response_model=FeedResponse)
async def reddit_feed(
    subreddit: str | None = None,
    limit: str | None = None,
    client: httpx.AsyncClient = Depends(get_http_client),
    config: AppConfig = Depends(get_config),
) -> FeedResponse:
    """List native videos from a subreddit's hot listing."""
    provider = build_provider("reddit", client, config)
    page = await _fetch(provider, provider.build_query(subreddit, limit))
    return FeedResponse(items=page.items)
