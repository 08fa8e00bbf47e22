"""Provider factory helpers."""

from __future__ import annotations

import httpx

from reelswipe.config import AppConfig
from reelswipe.providers.base import ProviderBase
from reelswipe.providers.pexels import PexelsProvider
from reelswipe.providers.pixabay import PixabayProvider
from reelswipe.providers.reddit import RedditProvider
from reelswipe.providers.youtube import YouTubeProvider

PROVIDERS: dict[str, type[ProviderBase]] = {
    cls.key: cls for cls in (YouTubeProvider, PexelsProvider, PixabayProvider, RedditProvider)
}


def build_provider(key: str, client: httpx.AsyncClient, config: AppConfig) -> ProviderBase:
    """Instantiate the adapter registered under ``key``.

    Raises:
        KeyError: If no adapter is registered for ``key``.
    """
    try:
        provider_cls = PROVIDERS[key]
    except KeyError:
        raise KeyError(f"Unknown provider: {key}") from None
    return provider_cls(client, config)
