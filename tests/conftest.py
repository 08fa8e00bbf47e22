"""Shared pytest fixtures for reelswipe tests."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Callable, Iterator
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from reelswipe.config import AppConfig

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    """Configuration with dummy keys and no static client."""
    return AppConfig(
        youtube_api_key="yt-key",
        pexels_api_key="px-key",
        pixabay_api_key="pb-key",
        reddit_user_agent="ReelSwipe/1.0",
        static_dir=tmp_path / "no-static",
    )


def json_handler(payload: object, status_code: int = 200) -> Handler:
    """Handler answering every request with the same JSON body."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return _handler


def make_client(config: AppConfig, handler: Handler) -> tuple[TestClient, RecordingTransport]:
    """Create app whose outbound calls go to ``handler``. Returns (client, transport)."""
    from reelswipe.api.app import create_app, get_http_client

    transport = RecordingTransport(handler)
    app = create_app(config)

    async def override_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
        async with httpx.AsyncClient(transport=transport) as client:
            yield client

    app.dependency_overrides[get_http_client] = override_http_client
    return TestClient(app), transport


@pytest.fixture
def http_client() -> Iterator[httpx.AsyncClient]:
    """Client for adapters that are built but never asked to search."""
    client = httpx.AsyncClient()
    yield client
    asyncio.run(client.aclose())
