"""FastAPI application factory."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from reelswipe import APP_NAME, __version__
from reelswipe.config import AppConfig, load_config
from reelswipe.models.types import ErrorResponse, HealthStatus
from reelswipe.providers.base import ProviderFetchError, UpstreamError

logger = logging.getLogger(__name__)


def get_config(request: Request) -> AppConfig:
    """Dependency returning the configuration the app was built with."""
    return request.app.state.config


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Dependency returning the shared outbound HTTP client.

    The client is opened by the application lifespan.
    """
    return request.app.state.http_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open one pooled HTTP client for the lifetime of the app."""
    config: AppConfig = app.state.config
    async with httpx.AsyncClient(timeout=httpx.Timeout(config.http_timeout)) as client:
        app.state.http_client = client
        yield


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Optional configuration; loaded from the environment when omitted.

    Returns:
        Configured FastAPI application.
    """
    if config is None:
        config = load_config()

    app = FastAPI(
        title="ReelSwipe",
        description="Short video feed aggregated from YouTube, Pexels, Pixabay and Reddit",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config

    allow_all = "*" in config.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else list(config.cors_origins),
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        """Pass the upstream error body through unchanged."""
        logger.info(f"{exc.platform} upstream error on {request.url.path}")
        return JSONResponse(status_code=400, content=exc.payload)

    @app.exception_handler(ProviderFetchError)
    async def fetch_error_handler(request: Request, exc: ProviderFetchError) -> JSONResponse:
        """Render any other adapter failure as a 500."""
        body = ErrorResponse(error=f"{exc.platform} fetch failed", details=exc.details)
        return JSONResponse(status_code=500, content=body.model_dump())

    # Include routes
    from reelswipe.api.routes import feeds

    app.include_router(feeds.router, prefix="/api")

    # Health check endpoint
    @app.get("/api/health", response_model=HealthStatus)
    def health_check() -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(app=APP_NAME)

    # Static browser client, mounted last so /api routes win
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(config.static_dir), html=True), name="client")
    else:
        logger.info(f"Static directory {config.static_dir} not found; no browser client served")

    return app
