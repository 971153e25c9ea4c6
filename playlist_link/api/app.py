"""Main FastAPI application.

This module creates the FastAPI application with:
- Middleware for error handling, request logging and CORS
- Channel, playlist, sync and health routers
- Prometheus metrics
- Optional static front-end hosting
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from playlist_link.api.middleware import (
    setup_error_handler,
    setup_logging_middleware,
    setup_prometheus,
)
from playlist_link.api.routers import (
    channels_router,
    health_router,
    playlists_router,
    sync_router,
)
from playlist_link.core.config import Settings, get_settings
from playlist_link.core.constants import API_PREFIX, API_TAGS, APP_DESCRIPTION, APP_NAME, APP_VERSION
from playlist_link.core.http_session import close_all_clients

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Warns about a missing API key at startup and closes pooled HTTP
    connections on shutdown.
    """
    logger.info("Starting %s v%s", APP_NAME, APP_VERSION)

    settings = get_settings()
    if not settings.has_api_key:
        logger.warning("YOUTUBE_API_KEY is not set; channel and playlist requests will fail")

    try:
        yield
    finally:
        await close_all_clients()
        logger.info("Shutting down %s", APP_NAME)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with; the cached settings otherwise

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=APP_NAME,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        lifespan=lifespan,
        openapi_tags=API_TAGS,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_logging_middleware(app)
    setup_error_handler(app)
    setup_prometheus(app, settings)

    app.include_router(channels_router, prefix=API_PREFIX)
    app.include_router(playlists_router, prefix=API_PREFIX)
    app.include_router(sync_router, prefix=API_PREFIX)
    app.include_router(health_router)  # Health endpoints at root level

    # Mounted last so API routes take precedence over files
    static_path = settings.static_path
    if static_path is not None and static_path.is_dir():
        app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
        logger.info("Serving static files from %s", static_path)

    logger.debug("Application created")
    return app
