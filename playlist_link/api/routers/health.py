"""Health check endpoints for monitoring.

This module provides:
- GET /health - Basic health check
- GET /health/live - Liveness probe (always returns 200 if running)
- GET /health/ready - Readiness probe (checks configuration)
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from playlist_link.api.dependencies import get_settings_dep, get_sync_store_dep
from playlist_link.core.config import Settings
from playlist_link.core.constants import APP_VERSION, START_TIME
from playlist_link.database.sync_store import SyncStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get(
    "/health",
    response_model=dict[str, Any],
    summary="Basic health check",
    description="Quick health check for load balancers. Returns 200 if API is responding.",
    operation_id="health_check",
)
async def health_check() -> dict[str, Any]:
    uptime = (datetime.now(timezone.utc) - START_TIME).total_seconds()
    return {
        "status": "healthy",
        "version": APP_VERSION,
        "timestamp": _now(),
        "uptime_seconds": round(uptime, 1),
    }


@router.get(
    "/health/live",
    response_model=dict[str, Any],
    summary="Liveness probe",
    operation_id="health_live",
)
async def health_live() -> dict[str, Any]:
    return {"status": "alive", "timestamp": _now()}


@router.get(
    "/health/ready",
    response_model=dict[str, Any],
    summary="Readiness probe",
    description="Returns 503 until a YouTube API key is configured.",
    operation_id="health_ready",
    responses={503: {"description": "Service not ready"}},
)
async def health_ready(
    settings: Settings = Depends(get_settings_dep),
    store: SyncStore = Depends(get_sync_store_dep),
) -> JSONResponse:
    """Readiness probe.

    The service can only answer channel and playlist requests once the
    YouTube API key is set.
    """
    youtube_ready = settings.has_api_key
    components = {
        "youtube_api": {
            "status": "healthy" if youtube_ready else "unhealthy",
            "api_key_configured": youtube_ready,
        },
        "sync_store": {
            "status": "healthy",
            "has_data": store.has_data,
            "updated_at": store.updated_at.isoformat() if store.updated_at else None,
        },
    }

    if not youtube_ready:
        logger.warning("Readiness check failed: YouTube API key not configured")

    return JSONResponse(
        status_code=status.HTTP_200_OK if youtube_ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if youtube_ready else "not_ready",
            "timestamp": _now(),
            "components": components,
        },
    )
