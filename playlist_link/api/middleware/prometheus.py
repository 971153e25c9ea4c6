"""Prometheus metrics middleware and endpoint.

Usage:
    # In app.py
    from playlist_link.api.middleware.prometheus import setup_prometheus

    app = FastAPI()
    setup_prometheus(app)
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from playlist_link.core.config import Settings, get_settings
from playlist_link.core.constants import APP_VERSION
from playlist_link.core.metrics import api_request_duration_seconds, api_requests_total, app_info

logger = logging.getLogger(__name__)

UNMATCHED_ENDPOINT = "unmatched"


def endpoint_label(request: Request) -> str:
    """Label a request by its route template so path IDs do not explode cardinality.

    Requests that match no route share one label.
    """
    route = request.scope.get("route")
    if route is None:
        for candidate in request.app.routes:
            match, _ = candidate.matches(request.scope)
            if match == Match.FULL:
                route = candidate
                break
    if route is None:
        return UNMATCHED_ENDPOINT
    return getattr(route, "path", "") or "/"


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics for API requests."""

    def __init__(self, app: Any, metrics_path: str = "/metrics") -> None:
        super().__init__(app)
        self.metrics_path = metrics_path

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        if request.url.path == self.metrics_path:
            return await call_next(request)

        start_time = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            duration = time.perf_counter() - start_time
            endpoint = endpoint_label(request)
            method = request.method

            api_requests_total.labels(
                method=method,
                endpoint=endpoint,
                status=status_code,
            ).inc()
            api_request_duration_seconds.labels(
                method=method,
                endpoint=endpoint,
            ).observe(duration)

        return response


def setup_prometheus(app: FastAPI, settings: Settings | None = None) -> None:
    """Set up Prometheus metrics and endpoint.

    Args:
        app: FastAPI application
        settings: Settings to read the toggle and path from
    """
    settings = settings or get_settings()

    if not settings.prometheus_enabled:
        logger.info("Prometheus metrics disabled")
        return

    app_info.labels(version=APP_VERSION, environment="production").set(1)

    app.add_middleware(PrometheusMiddleware, metrics_path=settings.prometheus_path)

    @app.get(settings.prometheus_path, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=generate_latest(REGISTRY),
            status_code=200,
            media_type=CONTENT_TYPE_LATEST,
        )

    logger.debug("Prometheus metrics enabled", extra={"path": settings.prometheus_path})


__all__ = [
    "PrometheusMiddleware",
    "endpoint_label",
    "setup_prometheus",
]
