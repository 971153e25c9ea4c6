"""Middleware module for the API.

This module provides middleware components for:
- Error handling and standardization
- Request/response logging
- Request ID tracking
- Prometheus metrics
"""

from playlist_link.api.middleware.error_handler import ErrorHandlerMiddleware, setup_error_handler
from playlist_link.api.middleware.logging import (
    LoggingMiddleware,
    get_request_id,
    setup_logging_middleware,
)
from playlist_link.api.middleware.prometheus import PrometheusMiddleware, setup_prometheus

__all__ = [
    "ErrorHandlerMiddleware",
    "setup_error_handler",
    "LoggingMiddleware",
    "setup_logging_middleware",
    "get_request_id",
    "PrometheusMiddleware",
    "setup_prometheus",
]
