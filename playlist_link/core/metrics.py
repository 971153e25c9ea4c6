"""Prometheus metric definitions and recording helpers.

Metrics live in the default registry so the ``/metrics`` endpoint and any
process-level collectors see the same values.
"""

from prometheus_client import Counter, Gauge, Histogram

# API request metrics
api_requests_total = Counter(
    "api_requests_total",
    "Total number of API requests",
    ["method", "endpoint", "status"],
)

api_request_duration_seconds = Histogram(
    "api_request_duration_seconds",
    "API request latency in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, float("inf")),
)

# Upstream YouTube Data API metrics
youtube_api_requests_total = Counter(
    "youtube_api_requests_total",
    "Total number of YouTube Data API calls",
    ["operation", "status"],
)

youtube_api_request_duration_seconds = Histogram(
    "youtube_api_request_duration_seconds",
    "YouTube Data API call latency in seconds",
    ["operation"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10, 30, float("inf")),
)

# System metrics
app_info = Gauge(
    "app_info",
    "Application information",
    ["version", "environment"],
)


def record_youtube_api_call(
    operation: str,
    duration_seconds: float,
    status: str = "success",
) -> None:
    """Record a YouTube Data API call.

    Args:
        operation: API operation (channels.list, search.list, ...)
        duration_seconds: Call duration
        status: Call outcome (success, http_error, transport_error, ...)
    """
    youtube_api_requests_total.labels(operation=operation, status=status).inc()
    youtube_api_request_duration_seconds.labels(operation=operation).observe(duration_seconds)


__all__ = [
    "api_requests_total",
    "api_request_duration_seconds",
    "youtube_api_requests_total",
    "youtube_api_request_duration_seconds",
    "app_info",
    "record_youtube_api_call",
]
