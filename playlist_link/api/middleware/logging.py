"""Per-request log lines and the X-Request-ID header."""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log one line when it completes.

    An ID sent by a proxy in ``X-Request-ID`` is reused. 4xx and 5xx
    responses are logged at WARNING.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Any],
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }

        started = time.perf_counter()
        logger.debug("Request started", extra={**context, "query": str(request.url.query)})

        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
            logger.exception(
                "Request failed",
                extra={**context, "duration_ms": elapsed_ms, "error_type": type(exc).__name__},
            )
            raise

        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        response.headers[REQUEST_ID_HEADER] = request_id

        logger.log(
            logging.WARNING if response.status_code >= 400 else logging.INFO,
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={**context, "status_code": response.status_code, "duration_ms": elapsed_ms},
        )
        return response


def setup_logging_middleware(app: FastAPI) -> None:
    app.add_middleware(LoggingMiddleware)
    logger.debug("Logging middleware initialized")


def get_request_id(request: Request) -> str:
    """ID assigned by LoggingMiddleware, else the inbound header, else a fresh one."""
    return getattr(request.state, "request_id", None) or request.headers.get(
        REQUEST_ID_HEADER,
        str(uuid.uuid4()),
    )
