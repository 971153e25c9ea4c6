"""Error handlers for standardized error responses.

Domain exceptions raised by the resolver, listers and sync store are mapped
to HTTP status codes here, so routers never build error responses themselves:

- InvalidInputError   -> 400
- NotFoundError       -> 404
- UpstreamError       -> 500 (detail logged, not echoed)
- anything else       -> 500
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from playlist_link.api.middleware.logging import get_request_id
from playlist_link.api.models.errors import (
    BadRequestErrorResponse,
    ErrorCodes,
    ErrorResponse,
    InternalServerErrorResponse,
    NotFoundErrorResponse,
    UpstreamErrorResponse,
    ValidationErrorResponse,
)
from playlist_link.core.exceptions import (
    ConfigurationError,
    InvalidInputError,
    NotFoundError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


def _request_context(request: Request, request_id: str) -> dict[str, Any]:
    return {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
    }


class ErrorHandlerMiddleware:
    """Global error handler for the FastAPI application.

    Registers exception handlers that convert exceptions to the
    ErrorResponse format, log them with request context and pick the
    HTTP status code.

    Usage:
        app = FastAPI()
        setup_error_handler(app)
    """

    def __init__(self, app: FastAPI) -> None:
        self.app = app
        self._register_exception_handlers()

    def _register_exception_handlers(self) -> None:
        """Register exception handlers for different exception types."""
        self.app.add_exception_handler(Exception, self._handle_generic_exception)
        self.app.add_exception_handler(RequestValidationError, self._handle_validation_error)
        self.app.add_exception_handler(StarletteHTTPException, self._handle_http_exception)
        self.app.add_exception_handler(InvalidInputError, self._handle_invalid_input)
        self.app.add_exception_handler(NotFoundError, self._handle_not_found)
        self.app.add_exception_handler(UpstreamError, self._handle_upstream_error)
        self.app.add_exception_handler(ConfigurationError, self._handle_configuration_error)

    async def _handle_invalid_input(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = get_request_id(request)
        error_response = BadRequestErrorResponse(
            error_code=ErrorCodes.INVALID_PARAMETER,
            message=str(exc),
            request_id=request_id,
        )
        logger.info("Invalid input: %s", exc, extra=_request_context(request, request_id))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_response.model_dump(),
        )

    async def _handle_not_found(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = get_request_id(request)
        error_response = NotFoundErrorResponse(
            error_code=getattr(exc, "error_code", ErrorCodes.NOT_FOUND),
            message=str(exc),
            request_id=request_id,
        )
        logger.info("Not found: %s", exc, extra=_request_context(request, request_id))
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_response.model_dump(),
        )

    async def _handle_upstream_error(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = get_request_id(request)
        extra = _request_context(request, request_id)
        extra["upstream_status"] = getattr(exc, "status_code", None)
        extra["upstream_reason"] = getattr(exc, "reason", None)
        logger.error("YouTube API failure: %s", exc, extra=extra)

        error_response = UpstreamErrorResponse(request_id=request_id)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(),
        )

    async def _handle_configuration_error(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = get_request_id(request)
        logger.error("Configuration error: %s", exc, extra=_request_context(request, request_id))
        error_response = InternalServerErrorResponse(
            request_id=request_id,
            details={"error_code": ErrorCodes.CONFIGURATION_ERROR},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(),
        )

    async def _handle_generic_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """Handle generic unhandled exceptions without leaking internals."""
        request_id = get_request_id(request)

        # Log the full traceback for debugging
        logger.exception("Unhandled exception", extra=_request_context(request, request_id))

        error_response = InternalServerErrorResponse(
            request_id=request_id,
            details={"error_type": type(exc).__name__},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(),
        )

    async def _handle_validation_error(self, request: Request, exc: Exception) -> JSONResponse:
        """Handle validation errors from request parsing."""
        request_id = get_request_id(request)

        errors: list[dict[str, Any]] = []
        if isinstance(exc, RequestValidationError):
            for error in exc.errors():
                errors.append(
                    {
                        "field": ".".join(str(loc) for loc in error["loc"]),
                        "message": error["msg"],
                        "type": error["type"],
                    }
                )

        error_response = ValidationErrorResponse(
            error_code=ErrorCodes.VALIDATION_ERROR,
            message="Request validation failed",
            details={"errors": errors},
            request_id=request_id,
        )

        extra = _request_context(request, request_id)
        extra["validation_errors"] = errors
        logger.info("Validation error", extra=extra)

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_response.model_dump(),
        )

    async def _handle_http_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """Handle HTTP exceptions raised by routing (unknown path, method not allowed)."""
        request_id = get_request_id(request)

        status_code = getattr(exc, "status_code", status.HTTP_500_INTERNAL_SERVER_ERROR)
        detail = str(getattr(exc, "detail", exc))

        error_response: ErrorResponse
        if status_code == status.HTTP_404_NOT_FOUND:
            error_response = NotFoundErrorResponse(
                error_code=ErrorCodes.NOT_FOUND,
                message=detail,
                request_id=request_id,
            )
        elif status_code == status.HTTP_400_BAD_REQUEST:
            error_response = BadRequestErrorResponse(message=detail, request_id=request_id)
        else:
            error_response = ErrorResponse(
                error="HTTP_ERROR",
                error_code=f"HTTP_{status_code}",
                message=detail,
                request_id=request_id,
            )

        extra = _request_context(request, request_id)
        extra["status_code"] = status_code
        logger.info("HTTP %s error", status_code, extra=extra)

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump(),
            headers=getattr(exc, "headers", None),
        )


def setup_error_handler(app: FastAPI) -> None:
    """Set up error handlers for the application.

    Args:
        app: FastAPI application instance
    """
    ErrorHandlerMiddleware(app)
    logger.debug("Error handler middleware initialized")
