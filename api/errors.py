"""
Centralized error handlers for FastAPI.

Maps every exception that escapes a route onto the response envelope.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import AppError, ErrorCode, UNEXPECTED_ERROR_MESSAGE
from .request import format_validation_errors
from .responses import error, error_response

logger = logging.getLogger(__name__)

_HTTP_STATUS_CODES = {
    400: ErrorCode.BAD_REQUEST,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    409: ErrorCode.DUPLICATE_ENTRY,
    429: ErrorCode.TOO_MANY_REQUESTS,
}


def _request_logger(request: Request) -> logging.LoggerAdapter | logging.Logger:
    return getattr(request.state, "logger", None) or logger


def register_error_handlers(app: FastAPI) -> None:
    """Register the envelope error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        """Render a classified error with its own code and status."""
        log = _request_logger(request)
        if exc.status_code >= 500:
            log.error(
                "Request failed: %s (%s)",
                exc.message,
                exc.code.value,
                exc_info=(type(exc.cause), exc.cause, exc.cause.__traceback__) if exc.cause else None,
            )
        else:
            log.warning("Request rejected: %s (%s)", exc.message, exc.code.value)
        return error(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Render query/path parameter validation failures."""
        details = format_validation_errors(exc.errors())
        _request_logger(request).warning("Request validation failed: %d field(s)", len(details))
        return error_response(ErrorCode.VALIDATION_ERROR, "Validation failed", details=details)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Envelope framework errors such as unknown routes and methods."""
        if exc.status_code >= 500:
            code = ErrorCode.INTERNAL_ERROR
        else:
            code = _HTTP_STATUS_CODES.get(exc.status_code, ErrorCode.BAD_REQUEST)
        return error_response(
            code,
            str(exc.detail),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        _request_logger(request).exception("Unexpected error: %s", type(exc).__name__)
        return error_response(ErrorCode.INTERNAL_ERROR, UNEXPECTED_ERROR_MESSAGE)
