"""
Request logging middleware.

Assigns every request a correlation id (reusing an inbound X-Request-ID
when present), binds a request-scoped logger onto request.state and logs
the start and completion of the request. Never rejects a request.
"""

import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shared.logging import get_request_logger

from ..responses import error

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs each request with a correlation id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request_logger = get_request_logger(
            "api.request",
            correlation_id=correlation_id,
            http_method=request.method,
            http_path=request.url.path,
            remote_addr=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
        request.state.correlation_id = correlation_id
        request.state.logger = request_logger

        start = time.perf_counter()
        request_logger.info("Incoming request")

        try:
            response = await call_next(request)
        except Exception as exc:
            # Unclassified failures are rendered here so the envelope still
            # carries the correlation id and passes back through CORS
            request_logger.exception("Unexpected error: %s", type(exc).__name__)
            response = error(exc)

        log = request_logger.error if response.status_code >= 500 else request_logger.info
        log(
            "Request completed",
            extra={"fields": {"http_status": response.status_code, "duration_ms": _elapsed_ms(start)}},
        )
        response.headers[REQUEST_ID_HEADER] = correlation_id
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)
