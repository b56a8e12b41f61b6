"""
Prometheus HTTP metrics.

Counts requests, times them and tracks how many are in flight. Paths
are labelled with the matched route template (``/api/v1/orders/{order_id}``)
rather than the raw URL so ids never become label values.
"""

import time

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    PlatformCollector,
    ProcessCollector,
)
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Match
from starlette.types import ASGIApp

UNMATCHED_PATH = "unmatched"


class HTTPMetrics:
    """Request metrics registered on their own registry."""

    def __init__(self, registry: CollectorRegistry | None = None):
        self.registry = registry or CollectorRegistry()
        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)

        self.requests_total = Counter(
            "http_requests_total",
            "Total number of HTTP requests.",
            ["code", "method", "path"],
            registry=self.registry,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests in seconds.",
            ["method", "path"],
            registry=self.registry,
        )
        self.requests_in_flight = Gauge(
            "http_requests_in_flight",
            "Current number of HTTP requests being processed.",
            registry=self.registry,
        )


def route_template(request: Request) -> str:
    """Return the path template of the route that serves ``request``."""
    partial = None
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return route.path
        if match == Match.PARTIAL and partial is None:
            partial = route.path
    return partial or UNMATCHED_PATH


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record request metrics for paths under ``path_prefix``."""

    def __init__(self, app: ASGIApp, metrics: HTTPMetrics, path_prefix: str = ""):
        super().__init__(app)
        self.metrics = metrics
        self.path_prefix = path_prefix

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        path = route_template(request)
        status_code = 500
        start = time.perf_counter()
        self.metrics.requests_in_flight.inc()
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            self.metrics.requests_in_flight.dec()
            self.metrics.requests_total.labels(str(status_code), request.method, path).inc()
            self.metrics.request_duration.labels(request.method, path).observe(
                time.perf_counter() - start
            )
