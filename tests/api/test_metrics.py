"""Tests for the Prometheus metrics middleware and scrape endpoint."""

from unittest.mock import AsyncMock

import pytest

from api.dependencies import get_order_service
from api.middleware.metrics import UNMATCHED_PATH, HTTPMetrics

ORDER_ID = "3a4b5c6d-7e8f-4a1b-9c2d-3e4f5a6b7c8d"


def _count(app, code: str, method: str, path: str) -> float | None:
    return app.state.metrics.registry.get_sample_value(
        "http_requests_total", {"code": code, "method": method, "path": path}
    )


class TestMetricsMiddleware:
    def test_labels_use_route_template(self, app, client):
        client.get(f"/api/v1/orders/{ORDER_ID}")
        client.get("/api/v1/orders/4b5c6d7e-8f9a-4b1c-8d2e-3f4a5b6c7d8e")

        assert _count(app, "401", "GET", "/api/v1/orders/{order_id}") == 2
        assert _count(app, "401", "GET", f"/api/v1/orders/{ORDER_ID}") is None

    def test_records_duration(self, app, client):
        client.get(f"/api/v1/orders/{ORDER_ID}")

        observed = app.state.metrics.registry.get_sample_value(
            "http_request_duration_seconds_count",
            {"method": "GET", "path": "/api/v1/orders/{order_id}"},
        )
        assert observed == 1

    def test_in_flight_returns_to_zero(self, app, client):
        client.get("/api/v1/users/profile")
        assert app.state.metrics.registry.get_sample_value("http_requests_in_flight") == 0

    def test_unexpected_error_counted_as_500(self, app, client, auth_headers):
        service = AsyncMock()
        service.list_orders.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_order_service] = lambda: service

        client.get("/api/v1/orders", headers=auth_headers)

        assert _count(app, "500", "GET", "/api/v1/orders") == 1

    def test_unknown_paths_share_one_label(self, app, client):
        client.get("/api/v1/nope/1")
        client.get("/api/v1/nope/2")

        assert _count(app, "404", "GET", UNMATCHED_PATH) == 2

    def test_wrong_method_uses_route_template(self, app, client):
        response = client.delete("/api/v1/carts")

        assert response.status_code == 405
        assert _count(app, "405", "DELETE", "/api/v1/carts") == 1

    def test_only_api_routes_are_counted(self, app, client):
        client.get("/livez")

        assert _count(app, "200", "GET", "/livez") is None


class TestMetricsEndpoint:
    def test_exposes_prometheus_text(self, client):
        client.get("/api/v1/users/profile")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'http_requests_total{code="401",method="GET",path="/api/v1/users/profile"} 1.0' in response.text
        assert "http_requests_in_flight" in response.text
        assert "http_request_duration_seconds_bucket" in response.text

    def test_public(self, client):
        assert client.get("/metrics").status_code == 200


class TestHTTPMetrics:
    def test_separate_registries(self):
        """Each application gets its own registry so apps can coexist."""
        first, second = HTTPMetrics(), HTTPMetrics()
        first.requests_total.labels("200", "GET", "/x").inc()

        assert second.registry.get_sample_value(
            "http_requests_total", {"code": "200", "method": "GET", "path": "/x"}
        ) is None

    @pytest.mark.parametrize("name", ["http_requests_total", "http_request_duration_seconds", "http_requests_in_flight"])
    def test_registered_names(self, name):
        metrics = HTTPMetrics()
        names = {metric.name for metric in metrics.registry.collect()}
        assert name.removesuffix("_total") in names
