"""Tests for the response envelope and error handlers."""

import json

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.responses import error, error_response, success
from shared.exceptions import (
    DatabaseError,
    ErrorCode,
    NotFoundError,
    ThirdPartyError,
    ValidationError,
)


def _body(response) -> dict:
    return json.loads(response.body)


class _Page(BaseModel):
    page_size: int = Field(alias="pageSize")

    model_config = {"populate_by_name": True}


class TestSuccess:
    def test_wraps_data(self):
        response = success({"id": "1"})
        assert response.status_code == 200
        assert _body(response) == {"success": True, "data": {"id": "1"}}

    def test_omits_data_when_none(self):
        assert _body(success()) == {"success": True}

    def test_custom_status(self):
        assert success({"id": "1"}, status_code=201).status_code == 201

    def test_models_use_aliases(self):
        assert _body(success(_Page(page_size=5))) == {"success": True, "data": {"pageSize": 5}}


class TestError:
    def test_app_error_keeps_code_and_status(self):
        response = error(NotFoundError("Product not found"))
        assert response.status_code == 404
        assert _body(response) == {
            "success": False,
            "error": {"code": "NOT_FOUND", "message": "Product not found"},
        }

    def test_details_included(self):
        response = error(ValidationError("Validation failed", details=["Field name is required"]))
        assert response.status_code == 400
        assert _body(response)["error"]["details"] == ["Field name is required"]

    def test_unknown_exception_is_generic_500(self):
        """Internal messages are never exposed."""
        response = error(RuntimeError("secret connection string"))
        assert response.status_code == 500
        assert _body(response) == {
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
        }

    def test_error_response_defaults_status_from_code(self):
        response = error_response(ErrorCode.DUPLICATE_ENTRY, "exists")
        assert response.status_code == 409
        assert "details" not in _body(response)["error"]


class TestErrorHandlers:
    """Exceptions escaping a route are rendered as envelopes."""

    def _mount(self, app, exc: Exception):
        router = APIRouter()

        @router.get("/boom")
        async def boom():
            raise exc

        app.include_router(router)

    def test_app_error(self, app, client):
        self._mount(app, NotFoundError("Order not found"))
        response = client.get("/boom")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_server_side_app_error_hides_cause(self, app, client):
        self._mount(app, DatabaseError("Database operation failed", cause=RuntimeError("pg down")))
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json()["error"] == {
            "code": "DATABASE_ERROR",
            "message": "Database operation failed",
        }

    def test_third_party_error_is_500(self, app, client):
        self._mount(app, ThirdPartyError("Failed to send email", service="resend"))
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "THIRD_PARTY_ERROR"

    def test_unexpected_exception(self, app, client):
        self._mount(app, KeyError("internal"))
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"},
        }

    def test_unknown_route_is_enveloped(self, client):
        response = client.get("/api/v1/nothing-here")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"

    def test_wrong_method_is_enveloped(self, client):
        response = client.delete("/api/v1/users/login")
        assert response.status_code == 405
        assert response.json()["success"] is False
