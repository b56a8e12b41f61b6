"""
Tests for the JWT authentication dependency.

Uses the profile endpoint as a representative protected route.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from api.dependencies import get_user_service
from api.middleware.auth import extract_bearer_token
from modules.users.models import User
from shared.exceptions import UnauthorizedError

from tests.conftest import create_test_token

PROFILE_URL = "/api/v1/users/profile"


@pytest.fixture
def mock_user_service(app, test_user_id, test_user_email):
    service = AsyncMock()
    service.get_profile.return_value = User(
        id=test_user_id,
        name="Test User",
        email=test_user_email,
        created_at=datetime.now(timezone.utc),
        updated_at=datetime.now(timezone.utc),
    )
    app.dependency_overrides[get_user_service] = lambda: service
    return service


class TestExtractBearerToken:
    def test_valid_header(self):
        assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"

    def test_missing_header(self):
        with pytest.raises(UnauthorizedError, match="Authorization header is required"):
            extract_bearer_token(None)

    @pytest.mark.parametrize("header", ["abc", "Basic abc", "Bearer", "Bearer ", "Bearer a b", "bearer abc"])
    def test_malformed_header(self, header):
        with pytest.raises(UnauthorizedError, match="Invalid authorization format"):
            extract_bearer_token(header)


class TestRequireAuth:
    def test_valid_token(self, client, mock_user_service, auth_headers, test_user_id):
        """A valid token reaches the handler with the caller's identity."""
        response = client.get(PROFILE_URL, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"]["id"] == test_user_id
        mock_user_service.get_profile.assert_awaited_once_with(test_user_id)

    def test_missing_header(self, client, mock_user_service):
        response = client.get(PROFILE_URL)

        assert response.status_code == 401
        assert response.json() == {
            "success": False,
            "error": {"code": "UNAUTHORIZED", "message": "Authorization header is required"},
        }
        mock_user_service.get_profile.assert_not_called()

    def test_malformed_header(self, client, mock_user_service):
        response = client.get(PROFILE_URL, headers={"Authorization": "Token abc"})
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid authorization format"

    def test_expired_token(self, client, mock_user_service):
        token = create_test_token(expired=True)
        response = client.get(PROFILE_URL, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid or expired token"

    def test_token_signed_with_other_secret(self, client, mock_user_service):
        token = create_test_token(secret="some-other-secret-that-is-long-enough")
        response = client.get(PROFILE_URL, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_unexpected_algorithm(self, client, mock_user_service):
        """Tokens not signed with HS256 are a bad request."""
        token = create_test_token(algorithm="HS512")
        response = client.get(PROFILE_URL, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "BAD_REQUEST",
            "message": "Unexpected signing method",
        }
