"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import uuid
from datetime import datetime, timezone, timedelta

import jwt  # PyJWT
import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_USER_ID = "0b7c2f64-3c4e-4a8b-9d0e-1f2a3b4c5d6e"
TEST_USER_EMAIL = "test@example.com"


def create_test_token(
    user_id: str = TEST_USER_ID,
    email: str = TEST_USER_EMAIL,
    expired: bool = False,
    algorithm: str = "HS256",
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        algorithm: Signing algorithm (anything but HS256 must be rejected)
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "user_id": user_id,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def new_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture(autouse=True)
def reset_db_client():
    """Reset the cached Supabase client before and after each test."""
    reset_client_cache()
    yield
    reset_client_cache()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a known JWT secret and no external services."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-service-key",
        stripe_secret_key="sk_test_123",
        stripe_webhook_secret="whsec_test",
        resend_api_key="re_test_123",
        log_level="WARNING",
    )


@pytest.fixture
def app(test_settings: Settings):
    """Create a fresh app for each test."""
    application = create_app(test_settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Client that renders unhandled errors as 500 responses instead of raising."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return TEST_USER_ID


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return TEST_USER_EMAIL


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
