"""
Access token signing and verification.

Tokens are HS256 JWTs carrying the Claims model. Only HS256 is accepted;
a token announcing any other algorithm is rejected as a bad request
before its signature is checked.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt  # PyJWT
from pydantic import ValidationError as PydanticValidationError

from .exceptions import BadRequestError, UnauthorizedError
from .models import Claims

SIGNING_ALGORITHM = "HS256"


def create_access_token(
    user_id: str,
    email: str,
    secret: str,
    expiry_hours: int = 24,
    now: Optional[datetime] = None,
) -> tuple[str, int]:
    """
    Sign an access token for a user.

    Returns:
        Tuple of (token, expires_in seconds).
    """
    now = now or datetime.now(timezone.utc)
    expires_at = now + timedelta(hours=expiry_hours)
    payload = {
        "user_id": user_id,
        "email": email,
        "exp": int(expires_at.timestamp()),
        "iat": int(now.timestamp()),
    }
    token = jwt.encode(payload, secret, algorithm=SIGNING_ALGORITHM)
    return token, int((expires_at - now).total_seconds())


def verify_token(token: str, secret: str) -> Claims:
    """
    Decode and validate an access token.

    Args:
        token: The JWT token string
        secret: Shared HMAC secret

    Returns:
        Claims carried by the token

    Raises:
        BadRequestError: If the token is signed with anything but HS256
        UnauthorizedError: If the token is invalid, expired or incomplete
    """
    try:
        header = jwt.get_unverified_header(token)
    except jwt.InvalidTokenError as e:
        raise UnauthorizedError("Invalid or expired token", cause=e)

    if header.get("alg") != SIGNING_ALGORITHM:
        raise BadRequestError("Unexpected signing method")

    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[SIGNING_ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
        return Claims.model_validate(payload)
    except (jwt.InvalidTokenError, PydanticValidationError) as e:
        raise UnauthorizedError("Invalid or expired token", cause=e)
