"""
JWT Authentication dependency.

Validates access tokens issued at login and exposes the caller's
identity to route handlers as an explicit RequestContext.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Request

from shared.config import Settings
from shared.exceptions import UnauthorizedError
from shared.logging import RequestLogger, get_request_logger
from shared.models import Claims
from shared.security import verify_token

from ..dependencies import get_app_settings


@dataclass(frozen=True)
class RequestContext:
    """Authenticated caller plus the request logger bound to their id."""

    claims: Claims
    logger: RequestLogger

    @property
    def user_id(self) -> str:
        return self.claims.user_id

    @property
    def email(self) -> str:
        return self.claims.email


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    Raises:
        UnauthorizedError: If the header is missing or malformed.
    """
    if not authorization:
        raise UnauthorizedError("Authorization header is required")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedError("Invalid authorization format")
    return parts[1]


async def require_auth(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> RequestContext:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in user.

    Usage:
        @router.get("/protected")
        async def protected_route(ctx: RequestContext = RequireAuth):
            return success({"user_id": ctx.user_id})
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    claims = verify_token(token, settings.jwt_secret)

    base_logger: RequestLogger = getattr(request.state, "logger", None) or get_request_logger(__name__)
    logger = base_logger.bind(user_id=claims.user_id)
    request.state.logger = logger
    logger.info("User authenticated")

    return RequestContext(claims=claims, logger=logger)


# Type alias for cleaner route definitions
RequireAuth = Depends(require_auth)
