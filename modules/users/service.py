"""
Users service implementation.

Registration hashes passwords with bcrypt; login is gated by the Redis
rate limiter before credentials are checked and issues an HS256 token.
"""

import asyncio
import logging
from functools import lru_cache

import bcrypt
import redis

from shared.config import Settings
from shared.database import run_db
from shared.exceptions import DuplicateEntryError, ThirdPartyError
from shared.security import create_access_token

from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    TooManyLoginAttemptsError,
    UserNotFoundError,
)
from .interfaces import IUserService
from .models import LoginRequest, LoginResponse, RegisterRequest, User
from .rate_limiter import LoginRateLimiter
from .repository import UserRepository

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored hash is not a bcrypt hash
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


class UserService(IUserService):
    """
    User service with Supabase and Redis backends.

    Implements IUserService protocol.
    """

    def __init__(
        self,
        repository: UserRepository,
        rate_limiter: LoginRateLimiter,
        settings: Settings,
    ):
        self._repository = repository
        self._rate_limiter = rate_limiter
        self._settings = settings

    async def register(self, request: RegisterRequest) -> User:
        password_hash = await asyncio.to_thread(hash_password, request.password)
        try:
            user = await run_db(
                self._repository.create_user,
                request.name,
                request.email,
                password_hash,
                timeout=self._settings.db_timeout_seconds,
            )
        except DuplicateEntryError as e:
            raise EmailAlreadyRegisteredError() from e

        logger.info("Registered user %s", user.id)
        return user

    async def login(self, request: LoginRequest) -> LoginResponse:
        try:
            limit = await asyncio.to_thread(self._rate_limiter.check, request.email)
        except redis.RedisError as e:
            raise ThirdPartyError("Login rate limiter unavailable", service="redis", cause=e)

        if not limit.allowed:
            raise TooManyLoginAttemptsError(limit.retry_after)

        user = await run_db(
            self._repository.get_by_email,
            request.email,
            timeout=self._settings.db_timeout_seconds,
        )
        # Unknown emails still pay for a bcrypt check so timing does not reveal them
        password_hash = user.password_hash if user is not None else _dummy_hash()
        password_ok = await asyncio.to_thread(verify_password, request.password, password_hash)
        if user is None or not password_ok:
            raise InvalidCredentialsError(limit.remaining)

        token, expires_in = create_access_token(
            user_id=user.id,
            email=user.email,
            secret=self._settings.jwt_secret,
            expiry_hours=self._settings.jwt_expiry_hours,
        )
        logger.info("User %s logged in", user.id)
        return LoginResponse(token=token, expires_in=expires_in)

    async def get_profile(self, user_id: str) -> User:
        user = await run_db(
            self._repository.get_by_id,
            user_id,
            timeout=self._settings.db_timeout_seconds,
        )
        if user is None:
            raise UserNotFoundError(user_id)
        return user
