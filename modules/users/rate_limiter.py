"""
Login rate limiter backed by Redis.

Each email gets a sorted set of attempt timestamps. Every check trims
entries older than the window, records the current attempt and counts
what is left, so the limit slides with time rather than resetting on
fixed boundaries.
"""

import logging
import time
import uuid
from typing import Callable

import redis

from .models import RateLimitResult

logger = logging.getLogger(__name__)

KEY_PREFIX = "login_attempts"


class LoginRateLimiter:
    """
    Sliding-window limiter for login attempts.

    Args:
        client: Redis client (created with decode_responses=True)
        max_attempts: Attempts allowed per window
        window_seconds: Window length
        clock: Source of the current time in seconds
    """

    def __init__(
        self,
        client: redis.Redis,
        max_attempts: int = 5,
        window_seconds: int = 15,
        clock: Callable[[], float] = time.time,
    ):
        self._redis = client
        self._max_attempts = max_attempts
        self._window_seconds = window_seconds
        self._clock = clock

    @staticmethod
    def key_for(email: str) -> str:
        return f"{KEY_PREFIX}:{email.lower()}"

    def check(self, email: str) -> RateLimitResult:
        """
        Record a login attempt and report whether it may proceed.

        Raises:
            redis.RedisError: If Redis is unreachable
        """
        key = self.key_for(email)
        now = self._clock()
        window_start = now - self._window_seconds

        pipe = self._redis.pipeline()
        pipe.zremrangebyscore(key, 0, window_start)
        pipe.zadd(key, {f"{now}:{uuid.uuid4().hex[:8]}": now})
        pipe.zcard(key)
        pipe.expire(key, self._window_seconds)
        _, _, attempts, _ = pipe.execute()

        if attempts > self._max_attempts:
            oldest = self._redis.zrange(key, 0, 0, withscores=True)
            oldest_score = oldest[0][1] if oldest else now
            retry_after = max(1, int(self._window_seconds - (now - oldest_score)))
            logger.warning("Login rate limit reached for key %s", key)
            return RateLimitResult(allowed=False, retry_after=retry_after)

        return RateLimitResult(allowed=True, remaining=self._max_attempts - attempts)
