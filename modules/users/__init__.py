"""
Users module.

Handles registration, login (with rate limiting) and profiles.

Public API:
- IUserService: Interface for user operations
- User: A registered user
- RegisterRequest / LoginRequest / LoginResponse
"""

from .interfaces import IUserService
from .models import LoginRequest, LoginResponse, RateLimitResult, RegisterRequest, User
from .exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    TooManyLoginAttemptsError,
    UserNotFoundError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "User",
    "RegisterRequest",
    "LoginRequest",
    "LoginResponse",
    "RateLimitResult",
    # Exceptions
    "UserNotFoundError",
    "EmailAlreadyRegisteredError",
    "InvalidCredentialsError",
    "TooManyLoginAttemptsError",
]
