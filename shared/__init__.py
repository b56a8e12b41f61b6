"""
Shared infrastructure for the Commerce API.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory and timeout-bounded call helper
- exceptions: Error taxonomy (AppError and its codes)
- logging: Log setup and the request-scoped logger
- models: Token claims and pagination models

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache, run_db
from .exceptions import (
    AppError,
    ErrorCode,
    ValidationError,
    BadRequestError,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    InternalError,
    DatabaseError,
    DuplicateEntryError,
    ThirdPartyError,
    TooManyRequestsError,
    ResourceExhaustedError,
)
from .models import Claims, Money, Pagination, PaginatedResponse, UUIDStr

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "run_db",
    "AppError",
    "ErrorCode",
    "ValidationError",
    "BadRequestError",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "InternalError",
    "DatabaseError",
    "DuplicateEntryError",
    "ThirdPartyError",
    "TooManyRequestsError",
    "ResourceExhaustedError",
    "Claims",
    "Money",
    "Pagination",
    "PaginatedResponse",
    "UUIDStr",
]
