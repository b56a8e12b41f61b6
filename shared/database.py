"""
Database client factory and call helpers for Supabase.

Repositories issue synchronous Supabase (PostgREST) calls. Services run
them through run_db, which moves the call off the event loop and bounds
it with the configured timeout, and classifies raw database failures into
the error taxonomy.
"""

import asyncio
import logging
from typing import Any, Callable, Optional, TypeVar

from postgrest.exceptions import APIError
from supabase import create_client, Client

from .config import Settings, get_settings
from .exceptions import AppError, DatabaseError, DuplicateEntryError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Get Supabase client with service role.

    The backend enforces ownership itself, so all data access goes
    through the service-role client.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client
    _service_client = None


def classify_db_error(exc: Exception, duplicate_message: str = "Resource already exists") -> AppError:
    """
    Map a raw data-store exception onto the error taxonomy.

    Unique violations become DUPLICATE_ENTRY; everything else is a
    DATABASE_ERROR. AppErrors pass through unchanged.
    """
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, APIError) and exc.code == UNIQUE_VIOLATION:
        return DuplicateEntryError(duplicate_message, cause=exc)
    return DatabaseError("Database operation failed", cause=exc)


async def run_db(
    func: Callable[..., T],
    *args: Any,
    timeout: float = 5.0,
    duplicate_message: str = "Resource already exists",
    **kwargs: Any,
) -> T:
    """
    Run a synchronous repository call in a worker thread with a deadline.

    Args:
        func: Repository method to call.
        timeout: Seconds before the call is abandoned.
        duplicate_message: Message used if the call hits a unique constraint.

    Returns:
        Whatever ``func`` returns.

    Raises:
        DatabaseError: On timeout or any data-store failure.
        DuplicateEntryError: On a unique constraint violation.
    """
    try:
        return await asyncio.wait_for(asyncio.to_thread(func, *args, **kwargs), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.error("Database call %s timed out after %.1fs", getattr(func, "__name__", func), timeout)
        raise DatabaseError("Database operation timed out", cause=e)
    except AppError:
        raise
    except Exception as e:
        error = classify_db_error(e, duplicate_message)
        if isinstance(error, DatabaseError):
            logger.error("Database call %s failed: %s", getattr(func, "__name__", func), type(e).__name__)
        raise error
