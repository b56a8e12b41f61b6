"""
Health check endpoints.

Provides endpoints for monitoring application liveness and readiness.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.exceptions import ErrorCode
from ..dependencies import ServiceContainer, get_container
from ..responses import error_response, success

logger = logging.getLogger(__name__)

router = APIRouter()

CHECK_TIMEOUT_SECONDS = 3.0


class HealthResponse(BaseModel):
    """Liveness response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    checks: dict[str, str]


def _check_database(container: ServiceContainer) -> None:
    container.db.table("users").select("id").limit(1).execute()


def _check_redis(container: ServiceContainer) -> None:
    container.redis.ping()


@router.get("/livez")
async def liveness_check(container: ServiceContainer = Depends(get_container)) -> JSONResponse:
    """
    Basic liveness endpoint.

    Returns 200 if the API process is serving requests.
    """
    return success(HealthResponse(status="healthy", version=container.settings.app_version))


@router.get("/readyz")
async def readiness_check(container: ServiceContainer = Depends(get_container)) -> JSONResponse:
    """
    Readiness check endpoint.

    Probes the database and Redis; any failing probe makes the
    response a 503.
    """
    checks: dict[str, str] = {}
    for name, probe in (("database", _check_database), ("redis", _check_redis)):
        try:
            await asyncio.wait_for(asyncio.to_thread(probe, container), timeout=CHECK_TIMEOUT_SECONDS)
            checks[name] = "ok"
        except Exception as e:
            logger.warning("Readiness check %s failed: %s", name, type(e).__name__)
            checks[name] = "unavailable"

    failed = [name for name, state in checks.items() if state != "ok"]
    if failed:
        return error_response(
            ErrorCode.INTERNAL_ERROR,
            "Service not ready",
            status_code=503,
            details=[f"{name} is unavailable" for name in failed],
        )
    return success(ReadinessResponse(status="ready", checks=checks))
