"""
User API endpoints.

Registration and login are public; the profile requires a bearer token.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_user_service
from api.middleware.auth import RequestContext, RequireAuth
from api.request import json_body
from api.responses import success

from .interfaces import IUserService
from .models import LoginRequest, RegisterRequest

router = APIRouter()


@router.post("/register", status_code=201)
async def register(
    body: RegisterRequest = Depends(json_body(RegisterRequest)),
    service: IUserService = Depends(get_user_service),
) -> JSONResponse:
    """
    Create an account.

    Returns the new user without any credential data.
    """
    user = await service.register(body)
    return success(user, status_code=201)


@router.post("/login")
async def login(
    body: LoginRequest = Depends(json_body(LoginRequest)),
    service: IUserService = Depends(get_user_service),
) -> JSONResponse:
    """
    Exchange email and password for an access token.

    Attempts are rate limited per email.
    """
    return success(await service.login(body))


@router.get("/profile")
async def get_profile(
    ctx: RequestContext = RequireAuth,
    service: IUserService = Depends(get_user_service),
) -> JSONResponse:
    """Get the current user's profile."""
    return success(await service.get_profile(ctx.user_id))
