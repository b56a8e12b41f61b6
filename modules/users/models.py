"""
Users module data models.

These models define the data structures used by the users module
and exposed to other modules through the interface.
"""

from datetime import datetime
from pydantic import BaseModel, Field, EmailStr


class User(BaseModel):
    """
    A registered user.

    The password hash is held for credential checks and is never
    serialized into responses.
    """

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Email address (unique)")
    password_hash: str = Field(default="", exclude=True, repr=False)
    created_at: datetime = Field(..., description="Account creation time")
    updated_at: datetime = Field(..., description="Last update time")


class RegisterRequest(BaseModel):
    """Request to create an account."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(BaseModel):
    """Request to exchange credentials for an access token."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    """Signed access token and its lifetime in seconds."""

    token: str
    expires_in: int


class RateLimitResult(BaseModel):
    """Outcome of one login rate limit check."""

    model_config = {"frozen": True}

    allowed: bool
    remaining: int = 0
    retry_after: int = 0
