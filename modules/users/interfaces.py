"""
Users module interface.

The API layer depends on IUserService for account operations.
"""

from typing import Protocol, runtime_checkable

from .models import LoginRequest, LoginResponse, RegisterRequest, User


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user account operations.
    """

    async def register(self, request: RegisterRequest) -> User:
        """
        Create an account with a bcrypt-hashed password.

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        ...

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Verify credentials and issue an access token.

        Every attempt counts against the email's rate limit window.

        Raises:
            TooManyLoginAttemptsError: If the email is rate limited
            InvalidCredentialsError: If the email or password is wrong
        """
        ...

    async def get_profile(self, user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If the user doesn't exist
        """
        ...
