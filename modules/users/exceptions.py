"""
Users module exceptions.

These exceptions are raised by the users service and rendered by the
API error handlers.
"""

from shared.exceptions import (
    DuplicateEntryError,
    NotFoundError,
    TooManyRequestsError,
    UnauthorizedError,
)


class UserNotFoundError(NotFoundError):
    """Raised when a user doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__("User not found")
        self.user_id = user_id


class EmailAlreadyRegisteredError(DuplicateEntryError):
    """Raised when registering an email that already has an account."""

    def __init__(self):
        super().__init__("User with this email already exists")


class InvalidCredentialsError(UnauthorizedError):
    """Raised when the email is unknown or the password doesn't match."""

    def __init__(self, remaining_attempts: int):
        super().__init__("Invalid email or password")
        self.remaining_attempts = remaining_attempts
        self.with_detail(f"{remaining_attempts} login attempt(s) remaining")


class TooManyLoginAttemptsError(TooManyRequestsError):
    """Raised when an email has exhausted its login attempts for the window."""

    def __init__(self, retry_after: int):
        super().__init__("Too many login attempts. Please try again later.")
        self.retry_after = retry_after
        self.with_detail(f"Retry after {retry_after} seconds")
