"""
Base exception classes for the Commerce API.

Every failure that reaches a client is an AppError carrying one code from
the closed ErrorCode set. The code fixes the HTTP status; modules derive
their own named errors from these classes without inventing new codes.
"""

from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Closed set of error codes exposed to API clients."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    THIRD_PARTY_ERROR = "THIRD_PARTY_ERROR"
    TOO_MANY_REQUESTS = "TOO_MANY_REQUESTS"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"


STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.BAD_REQUEST: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.UNAUTHORIZED: 401,
    ErrorCode.FORBIDDEN: 403,
    ErrorCode.INTERNAL_ERROR: 500,
    ErrorCode.DATABASE_ERROR: 500,
    ErrorCode.DUPLICATE_ENTRY: 409,
    ErrorCode.THIRD_PARTY_ERROR: 500,
    ErrorCode.TOO_MANY_REQUESTS: 429,
    ErrorCode.RESOURCE_EXHAUSTED: 429,
}

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


class AppError(Exception):
    """
    Base exception for all Commerce API errors.

    Subclasses pin the error code; the HTTP status is derived from it.
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        details: Optional[list[str]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details: list[str] = list(details or [])
        if cause is not None:
            self.__cause__ = cause

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.code]

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def with_detail(self, detail: str) -> "AppError":
        """Append a human-readable detail and return self for chaining."""
        self.details.append(detail)
        return self

    def with_cause(self, cause: BaseException) -> "AppError":
        """Attach the underlying exception and return self for chaining."""
        self.__cause__ = cause
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the error body of the response envelope."""
        body: dict[str, Any] = {
            "code": self.code.value,
            "message": self.message,
        }
        if self.details:
            body["details"] = list(self.details)
        return body


class ValidationError(AppError):
    """Request payload failed field validation."""

    code = ErrorCode.VALIDATION_ERROR


class BadRequestError(AppError):
    """Request could not be understood (empty or malformed body, bad input)."""

    code = ErrorCode.BAD_REQUEST


class NotFoundError(AppError):
    """Resource not found."""

    code = ErrorCode.NOT_FOUND


class UnauthorizedError(AppError):
    """Authentication failed (invalid or missing credentials)."""

    code = ErrorCode.UNAUTHORIZED


class ForbiddenError(AppError):
    """Authorization failed (resource belongs to someone else)."""

    code = ErrorCode.FORBIDDEN


class InternalError(AppError):
    code = ErrorCode.INTERNAL_ERROR


class DatabaseError(AppError):
    """Data store call failed or timed out."""

    code = ErrorCode.DATABASE_ERROR


class DuplicateEntryError(AppError):
    """Unique constraint violated."""

    code = ErrorCode.DUPLICATE_ENTRY


class ThirdPartyError(AppError):
    """Error communicating with an external service."""

    code = ErrorCode.THIRD_PARTY_ERROR

    def __init__(
        self,
        message: str,
        service: str,
        details: Optional[list[str]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, details, cause)
        self.service = service


class TooManyRequestsError(AppError):
    code = ErrorCode.TOO_MANY_REQUESTS


class ResourceExhaustedError(AppError):
    code = ErrorCode.RESOURCE_EXHAUSTED


def field_validation_error(field: str, reason: str) -> ValidationError:
    """Build a validation error reporting a single offending field."""
    return ValidationError("Validation failed", details=[f"Field {field} {reason}"])
