"""
Shared models used across modules.

These models are used by multiple modules and should not contain
module-specific logic.
"""

import uuid
from decimal import Decimal
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def _check_uuid(value: str) -> str:
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise ValueError("must be a valid UUID")


# UUID accepted and rendered as its canonical string form
UUIDStr = Annotated[str, AfterValidator(_check_uuid)]


class Claims(BaseModel):
    """
    Identity carried by a signed access token.

    Issued at login and decoded by the auth dependency on each request.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UUIDStr
    email: str
    exp: int
    iat: int


class Pagination(BaseModel):
    """Page request for list endpoints (1-indexed)."""

    model_config = ConfigDict(frozen=True)

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of items plus the total count across all pages."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[T]
    total: int
    page: int
    page_size: int = Field(alias="pageSize")


# Money is held as Decimal and rendered as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
