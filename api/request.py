"""
Request decoding helpers.

json_body() turns a pydantic model into a dependency that decodes and
validates the raw request body, reporting failures through the error
taxonomy. get_pagination() parses the shared page/pageSize query
parameters with a lenient fallback policy.
"""

import uuid
from typing import Any, Callable, Optional, Sequence, TypeVar

from fastapi import Query, Request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from shared.exceptions import BadRequestError, ValidationError
from shared.models import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Pagination

ModelT = TypeVar("ModelT", bound=BaseModel)

# Errors that mean the body was not a JSON object at all
_DECODE_ERROR_TYPES = {"json_invalid", "json_type"}


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or "body"


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> list[str]:
    """
    Convert pydantic error dicts into one readable message per field.

    Example:
        [{"type": "missing", "loc": ("email",), ...}] -> ["Field email is required"]
    """
    messages = []
    for err in errors:
        field = _field_name(err.get("loc", ()))
        kind = err.get("type", "")
        ctx = err.get("ctx") or {}
        msg = err.get("msg", "")

        if kind == "missing":
            messages.append(f"Field {field} is required")
        elif kind == "value_error" and "email" in msg.lower():
            messages.append(f"Field {field} must be a valid email address")
        elif kind in ("string_too_short", "too_short"):
            limit = ctx.get("min_length")
            messages.append(f"Field {field} must be at least {limit} characters")
        elif kind in ("string_too_long", "too_long"):
            limit = ctx.get("max_length")
            messages.append(f"Field {field} must be at most {limit} characters")
        elif kind == "greater_than":
            messages.append(f"Field {field} must be greater than {ctx.get('gt')}")
        elif kind == "greater_than_equal":
            messages.append(f"Field {field} must be greater than or equal to {ctx.get('ge')}")
        elif kind == "less_than":
            messages.append(f"Field {field} must be less than {ctx.get('lt')}")
        elif kind == "less_than_equal":
            messages.append(f"Field {field} must be less than or equal to {ctx.get('le')}")
        else:
            messages.append(f"Field {field} is invalid: {msg}")
    return messages


def decode_body(raw: bytes, model: type[ModelT]) -> ModelT:
    """
    Decode and validate a raw JSON body.

    Raises:
        BadRequestError: If the body is empty or is not a JSON object.
        ValidationError: If any field fails validation.
    """
    if not raw or not raw.strip():
        raise BadRequestError("Request body cannot be empty")

    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as e:
        errors = e.errors()
        if any(err["type"] in _DECODE_ERROR_TYPES for err in errors) or any(
            err["type"] == "model_type" and not err["loc"] for err in errors
        ):
            raise BadRequestError("Invalid JSON format") from e
        raise ValidationError("Validation failed", details=format_validation_errors(errors)) from e


def json_body(model: type[ModelT]) -> Callable[[Request], Any]:
    """
    Build a dependency that decodes the request body into ``model``.

    Usage:
        @router.post("")
        async def create(body: CreateProductRequest = Depends(json_body(CreateProductRequest))):
            ...
    """

    async def dependency(request: Request) -> ModelT:
        return decode_body(await request.body(), model)

    dependency.__name__ = f"json_body_{model.__name__}"
    return dependency


def _parse_positive_int(value: Optional[str]) -> Optional[int]:
    # Plain ASCII digits only: no sign, whitespace or underscores
    if value is None or not (value.isascii() and value.isdigit()):
        return None
    parsed = int(value)
    return parsed if parsed >= 1 else None


def parse_pagination(page: Optional[str], page_size: Optional[str]) -> Pagination:
    """
    Apply the pagination fallback policy.

    Non-integer or < 1 page falls back to 1; non-integer, < 1 or
    > 100 page size falls back to 10.
    """
    parsed_page = _parse_positive_int(page) or DEFAULT_PAGE
    parsed_size = _parse_positive_int(page_size)
    if parsed_size is None or parsed_size > MAX_PAGE_SIZE:
        parsed_size = DEFAULT_PAGE_SIZE
    return Pagination(page=parsed_page, page_size=parsed_size)


async def get_pagination(
    page: Optional[str] = Query(default=None, description="Page number (1-indexed)"),
    page_size: Optional[str] = Query(default=None, alias="pageSize", description="Items per page (max 100)"),
) -> Pagination:
    """FastAPI dependency for list endpoints."""
    return parse_pagination(page, page_size)


def parse_id(value: str, resource: str) -> str:
    """
    Validate a UUID path parameter.

    Raises:
        BadRequestError: If ``value`` is not a UUID.
    """
    try:
        return str(uuid.UUID(value))
    except ValueError:
        raise BadRequestError(f"Invalid {resource} ID")
