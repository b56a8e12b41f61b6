"""
Uniform JSON response envelope.

Every response body has the shape::

    {"success": true, "data": ...}
    {"success": false, "error": {"code": ..., "message": ..., "details": [...]}}

Route handlers only ever return success(...) or raise; the registered
exception handlers only ever call error(...).
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.exceptions import AppError, ErrorCode, STATUS_CODES, UNEXPECTED_ERROR_MESSAGE


class ErrorBody(BaseModel):
    """Error part of the envelope."""

    code: ErrorCode
    message: str
    details: Optional[list[str]] = None


class APIResponse(BaseModel):
    """Response envelope model (used for OpenAPI documentation)."""

    success: bool
    data: Optional[Any] = None
    error: Optional[ErrorBody] = None


def success(data: Any = None, status_code: int = 200, headers: Optional[dict[str, str]] = None) -> JSONResponse:
    """Wrap ``data`` in a success envelope."""
    content: dict[str, Any] = {"success": True}
    if data is not None:
        content["data"] = jsonable_encoder(data, by_alias=True)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def error_response(
    code: ErrorCode,
    message: str,
    status_code: Optional[int] = None,
    details: Optional[list[str]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Build an error envelope from its parts."""
    body = ErrorBody(code=code, message=message, details=details or None)
    return JSONResponse(
        status_code=status_code or STATUS_CODES[code],
        content={"success": False, "error": body.model_dump(mode="json", exclude_none=True)},
        headers=headers,
    )


def error(exc: BaseException) -> JSONResponse:
    """
    Render any exception as an error envelope.

    AppErrors keep their code, message, status and details. Anything else
    becomes a 500 INTERNAL_ERROR with a generic message.
    """
    if isinstance(exc, AppError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.to_dict()},
        )
    return error_response(ErrorCode.INTERNAL_ERROR, UNEXPECTED_ERROR_MESSAGE)
