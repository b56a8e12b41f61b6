"""
Logging configuration for the Commerce API.

Sets up a single stdout handler with a consistent format and provides
RequestLogger, a LoggerAdapter that carries request-scoped fields
(correlation id, method, path, user id) into every record it emits.
Never logs sensitive data (request bodies, passwords, tokens, secrets).
"""

import logging
import sys
from typing import Any, MutableMapping

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Request logging middleware already reports every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def _format_fields(fields: dict[str, Any]) -> str:
    return " ".join(f"{key}={value}" for key, value in fields.items() if value is not None)


class RequestLogger(logging.LoggerAdapter):
    """
    Logger bound to a set of key/value fields.

    Bound fields are appended to the message as ``key=value`` pairs and are
    also attached to the record under ``fields`` for structured handlers.
    Per-call fields can be passed with ``extra={"fields": {...}}``.
    """

    def __init__(self, logger: logging.Logger, fields: dict[str, Any] | None = None):
        super().__init__(logger, {})
        self.fields: dict[str, Any] = dict(fields or {})

    def bind(self, **fields: Any) -> "RequestLogger":
        """Return a child logger carrying the current fields plus ``fields``."""
        return RequestLogger(self.logger, {**self.fields, **fields})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        call_fields = extra.pop("fields", {}) or {}
        merged = {**self.fields, **call_fields}
        extra["fields"] = merged
        kwargs["extra"] = extra
        suffix = _format_fields(merged)
        if suffix:
            msg = f"{msg} | {suffix}"
        return msg, kwargs


def get_request_logger(name: str, **fields: Any) -> RequestLogger:
    """Create a RequestLogger over the named module logger."""
    return RequestLogger(logging.getLogger(name), fields)
