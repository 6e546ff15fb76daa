"""
Structured logging helpers.

Context values passed as keyword arguments end up as LogRecord attributes.
They are flattened first so that large documents, chunk lists or vectors
never get dumped into a log line.

Dependencies: logging (stdlib)
System role: Log context shaping for services and background jobs
"""

import enum
import logging
import uuid
from collections.abc import Mapping, Sized
from typing import Any

MAX_VALUE_LENGTH = 300


def summarize(value: Any, max_length: int = MAX_VALUE_LENGTH) -> Any:
    """
    Reduce a context value to something small and JSON-friendly.

    Scalars pass through; UUIDs and enums become their string form; mappings
    and sequences are replaced by their size; long strings are cut.
    """
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Mapping):
        return f"<{len(value)} keys>"
    if isinstance(value, Sized) and not isinstance(value, (str, bytes)):
        return f"<{len(value)} items>"

    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_length:
        return f"{text[:max_length]}...<{len(text)} chars>"
    return text


def _context(context: Mapping[str, Any]) -> dict[str, Any]:
    return {key: summarize(value) for key, value in context.items()}


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Log message with summarized keyword context attached as record attributes."""
    logger.log(level, message, extra=_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an error with traceback, the exception class and message included.

    Must be called from inside the except block handling exc.
    """
    extra = _context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = summarize(str(exc))
    logger.exception(message, extra=extra)
