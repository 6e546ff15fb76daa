"""
Request correlation IDs.

Stored in a ContextVar, so the ID follows the request into awaited calls and
into indexing tasks created while handling it (asyncio copies the context).

Dependencies: contextvars (stdlib)
System role: Request tracing
"""

import uuid
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("mindmenu_correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Bind correlation_id (a fresh UUID4 when empty) to the current context and return it."""
    value = (correlation_id or "").strip() or uuid.uuid4().hex
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
