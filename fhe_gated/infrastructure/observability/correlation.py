"""Correlation ids tying together the log lines of one operation.

One id is bound per user-initiated operation (a list, create or verify
command) and carried through contextvars, so every awaited store call of
that operation logs under the same id. asyncio tasks copy the context at
creation, so an id bound before asyncio.run() is visible inside it.

Usage:
    with correlation_scope():
        asyncio.run(registry.list_all())
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

_correlation_id: ContextVar[str] = ContextVar("fhe_gated_correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation id (UUID4)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the bound correlation id, or "" outside any operation."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of a block.

    Args:
        correlation_id: Id to bind. A fresh UUID4 is generated when omitted.

    Yields:
        The bound id. The previously bound id is restored on exit.
    """
    token = _correlation_id.set(correlation_id or generate_correlation_id())
    try:
        yield _correlation_id.get()
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor adding the bound correlation id to each entry.

    An id bound explicitly on the logger takes precedence.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
