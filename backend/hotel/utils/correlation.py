from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_correlation_ctx: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None) -> None:
    """Store the id in context (None to clear)."""
    _correlation_ctx.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    return _correlation_ctx.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation id for the duration of the block. Reuses the id already
    in context when none is given, and generates one if the context is empty.
    """
    value = correlation_id or get_correlation_id() or generate_correlation_id()
    token = _correlation_ctx.set(value)
    try:
        yield value
    finally:
        _correlation_ctx.reset(token)
