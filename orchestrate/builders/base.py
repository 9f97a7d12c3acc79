"""Shared state machine for fluent request builders.

Lifecycle:
    accumulating -> dispatched

    - Setters mutate the builder and return the same instance for chaining.
    - A terminal action validates the accumulated state, seals the builder and
      returns the awaitable for exactly one request.
    - Any setter or terminal call on a sealed builder raises `BuilderStateError`.
    - A `PreconditionError` raised by a terminal action does not seal the
      builder; the caller can fill in the missing fields and try again.

Modes:
    Builders are created in write or read mode by the owning `Client`. The mode
    decides which terminal actions are allowed.
"""

from __future__ import annotations

from datetime import datetime, timezone
from numbers import Number
from typing import Any

from orchestrate.errors import BuilderStateError, PreconditionError


def require(condition: Any, message: str) -> None:
    """Raise `PreconditionError` with `message` unless `condition` is truthy."""
    if not condition:
        raise PreconditionError(message)


def require_number(value: Any, name: str) -> None:
    """Reject non-numeric values; `bool` is not accepted as a number."""
    if isinstance(value, bool) or not isinstance(value, Number):
        raise PreconditionError(f"{name} must be a number.")


def to_timestamp(value: int | datetime) -> int:
    """Convert a `datetime` to milliseconds since the epoch.

    Naive datetimes are interpreted as UTC. Integers pass through unchanged.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp() * 1000)
    require_number(value, "Timestamp")
    return int(value)


class Builder:
    """Base class holding the delegate client, mode flag, and sealed marker."""

    def __init__(self, delegate, write: bool = False) -> None:
        self._delegate = delegate
        self._write = write
        self._sealed = False

    @property
    def delegate(self):
        return self._delegate

    @property
    def is_write(self) -> bool:
        return self._write

    @property
    def dispatched(self) -> bool:
        return self._sealed

    def _ensure_active(self) -> None:
        if self._sealed:
            raise BuilderStateError(f"{type(self).__name__} already dispatched")

    def _ensure_mode(self, write: bool, action: str) -> None:
        if self._write != write:
            mode = "write" if self._write else "read"
            raise BuilderStateError(
                f"{action}() is not available on a {mode} {type(self).__name__}"
            )

    def _seal(self) -> None:
        self._ensure_active()
        self._sealed = True
