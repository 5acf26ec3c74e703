"""Date/time helpers.

- Always operate on timezone-aware UTC datetimes.
- Clocks are plain callables so handlers can be driven by a frozen clock in tests.

This module is intentionally dependency-free and safe to use in any layer.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]
"""Zero-argument callable returning the current aware UTC instant."""


def utcnow() -> datetime:
    """Preferred replacement for `datetime.now(UTC)`.

    Returns a timezone-aware datetime in UTC.
    """
    return datetime.now(UTC)


def ensure_aware(value: datetime, message: str) -> datetime:
    """Return ``value`` normalised to UTC, rejecting naive datetimes."""
    if value.tzinfo is None:
        raise ValueError(message)
    return value.astimezone(UTC)
