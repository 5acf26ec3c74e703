"""Utility functions for formatting Discord messages."""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache


def format_duration(span: timedelta | int | float | None) -> str:
    """Render a time span as ``h:mm:ss`` when it spans an hour, else ``mm:ss``.

    Fractional seconds are truncated. Negative spans clamp to zero.
    """
    if span is None:
        return "–"

    if isinstance(span, timedelta):
        span = span.total_seconds()
    return _format_seconds(max(int(span), 0))


@lru_cache(maxsize=1024)
def _format_seconds(total_seconds: int) -> str:
    hours = total_seconds // 3600
    minutes = (total_seconds // 60) % 60
    secs = total_seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"

