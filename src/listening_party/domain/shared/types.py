"""Reusable Pydantic Annotated types for domain-wide validation.

Constrained types are defined here once so models can simply annotate their
fields::

    from listening_party.domain.shared.types import DiscordSnowflake, HttpUrlStr

    class MyModel(BaseModel):
        channel_id: DiscordSnowflake
        uri: HttpUrlStr
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Annotated

from pydantic import AfterValidator, BeforeValidator, Field

from listening_party.domain.shared.messages import ErrorMessages

# ── Numeric constraints ─────────────────────────────────────────────

DiscordSnowflake = Annotated[int, Field(gt=0, lt=2**64)]
"""Positive integer that fits a Discord snowflake (1 … 2^64-1)."""

TrackNumber = Annotated[int, Field(gt=0)]
"""One-based position of a track on its disc."""


# ── String constraints ──────────────────────────────────────────────

HttpUrlStr = Annotated[str, Field(pattern=r"^https?://")]
"""String that starts with http:// or https://."""


# ── Time spans ──────────────────────────────────────────────────────


def _ensure_non_negative(v: timedelta) -> timedelta:
    if v < timedelta(0):
        raise ValueError(ErrorMessages.NEGATIVE_TRACK_DURATION)
    return v


TrackDuration = Annotated[timedelta, AfterValidator(_ensure_non_negative)]
"""Length of a track; never negative."""


# ── Datetime constraints ────────────────────────────────────────────


def _ensure_utc(v: datetime) -> datetime:
    """Validate that a datetime is timezone-aware and normalise to UTC."""
    if not isinstance(v, datetime):
        return v
    if v.tzinfo is None:
        raise ValueError(ErrorMessages.TIMEZONE_REQUIRED)
    return v.astimezone(UTC)


UtcDatetimeField = Annotated[datetime, BeforeValidator(_ensure_utc)]
"""Timezone-aware datetime, normalised to UTC on input."""
