"""Immutable value objects for the listening party bounded context."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, ClassVar

from listening_party.domain.shared.exceptions import InvalidIdentifierError
from listening_party.domain.shared.messages import ErrorMessages

if TYPE_CHECKING:
    from listening_party.domain.party.entities import TrackInfo


@dataclass(frozen=True)
class AlbumId:
    """Catalog album identifier (a base62 run such as ``4aawyAB9vmqN3uQ7FjRGTy``)."""

    value: str

    MAX_LENGTH: ClassVar[int] = 64
    _PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"[A-Za-z0-9]+")

    def __post_init__(self) -> None:
        if not self.value:
            raise InvalidIdentifierError(self.value, ErrorMessages.EMPTY_ALBUM_ID)
        if len(self.value) > self.MAX_LENGTH:
            raise InvalidIdentifierError(
                self.value, ErrorMessages.ALBUM_ID_TOO_LONG.format(max_length=self.MAX_LENGTH)
            )
        if not self._PATTERN.fullmatch(self.value):
            raise InvalidIdentifierError(
                self.value, ErrorMessages.ALBUM_ID_NOT_ALPHANUMERIC.format(value=self.value)
            )

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> AlbumId:
        """Build an AlbumId from untrusted text, raising InvalidIdentifierError."""
        if not isinstance(raw, str):
            raise InvalidIdentifierError(repr(raw))
        return cls(raw.strip())


# ── Play state ──────────────────────────────────────────────────────
# Derived on every status query from (tracks, started_at, now); never stored.


@dataclass(frozen=True)
class NotStarted:
    """The album was announced but no start signal has been seen."""


@dataclass(frozen=True)
class Playing:
    """A track is currently playing.

    ``track_index`` indexes the album's track sequence; ``track`` is the
    (immutable) track at that index so callers need no second lookup.
    """

    track_index: int
    track: TrackInfo
    position: timedelta


@dataclass(frozen=True)
class Finished:
    """Every track has played; ``since_end`` is how long ago the last one ended."""

    since_end: timedelta


PlayState = NotStarted | Playing | Finished
