"""Core domain entities for the listening party bounded context."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict

from listening_party.domain.shared.types import (
    HttpUrlStr,
    TrackDuration,
    TrackNumber,
    UtcDatetimeField,
)


class TrackInfo(BaseModel):
    """Immutable value object for one track of an announced album."""

    model_config = ConfigDict(frozen=True, strict=True)

    number: TrackNumber
    name: str
    uri: HttpUrlStr | None = None
    duration: TrackDuration


class AlbumInfo(BaseModel):
    """Immutable album snapshot; ``tracks`` order is play order, not track number."""

    model_config = ConfigDict(frozen=True)

    artist: str
    name: str
    uri: HttpUrlStr | None = None
    tracks: tuple[TrackInfo, ...] = ()

    @property
    def total_duration(self) -> timedelta:
        return sum((track.duration for track in self.tracks), timedelta(0))

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    @property
    def display_name(self) -> str:
        return f"{self.artist} - {self.name}"


class PartyRecord(BaseModel):
    """What a channel's listening party currently refers to.

    ``started_at is None`` means the album was announced but not started.
    Records are immutable snapshots; the registry swaps whole records.
    """

    model_config = ConfigDict(frozen=True)

    album: AlbumInfo
    started_at: UtcDatetimeField | None = None

    def started(self, at: datetime) -> PartyRecord:
        """Return a copy of this record marked as started at ``at``."""
        return PartyRecord(album=self.album, started_at=at)
