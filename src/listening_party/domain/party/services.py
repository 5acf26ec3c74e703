"""
Listening Party Domain Services

Play-position derivation: which track of an announced album is "playing"
given the wall-clock time elapsed since the party's start signal.
"""

from __future__ import annotations

import logging
from datetime import datetime

from listening_party.domain.party.entities import PartyRecord
from listening_party.domain.party.value_objects import (
    Finished,
    NotStarted,
    Playing,
    PlayState,
)
from listening_party.domain.shared.datetime_utils import ensure_aware
from listening_party.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


class PlayPositionResolver:
    """Domain service resolving a PartyRecord into a PlayState.

    The walk is a linear scan over the track list; albums hold a handful to
    tens of tracks and the result depends on ``now``, so nothing is cached.
    """

    @classmethod
    def resolve(cls, record: PartyRecord, now: datetime) -> PlayState:
        """Compute the play state of ``record`` at instant ``now``.

        Args:
            record: The channel's party record.
            now: Current instant (timezone-aware).

        Returns:
            NotStarted, Playing or Finished.
        """
        now = ensure_aware(now, ErrorMessages.TIMEZONE_REQUIRED_NOW)
        started = record.started_at
        if started is None:
            return NotStarted()

        if started > now:
            logger.warning(LogTemplates.CLOCK_ANOMALY, started.isoformat(), now.isoformat())
            return NotStarted()

        remaining = now - started
        for index, track in enumerate(record.album.tracks):
            if remaining < track.duration:
                return Playing(track_index=index, track=track, position=remaining)
            remaining -= track.duration

        # remaining = now - started - total duration: how long ago the album ended
        return Finished(since_end=remaining)
