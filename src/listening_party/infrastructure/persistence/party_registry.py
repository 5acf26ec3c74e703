"""In-memory party registry guarded by an asyncio reader/writer lock.

Records live for the lifetime of the process; nothing is persisted.
"""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime

from listening_party.domain.party.entities import AlbumInfo, PartyRecord
from listening_party.domain.party.repository import PartyRegistry
from listening_party.domain.shared.datetime_utils import ensure_aware
from listening_party.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """Writer-preferring reader/writer lock for coroutines on one event loop.

    Any number of readers may hold the lock together; a writer holds it alone.
    Waiting writers block new readers so announcements are not starved by a
    steady stream of status queries.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writing(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and self._writers_waiting == 0)
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            finally:
                self._writers_waiting -= 1
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


class InMemoryPartyRegistry(PartyRegistry):
    """Channel -> PartyRecord map behind a single coarse reader/writer lock.

    ``max_channels`` bounds the number of tracked channels; once exceeded the
    least recently announced channel is dropped. ``0`` means unbounded.

    An announcement replaces the whole record, so a start signal racing with
    a newer announcement for the same channel is lost (last writer wins).
    """

    def __init__(self, *, max_channels: int = 0) -> None:
        if max_channels < 0:
            raise ValueError("max_channels must be non-negative")
        self._max_channels = max_channels
        self._records: OrderedDict[int, PartyRecord] = OrderedDict()
        self._lock = ReadWriteLock()

    @property
    def max_channels(self) -> int:
        return self._max_channels

    async def record_announcement(self, channel_id: int, album: AlbumInfo) -> None:
        record = PartyRecord(album=album, started_at=None)
        async with self._lock.write():
            if self._records.pop(channel_id, None) is not None:
                logger.debug(LogTemplates.REGISTRY_OVERWRITE, channel_id)
            self._records[channel_id] = record
            self._evict_overflow()

    async def signal_start(self, channel_id: int, now: datetime) -> bool:
        now = ensure_aware(now, ErrorMessages.TIMEZONE_REQUIRED_NOW)
        async with self._lock.write():
            record = self._records.get(channel_id)
            if record is None:
                return False
            self._records[channel_id] = record.started(now)
            return True

    async def get(self, channel_id: int) -> PartyRecord | None:
        # Records are frozen, so handing one out is a snapshot.
        async with self._lock.read():
            return self._records.get(channel_id)

    async def count(self) -> int:
        async with self._lock.read():
            return len(self._records)

    def _evict_overflow(self) -> None:
        if not self._max_channels:
            return
        while len(self._records) > self._max_channels:
            evicted, _ = self._records.popitem(last=False)
            logger.debug(LogTemplates.REGISTRY_EVICTED, evicted, self._max_channels)
