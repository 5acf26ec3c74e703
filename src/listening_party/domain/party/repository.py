"""
Listening Party Repository Interface

Abstract base class defining the contract for the per-channel party registry.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from listening_party.domain.party.entities import AlbumInfo, PartyRecord


class PartyRegistry(ABC):
    """Abstract registry mapping a channel to its most recently announced album.

    Implementations must be safe for concurrent use from many tasks and must
    never hand out references into their internal state; ``get`` returns a
    snapshot that stays valid after the call returns.
    """

    @abstractmethod
    async def record_announcement(self, channel_id: int, album: AlbumInfo) -> None:
        """Insert or overwrite the channel's record with a not-yet-started party.

        Args:
            channel_id: The Discord channel ID.
            album: The freshly fetched album.
        """
        ...

    @abstractmethod
    async def signal_start(self, channel_id: int, now: datetime) -> bool:
        """Mark the channel's party as started at ``now``.

        Args:
            channel_id: The Discord channel ID.
            now: The start instant (timezone-aware).

        Returns:
            True if a record existed and was started, False if there was nothing to start.
        """
        ...

    @abstractmethod
    async def get(self, channel_id: int) -> PartyRecord | None:
        """Retrieve a snapshot of the channel's record.

        Args:
            channel_id: The Discord channel ID.

        Returns:
            The record if one exists, None otherwise.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of channels currently tracked."""
        ...
