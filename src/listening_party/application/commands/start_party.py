"""
Start Party Command

Command and handler for the start signal of a channel's listening party.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from listening_party.domain.shared.datetime_utils import Clock, utcnow
from listening_party.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.party.repository import PartyRegistry

logger = logging.getLogger(__name__)


@dataclass
class StartPartyCommand:
    """Command to mark the channel's announced album as playing from now."""

    channel_id: int

    def __post_init__(self) -> None:
        if self.channel_id <= 0:
            raise ValueError("Channel ID must be positive")


@dataclass
class StartPartyResult:
    """Result of a start party command."""

    started: bool
    started_at: datetime | None = None


class StartPartyHandler:
    """Timestamps the start signal and applies it to the registry.

    Starting a channel with no announced album is a silent no-op: the start
    signal may race with, or precede, announcement detection.
    """

    def __init__(self, *, party_registry: PartyRegistry, clock: Clock = utcnow) -> None:
        self._registry = party_registry
        self._clock = clock

    async def handle(self, command: StartPartyCommand) -> StartPartyResult:
        now = self._clock()
        started = await self._registry.signal_start(command.channel_id, now)
        if not started:
            logger.debug(LogTemplates.REGISTRY_START_IGNORED, command.channel_id)
            return StartPartyResult(started=False)

        logger.info(LogTemplates.REGISTRY_STARTED, command.channel_id, now.isoformat())
        return StartPartyResult(started=True, started_at=now)
