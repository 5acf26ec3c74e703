"""Announcement detection: remember the album pinged to a trusted role in a channel."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from listening_party.domain.shared.exceptions import FetchFailedError, InvalidIdentifierError
from listening_party.domain.shared.messages import LogTemplates
from listening_party.domain.shared.types import DiscordSnowflake

if TYPE_CHECKING:
    from ...domain.party.entities import AlbumInfo
    from ...domain.party.repository import PartyRegistry
    from .album_fetcher import AlbumFetcher

logger = logging.getLogger(__name__)


class InboundMessage(BaseModel):
    """The parts of a chat message the detector looks at."""

    model_config = ConfigDict(frozen=True)

    channel_id: DiscordSnowflake
    text: str = ""
    role_mentions: frozenset[int] = Field(default_factory=frozenset)


class AnnouncementDetector:
    """Role gate plus album-link extraction.

    Only messages mentioning one of the trusted roles are considered, so
    arbitrary users cannot trigger catalog traffic. The first album link in
    the text wins; further links are ignored.
    """

    def __init__(self, *, trusted_role_ids: Iterable[int], album_link_host: str) -> None:
        self._trusted_role_ids = frozenset(trusted_role_ids)
        self._link_re = re.compile(
            rf"\bhttps://{re.escape(album_link_host)}/album/([A-Za-z0-9]+)"
            r"(?:\?[A-Za-z0-9?=&_.%-]*)?"
        )

    @property
    def trusted_role_ids(self) -> frozenset[int]:
        return self._trusted_role_ids

    def mentions_trusted_role(self, role_mentions: Iterable[int]) -> bool:
        return not self._trusted_role_ids.isdisjoint(role_mentions)

    def extract_album_id(self, text: str) -> str | None:
        """Return the album id of the first album link in ``text``, if any."""
        match = self._link_re.search(text)
        return match.group(1) if match else None

    def detect(self, message: InboundMessage) -> str | None:
        """Return the announced album id, or None when the message is not an announcement."""
        if not self.mentions_trusted_role(message.role_mentions):
            logger.debug(LogTemplates.ANNOUNCEMENT_IGNORED_NO_ROLE, message.channel_id)
            return None

        album_id = self.extract_album_id(message.text)
        if album_id is None:
            logger.debug(LogTemplates.ANNOUNCEMENT_IGNORED_NO_LINK, message.channel_id)
        return album_id


class AnnouncementService:
    """Detect, fetch and record announcements.

    Failures are absorbed: a bad or unreachable album leaves the registry
    untouched and produces only a log line, never a chat reply.
    """

    def __init__(
        self,
        *,
        detector: AnnouncementDetector,
        album_fetcher: AlbumFetcher,
        party_registry: PartyRegistry,
    ) -> None:
        self._detector = detector
        self._fetcher = album_fetcher
        self._registry = party_registry

    async def handle_message(self, message: InboundMessage) -> AlbumInfo | None:
        """Process one inbound message.

        Returns:
            The album now recorded for the channel, or None if nothing changed.
        """
        album_id = self._detector.detect(message)
        if album_id is None:
            return None

        # The fetch completes before the registry write lock is taken.
        try:
            album = await self._fetcher.fetch(album_id)
        except InvalidIdentifierError as e:
            logger.warning(LogTemplates.ANNOUNCEMENT_INVALID_ID, message.channel_id, e.message)
            return None
        except FetchFailedError as e:
            logger.warning(LogTemplates.ANNOUNCEMENT_FETCH_FAILED, message.channel_id, e.cause)
            return None

        logger.info(
            LogTemplates.ANNOUNCEMENT_ALBUM_PINGED, message.channel_id, album.artist, album.name
        )
        await self._registry.record_announcement(message.channel_id, album)
        logger.info(
            LogTemplates.ANNOUNCEMENT_RECORDED,
            message.channel_id,
            album.track_count,
            await self._registry.count(),
        )
        return album
