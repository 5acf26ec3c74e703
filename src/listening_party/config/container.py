"""Dependency Injection Container

Owns the application's dependency graph with lazy initialization and
lifecycle management. The party registry lives here: it is created once per
container and handed to every handler that needs it, never stored globally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.commands.start_party import StartPartyHandler
    from ..application.interfaces.catalog_client import CatalogClient
    from ..application.queries.get_party_status import GetPartyStatusHandler
    from ..application.services.album_fetcher import AlbumFetcher
    from ..application.services.announcement_service import (
        AnnouncementDetector,
        AnnouncementService,
    )
    from ..domain.party.repository import PartyRegistry
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _bot: Bot | None = None

    # State
    _party_registry: PartyRegistry | None = None

    # Infrastructure adapters
    _catalog_client: CatalogClient | None = None

    # Application services
    _album_fetcher: AlbumFetcher | None = None
    _announcement_detector: AnnouncementDetector | None = None
    _announcement_service: AnnouncementService | None = None

    # Command / query handlers
    _start_party_handler: StartPartyHandler | None = None
    _party_status_handler: GetPartyStatusHandler | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError("Bot not initialized. Call set_bot() first.")
        return self._bot

    # === State ===

    @property
    def party_registry(self) -> PartyRegistry:
        """Get the per-channel party registry."""
        if self._party_registry is None:
            from ..infrastructure.persistence.party_registry import InMemoryPartyRegistry

            self._party_registry = InMemoryPartyRegistry(
                max_channels=self.settings.party.max_channels
            )
        return self._party_registry

    # === Infrastructure Adapters ===

    @property
    def catalog_client(self) -> CatalogClient:
        """Get the music catalog client."""
        if self._catalog_client is None:
            from ..infrastructure.catalog.spotify_client import SpotifyCatalogClient

            self._catalog_client = SpotifyCatalogClient(self.settings.catalog)
        return self._catalog_client

    # === Application Services ===

    @property
    def album_fetcher(self) -> AlbumFetcher:
        """Get the album fetcher."""
        if self._album_fetcher is None:
            from ..application.services.album_fetcher import AlbumFetcher

            self._album_fetcher = AlbumFetcher(catalog_client=self.catalog_client)
        return self._album_fetcher

    @property
    def announcement_detector(self) -> AnnouncementDetector:
        """Get the announcement detector configured with the trusted roles."""
        if self._announcement_detector is None:
            from ..application.services.announcement_service import AnnouncementDetector

            self._announcement_detector = AnnouncementDetector(
                trusted_role_ids=self.settings.party.trusted_role_ids,
                album_link_host=self.settings.party.album_link_host,
            )
        return self._announcement_detector

    @property
    def announcement_service(self) -> AnnouncementService:
        """Get the announcement service."""
        if self._announcement_service is None:
            from ..application.services.announcement_service import AnnouncementService

            self._announcement_service = AnnouncementService(
                detector=self.announcement_detector,
                album_fetcher=self.album_fetcher,
                party_registry=self.party_registry,
            )
        return self._announcement_service

    # === Command / Query Handlers ===

    @property
    def start_party_handler(self) -> StartPartyHandler:
        """Get the start party command handler."""
        if self._start_party_handler is None:
            from ..application.commands.start_party import StartPartyHandler

            self._start_party_handler = StartPartyHandler(party_registry=self.party_registry)
        return self._start_party_handler

    @property
    def party_status_handler(self) -> GetPartyStatusHandler:
        """Get the party status query handler."""
        if self._party_status_handler is None:
            from ..application.queries.get_party_status import GetPartyStatusHandler

            self._party_status_handler = GetPartyStatusHandler(party_registry=self.party_registry)
        return self._party_status_handler

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Initialize async resources."""
        logger.info(
            "Tracking listening parties for roles %s on %s",
            list(self.settings.party.trusted_role_ids),
            self.settings.party.album_link_host,
        )

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._catalog_client is not None:
            try:
                await self._catalog_client.aclose()
            except Exception as exc:
                logger.warning("Failed closing catalog client: %r", exc)
            self._catalog_client = None


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
