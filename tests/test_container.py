"""
Unit Tests for Dependency Injection Container

Tests for:
- Container initialization with settings
- Lazy initialization and caching of every component
- Shared party registry across the announcement and command paths
- Bot instance management (set_bot, bot property, error when not set)
- Lifecycle methods (initialize, shutdown)
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import SecretStr

from listening_party.application.commands.start_party import StartPartyHandler
from listening_party.application.queries.get_party_status import GetPartyStatusHandler
from listening_party.application.services.album_fetcher import AlbumFetcher
from listening_party.application.services.announcement_service import (
    AnnouncementDetector,
    AnnouncementService,
)
from listening_party.config.container import Container, create_container
from listening_party.config.settings import CatalogSettings, PartySettings, Settings
from listening_party.infrastructure.catalog.spotify_client import SpotifyCatalogClient
from listening_party.infrastructure.persistence.party_registry import InMemoryPartyRegistry


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        catalog=CatalogSettings(client_id=SecretStr("id"), client_secret=SecretStr("secret")),
        party=PartySettings(album_link_host="open.catalog.example", max_channels=3),
    )


@pytest.fixture
def container(settings):
    return Container(settings=settings)


# =============================================================================
# Container Initialization Tests
# =============================================================================


class TestContainerInitialization:
    """Unit tests for Container initialization."""

    def test_create_container_factory(self, settings):
        container = create_container(settings)
        assert isinstance(container, Container)
        assert container.settings is settings

    def test_initial_state_all_none(self, container):
        assert container._bot is None
        assert container._party_registry is None
        assert container._catalog_client is None
        assert container._album_fetcher is None
        assert container._announcement_detector is None
        assert container._announcement_service is None
        assert container._start_party_handler is None
        assert container._party_status_handler is None


# =============================================================================
# Bot Instance Management Tests
# =============================================================================


class TestBotManagement:
    """Unit tests for bot instance management."""

    def test_bot_not_set_raises(self, container):
        with pytest.raises(RuntimeError, match="Bot not initialized"):
            _ = container.bot

    def test_set_bot(self, container):
        bot = MagicMock()
        container.set_bot(bot)
        assert container.bot is bot


# =============================================================================
# Component Wiring Tests
# =============================================================================


class TestComponents:
    """Unit tests for lazily created components."""

    def test_party_registry(self, container):
        registry = container.party_registry

        assert isinstance(registry, InMemoryPartyRegistry)
        assert registry.max_channels == 3
        assert container.party_registry is registry

    def test_catalog_client(self, container):
        client = container.catalog_client

        assert isinstance(client, SpotifyCatalogClient)
        assert container.catalog_client is client

    def test_album_fetcher_uses_catalog_client(self, container):
        fetcher = container.album_fetcher

        assert isinstance(fetcher, AlbumFetcher)
        assert fetcher._catalog is container.catalog_client
        assert container.album_fetcher is fetcher

    def test_announcement_detector_uses_party_settings(self, container):
        detector = container.announcement_detector

        assert isinstance(detector, AnnouncementDetector)
        assert detector.trusted_role_ids == frozenset({1198354637137391709})
        assert detector.extract_album_id("https://open.catalog.example/album/ABC123") == "ABC123"

    def test_announcement_service(self, container):
        service = container.announcement_service

        assert isinstance(service, AnnouncementService)
        assert container.announcement_service is service

    def test_handlers_share_the_registry(self, container):
        start = container.start_party_handler
        status = container.party_status_handler

        assert isinstance(start, StartPartyHandler)
        assert isinstance(status, GetPartyStatusHandler)
        assert start._registry is container.party_registry
        assert status._registry is container.party_registry
        assert container.announcement_service._registry is container.party_registry


# =============================================================================
# Lifecycle Tests
# =============================================================================


class TestLifecycle:
    """Unit tests for initialize/shutdown."""

    @pytest.mark.asyncio
    async def test_initialize_does_not_create_clients(self, container):
        await container.initialize()
        assert container._catalog_client is None

    @pytest.mark.asyncio
    async def test_shutdown_closes_catalog_client(self, container):
        client = AsyncMock()
        container._catalog_client = client

        await container.shutdown()

        client.aclose.assert_awaited_once()
        assert container._catalog_client is None

    @pytest.mark.asyncio
    async def test_shutdown_without_client(self, container):
        await container.shutdown()
        assert container._catalog_client is None

    @pytest.mark.asyncio
    async def test_shutdown_tolerates_close_failure(self, container):
        client = AsyncMock()
        client.aclose.side_effect = RuntimeError("already closed")
        container._catalog_client = client

        await container.shutdown()

        assert container._catalog_client is None
