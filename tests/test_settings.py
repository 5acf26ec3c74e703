"""
Unit Tests for Application Settings Configuration

Tests for:
- Default values for every settings group
- Custom validators (snowflake IDs, link host, log level)
- Environment variable loading with nested delimiters
- Settings caching and clearing
"""

import pytest
from pydantic import SecretStr, ValidationError

from listening_party.config.settings import (
    DEFAULT_TRUSTED_ROLE_IDS,
    CatalogSettings,
    DiscordSettings,
    PartySettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

# =============================================================================
# DiscordSettings Tests
# =============================================================================


class TestDiscordSettings:
    """Unit tests for DiscordSettings configuration."""

    def test_create_with_defaults(self):
        discord = DiscordSettings()

        assert discord.token.get_secret_value() == ""
        assert discord.command_prefix == "!"
        assert discord.test_guild_ids == ()
        assert discord.sync_on_startup is False

    def test_token_aliases(self):
        assert DiscordSettings(bot_token=SecretStr("a")).token.get_secret_value() == "a"
        assert DiscordSettings(discord_token=SecretStr("b")).token.get_secret_value() == "b"

    def test_test_guild_ids_list_converted_to_tuple(self):
        discord = DiscordSettings(test_guild_ids=[111111111111111111, 222222222222222222])
        assert discord.test_guild_ids == (111111111111111111, 222222222222222222)

    def test_invalid_snowflake_raises_error(self):
        with pytest.raises(ValidationError):
            DiscordSettings(test_guild_ids=[0])

    def test_prefix_length(self):
        with pytest.raises(ValidationError):
            DiscordSettings(command_prefix="")
        with pytest.raises(ValidationError):
            DiscordSettings(command_prefix="toolong")

    def test_immutability(self):
        discord = DiscordSettings()
        with pytest.raises(ValidationError):
            discord.command_prefix = "?"


# =============================================================================
# CatalogSettings Tests
# =============================================================================


class TestCatalogSettings:
    """Unit tests for CatalogSettings configuration."""

    def test_create_with_defaults(self):
        catalog = CatalogSettings()

        assert catalog.api_base_url == "https://api.spotify.com/v1"
        assert catalog.token_url == "https://accounts.spotify.com/api/token"
        assert catalog.timeout_seconds == 10.0
        assert catalog.page_size == 50
        assert catalog.market is None
        assert catalog.has_credentials is False

    def test_has_credentials_requires_both(self):
        assert CatalogSettings(client_id=SecretStr("id")).has_credentials is False
        assert (
            CatalogSettings(
                client_id=SecretStr("id"), client_secret=SecretStr("secret")
            ).has_credentials
            is True
        )

    def test_spotify_aliases(self):
        catalog = CatalogSettings(
            spotify_client_id=SecretStr("id"), spotify_client_secret=SecretStr("secret")
        )
        assert catalog.client_id.get_secret_value() == "id"
        assert catalog.client_secret.get_secret_value() == "secret"

    @pytest.mark.parametrize("page_size", [0, 51])
    def test_page_size_bounds(self, page_size):
        with pytest.raises(ValidationError):
            CatalogSettings(page_size=page_size)

    def test_market_must_be_country_code(self):
        assert CatalogSettings(market="SE").market == "SE"
        with pytest.raises(ValidationError):
            CatalogSettings(market="SWE")

    def test_base_url_must_be_http(self):
        with pytest.raises(ValidationError):
            CatalogSettings(api_base_url="ftp://api.example")

    def test_secrets_hidden_in_repr(self):
        catalog = CatalogSettings(client_secret=SecretStr("hunter2"))
        assert "hunter2" not in repr(catalog)


# =============================================================================
# PartySettings Tests
# =============================================================================


class TestPartySettings:
    """Unit tests for PartySettings configuration."""

    def test_create_with_defaults(self):
        party = PartySettings()

        assert party.trusted_role_ids == DEFAULT_TRUSTED_ROLE_IDS
        assert party.trusted_role_ids == (1198354637137391709,)
        assert party.album_link_host == "open.spotify.com"
        assert party.max_channels == 1000

    def test_role_ids_list_converted_to_tuple(self):
        party = PartySettings(lp_roles=[111111111111111111, 222222222222222222])
        assert party.trusted_role_ids == (111111111111111111, 222222222222222222)

    def test_invalid_role_id(self):
        with pytest.raises(ValidationError):
            PartySettings(trusted_role_ids=[-5])

    def test_link_host_normalized(self):
        assert PartySettings(album_link_host=" Open.Catalog.Example ").album_link_host == (
            "open.catalog.example"
        )

    @pytest.mark.parametrize(
        "host", ["", "https://open.spotify.com", "open.spotify.com/album", "host:443"]
    )
    def test_link_host_rejects_non_host(self, host):
        with pytest.raises(ValidationError, match="bare host name"):
            PartySettings(album_link_host=host)

    def test_negative_max_channels(self):
        with pytest.raises(ValidationError):
            PartySettings(max_channels=-1)


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Unit tests for the top-level Settings container."""

    @pytest.fixture(autouse=True)
    def _isolated_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("ENVIRONMENT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        clear_settings_cache()
        yield
        clear_settings_cache()

    def test_create_with_defaults(self):
        settings = Settings()

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert isinstance(settings.discord, DiscordSettings)
        assert isinstance(settings.catalog, CatalogSettings)
        assert isinstance(settings.party, PartySettings)

    def test_log_level_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_loads_nested_environment_variables(self, monkeypatch):
        monkeypatch.setenv("DISCORD__TOKEN", "env-token")
        monkeypatch.setenv("CATALOG__MARKET", "GB")
        monkeypatch.setenv("PARTY__TRUSTED_ROLE_IDS", "[111111111111111111]")
        monkeypatch.setenv("PARTY__ALBUM_LINK_HOST", "open.catalog.example")
        monkeypatch.setenv("PARTY__MAX_CHANNELS", "5")

        settings = Settings()

        assert settings.discord.token.get_secret_value() == "env-token"
        assert settings.catalog.market == "GB"
        assert settings.party.trusted_role_ids == (111111111111111111,)
        assert settings.party.album_link_host == "open.catalog.example"
        assert settings.party.max_channels == 5

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        assert get_settings() is first

        clear_settings_cache()
        second = get_settings()

        assert second is not first
        assert second.log_level == "WARNING"
