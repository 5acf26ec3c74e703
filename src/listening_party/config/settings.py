"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization, so the trusted roles and link host are fixed for the
lifetime of the process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.validators import validate_discord_snowflake, validate_link_host

# @Listening Party role in the test guild
DEFAULT_TRUSTED_ROLE_IDS: tuple[int, ...] = (1198354637137391709,)


def _snowflake_tuple(v: tuple[int, ...] | list[int]) -> tuple[int, ...]:
    # Convert list to tuple if needed (from JSON array in env vars)
    if isinstance(v, list):
        v = tuple(v)
    for snowflake in v:
        validate_discord_snowflake(snowflake)
    return v


class DiscordSettings(BaseModel):
    """Discord bot configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    token: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("token", "bot_token", "discord_token")
    )
    command_prefix: str = Field(
        default="!",
        min_length=1,
        max_length=5,
        validation_alias=AliasChoices("command_prefix", "prefix"),
    )
    test_guild_ids: tuple[int, ...] = Field(
        default_factory=tuple, validation_alias=AliasChoices("test_guild_ids", "test_guilds")
    )
    sync_on_startup: bool = False

    @field_validator("test_guild_ids", mode="before")
    @classmethod
    def validate_snowflake_ids(cls, v: tuple[int, ...] | list[int]) -> tuple[int, ...]:
        """Validate Discord snowflake IDs and convert lists to tuples."""
        return _snowflake_tuple(v)


class CatalogSettings(BaseModel):
    """Music catalog (Spotify Web API) configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    client_id: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("client_id", "spotify_client_id"),
    )
    client_secret: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("client_secret", "spotify_client_secret"),
    )
    api_base_url: str = Field(default="https://api.spotify.com/v1", pattern=r"^https?://")
    token_url: str = Field(
        default="https://accounts.spotify.com/api/token", pattern=r"^https?://"
    )
    timeout_seconds: float = Field(default=10.0, gt=0.0, le=120.0)
    page_size: int = Field(default=50, ge=1, le=50)
    market: str | None = Field(default=None, min_length=2, max_length=2)

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id.get_secret_value() and self.client_secret.get_secret_value())


class PartySettings(BaseModel):
    """Listening party detection and retention configuration."""

    model_config = SettingsConfigDict(frozen=True, strict=True, populate_by_name=True)

    trusted_role_ids: tuple[int, ...] = Field(
        default=DEFAULT_TRUSTED_ROLE_IDS,
        validation_alias=AliasChoices("trusted_role_ids", "lp_roles", "roles"),
    )
    album_link_host: str = Field(
        default="open.spotify.com",
        validation_alias=AliasChoices("album_link_host", "link_host"),
    )
    max_channels: int = Field(default=1000, ge=0)

    @field_validator("trusted_role_ids", mode="before")
    @classmethod
    def validate_role_ids(cls, v: tuple[int, ...] | list[int]) -> tuple[int, ...]:
        """Validate role snowflakes and convert lists to tuples."""
        return _snowflake_tuple(v)

    @field_validator("album_link_host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        return validate_link_host(v)


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, LOG_LEVEL (top-level)
    - DISCORD__TOKEN, DISCORD__TEST_GUILD_IDS, etc. (nested with ``__``)
    - CATALOG__CLIENT_ID, CATALOG__CLIENT_SECRET, CATALOG__MARKET, ...
    - PARTY__TRUSTED_ROLE_IDS (JSON array), PARTY__ALBUM_LINK_HOST, PARTY__MAX_CHANNELS
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        strict=True,
    )

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    party: PartySettings = Field(default_factory=PartySettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels))
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
