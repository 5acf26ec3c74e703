"""Shared validators for settings and domain models."""

from __future__ import annotations

from listening_party.domain.shared.messages import ErrorMessages


def validate_discord_snowflake(value: int) -> int:
    """Validate a Discord snowflake ID.

    Discord snowflake IDs are 64-bit unsigned integers identifying users,
    guilds, channels, roles, messages, etc.

    Args:
        value: The snowflake ID to validate.

    Returns:
        The validated snowflake ID.

    Raises:
        ValueError: If the snowflake ID is invalid.
    """
    if value <= 0:
        raise ValueError(ErrorMessages.INVALID_SNOWFLAKE)
    if value >= 2**64:
        raise ValueError(ErrorMessages.SNOWFLAKE_TOO_LARGE)
    return value


def validate_link_host(value: str) -> str:
    """Validate that ``value`` is a bare host name (no scheme, path or port)."""
    host = value.strip()
    if not host or any(ch in host for ch in "/:?#@ "):
        raise ValueError(ErrorMessages.INVALID_LINK_HOST.format(value=value))
    return host.lower()
