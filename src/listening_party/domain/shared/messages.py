"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Discord ID Validation Errors
    INVALID_SNOWFLAKE = "Discord snowflake ID must be positive"
    SNOWFLAKE_TOO_LARGE = "Discord snowflake ID exceeds maximum value (2^64)"

    # Album Validation Errors
    EMPTY_ALBUM_ID = "Album ID cannot be empty"
    ALBUM_ID_TOO_LONG = "Album ID cannot exceed {max_length} characters"
    ALBUM_ID_NOT_ALPHANUMERIC = "Album ID must be alphanumeric: {value!r}"
    NEGATIVE_TRACK_DURATION = "Track duration cannot be negative"
    ALBUM_HAS_NO_TRACKS = "Album has no tracks"

    # Time/Date Validation Errors
    TIMEZONE_REQUIRED = "datetime must be timezone-aware (UTC)"
    TIMEZONE_REQUIRED_NOW = "now must be timezone-aware"

    # Catalog Errors
    CATALOG_CREDENTIALS_NOT_SET = (
        "Catalog credentials missing: set CATALOG__CLIENT_ID and CATALOG__CLIENT_SECRET"
    )

    # Settings Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    INVALID_LINK_HOST = "Album link host must be a bare host name, got {value!r}"

    # Authentication/Security Errors
    DISCORD_TOKEN_REQUIRED = "DISCORD_TOKEN environment variable is required"
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """Log message templates for %-style logging.

    Pass values as logger arguments rather than pre-formatting them.
    """

    # Announcement pipeline
    ANNOUNCEMENT_IGNORED_NO_ROLE = "Ignoring message in channel %s: no trusted role mentioned"
    ANNOUNCEMENT_IGNORED_NO_LINK = "Ignoring message in channel %s: no album link found"
    ANNOUNCEMENT_ALBUM_PINGED = "Album pinged in channel %s: %s - %s"
    ANNOUNCEMENT_RECORDED = (
        "Recorded listening party in channel %s (%d tracks, %d channels tracked)"
    )
    ANNOUNCEMENT_FETCH_FAILED = "Error resolving ping in channel %s: %s"
    ANNOUNCEMENT_INVALID_ID = "Discarding album link in channel %s: %s"

    # Registry
    REGISTRY_OVERWRITE = "Replacing listening party in channel %s"
    REGISTRY_EVICTED = "Evicted listening party for channel %s (capacity %d)"
    REGISTRY_STARTED = "Listening party started in channel %s at %s"
    REGISTRY_START_IGNORED = "Start signal for channel %s ignored: no announced party"

    # Play position
    CLOCK_ANOMALY = "Start timestamp in the future! started=%s > now=%s"

    # Catalog client
    CATALOG_TOKEN_REFRESHED = "Catalog access token refreshed (expires in %ss)"
    CATALOG_REQUEST = "Catalog request %s %s"
    CATALOG_PAGE_FETCHED = "Fetched %d tracks for album %s (offset %d)"
    CATALOG_CLIENT_CLOSED = "Catalog HTTP client closed"

    # Bot Lifecycle
    LOGGING_CONFIG_FALLBACK = "Could not apply %s, using basic console logging"
    BOT_STARTING = "Starting listening party bot (environment=%s)"
    BOT_STOPPED = "Bot stopped"
    BOT_FATAL_ERROR = "Fatal error, bot stopped"
    BOT_READY = "Bot ready as %s in %d guilds"
    BOT_SYNCED = "Synced %d commands (%s)"
    BOT_SYNC_FAILED = "Failed to sync commands (%s): %s"
    BOT_SLASH_COMMAND_ERROR = "Slash command error in /%s: %s"
    BOT_ERROR_MESSAGE_SEND_FAILED = "Failed to send error message to user"
    BOT_CONTAINER_SHUTDOWN_ERROR = "Error shutting down container: %s"

    # Cog Lifecycle
    COG_LOADED_PARTY = "Party cog loaded"


class DiscordUIMessages:
    """User-facing text rendered into Discord responses."""

    STATUS_NO_PARTY = "There is no listening party at the moment."
    STATUS_HEADER = "Ongoing Listening Party:"
    STATUS_ALBUM_LINE = "{artist} - {name} ({total})"
    STATUS_NOT_STARTED = "Not yet started."
    STATUS_FINISHED = "LP ended {since} ago"
    STATUS_PLAYING = "Playing Track {number}: `{name}` at **{position}** / {duration}"
    STATUS_ALBUM_LINK = "Album: <{uri}>"
    STATUS_NO_ALBUM_LINK = "No album link available"

    START_STARTED = "Listening party started! Track 1 is playing now."
    START_NO_PARTY = "No announced album in this channel, nothing to start."

    ERROR_COMMAND_FAILED = "An error occurred: {error}"
