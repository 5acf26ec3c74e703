#!/usr/bin/env python3
"""Console entry point: load settings, configure logging, run the bot."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path

from listening_party.domain.shared.messages import ErrorMessages, LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"
_FALLBACK_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", config_path: Path = _LOGGING_CONFIG_PATH) -> None:
    """Apply ``logging_config.json``; fall back to plain console logging if it is unusable.

    ``log_level`` always wins over the root level in the file.
    """
    try:
        logging.config.dictConfig(json.loads(config_path.read_text(encoding="utf-8")))
    except (OSError, ValueError):
        logging.basicConfig(format=_FALLBACK_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        logger.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, config_path)

    logging.getLogger().setLevel(getattr(logging, log_level.upper(), logging.INFO))


def main() -> int:
    from listening_party.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    token = settings.discord.token.get_secret_value()
    if not token:
        logger.error(ErrorMessages.DISCORD_TOKEN_REQUIRED)
        return 1

    from listening_party.config.container import create_container
    from listening_party.infrastructure.discord.bot import create_bot

    bot = create_bot(create_container(settings), settings)
    logger.info(LogTemplates.BOT_STARTING, settings.environment)
    try:
        bot.serve(token)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception(LogTemplates.BOT_FATAL_ERROR)
        return 1

    logger.info(LogTemplates.BOT_STOPPED)
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
