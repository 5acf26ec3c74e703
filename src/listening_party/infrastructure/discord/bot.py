"""Discord client hosting the party cog, wired to the DI container."""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from listening_party.domain.shared.messages import DiscordUIMessages, LogTemplates

if TYPE_CHECKING:
    from ...config.container import Container
    from ...config.settings import Settings

logger = logging.getLogger(__name__)

COGS: tuple[str, ...] = ("listening_party.infrastructure.discord.cogs.party_cog",)
GLOBAL_SCOPE = "global"


class ListeningPartyBot(commands.Bot):
    def __init__(self, container: Container, settings: Settings, **kwargs) -> None:
        intents = discord.Intents.default()
        # Announcement detection reads message text.
        intents.message_content = True

        super().__init__(
            command_prefix=settings.discord.command_prefix,
            intents=intents,
            help_command=None,
            allowed_mentions=discord.AllowedMentions.none(),
            **kwargs,
        )

        self.container = container
        self.settings = settings
        container.set_bot(self)

    async def setup_hook(self) -> None:
        await self.container.initialize()
        # Without the party cog the bot has nothing to do, so load errors propagate.
        for extension in COGS:
            await self.load_extension(extension)
        self.tree.on_error = self._on_app_command_error

        if self.settings.discord.sync_on_startup:
            await self._sync_commands()

    async def _sync_commands(self) -> None:
        """Publish /lp and /lpstart; test guilds get an immediate guild-scoped copy."""
        guilds: list[discord.Object | None] = [
            discord.Object(id=guild_id) for guild_id in self.settings.discord.test_guild_ids
        ]
        for guild in [*guilds, None]:
            scope = guild.id if guild is not None else GLOBAL_SCOPE
            if guild is not None:
                self.tree.copy_global_to(guild=guild)
            try:
                synced = await self.tree.sync(guild=guild)
            except discord.DiscordException as e:
                logger.warning(LogTemplates.BOT_SYNC_FAILED, scope, e)
                continue
            logger.info(LogTemplates.BOT_SYNCED, len(synced), scope)

    async def _on_app_command_error(
        self, interaction: discord.Interaction, error: Exception
    ) -> None:
        original = getattr(error, "original", error)
        logger.error(
            LogTemplates.BOT_SLASH_COMMAND_ERROR,
            getattr(interaction.command, "name", "<unknown>"),
            original,
        )

        if interaction.response.is_done():
            send = interaction.followup.send
        else:
            send = interaction.response.send_message
        try:
            await send(DiscordUIMessages.ERROR_COMMAND_FAILED.format(error=original), ephemeral=True)
        except discord.HTTPException:
            logger.warning(LogTemplates.BOT_ERROR_MESSAGE_SEND_FAILED)

    async def on_ready(self) -> None:
        logger.info(LogTemplates.BOT_READY, self.user, len(self.guilds))
        await self.change_presence(
            activity=discord.Activity(type=discord.ActivityType.listening, name="/lp")
        )

    async def close(self) -> None:
        try:
            await self.container.shutdown()
        except Exception as e:
            logger.warning(LogTemplates.BOT_CONTAINER_SHUTDOWN_ERROR, e)
        await super().close()

    def serve(self, token: str) -> None:
        """Run until the connection ends or SIGINT/SIGTERM arrives."""

        async def runner() -> None:
            async with self:
                loop = asyncio.get_running_loop()
                for sig in (signal.SIGINT, signal.SIGTERM):
                    loop.add_signal_handler(sig, lambda: asyncio.create_task(self.close()))
                await self.start(token)

        asyncio.run(runner())


def create_bot(container: Container, settings: Settings) -> ListeningPartyBot:
    return ListeningPartyBot(container=container, settings=settings)
