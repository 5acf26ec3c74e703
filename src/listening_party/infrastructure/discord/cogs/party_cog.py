"""Listening party cog: announcement listener plus the /lp and /lpstart commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord import app_commands
from discord.ext import commands

from listening_party.application.commands.start_party import StartPartyCommand
from listening_party.application.queries.get_party_status import GetPartyStatusQuery
from listening_party.application.services.announcement_service import InboundMessage
from listening_party.domain.shared.messages import DiscordUIMessages, ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


def to_inbound_message(message: discord.Message) -> InboundMessage:
    return InboundMessage(
        channel_id=message.channel.id,
        text=message.content or "",
        role_mentions=frozenset(role.id for role in message.role_mentions),
    )


class PartyCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    async def cog_load(self) -> None:
        logger.info(LogTemplates.COG_LOADED_PARTY)

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot or not message.role_mentions:
            return

        await self.container.announcement_service.handle_message(to_inbound_message(message))

    @app_commands.command(name="lp", description="Check if listening party is going")
    async def lp(self, interaction: discord.Interaction) -> None:
        if interaction.channel_id is None:
            return

        status = await self.container.party_status_handler.handle(
            GetPartyStatusQuery(channel_id=interaction.channel_id)
        )
        await interaction.response.send_message(
            status, allowed_mentions=discord.AllowedMentions(users=False)
        )

    @app_commands.command(
        name="lpstart", description="Start the listening party for the album announced here"
    )
    async def lpstart(self, interaction: discord.Interaction) -> None:
        if interaction.channel_id is None:
            return

        result = await self.container.start_party_handler.handle(
            StartPartyCommand(channel_id=interaction.channel_id)
        )
        if result.started:
            await interaction.response.send_message(DiscordUIMessages.START_STARTED)
        else:
            await interaction.response.send_message(
                DiscordUIMessages.START_NO_PARTY, ephemeral=True
            )


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(PartyCog(bot, container))
