"""Discord channel adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

import discord
from discord.ext import commands
from loguru import logger

from runbot.app.runtime import AppRuntime
from runbot.channels.base import BaseChannel
from runbot.channels.utils import resolve_proxy
from runbot.config import require_discord_token


@dataclass(frozen=True)
class DiscordConfig:
    """Discord adapter config."""

    allow_from: set[str]
    allow_channels: set[str]
    proxy: str | None = None


class DiscordChannel(BaseChannel[discord.Message]):
    """Discord adapter based on discord.py."""

    name = "discord"

    def __init__(self, runtime: AppRuntime) -> None:
        super().__init__(runtime)
        settings = runtime.settings
        self._config = DiscordConfig(
            allow_from=set(settings.discord_allow_from),
            allow_channels=set(settings.discord_allow_channels),
            proxy=settings.discord_proxy,
        )
        self._bot: commands.Bot | None = None

    @property
    def config(self) -> DiscordConfig:
        return self._config

    async def start(self) -> None:
        token = require_discord_token(self.runtime.settings)

        intents = discord.Intents.default()
        intents.messages = True
        intents.message_content = True

        proxy, _ = resolve_proxy(self._config.proxy)
        # Commands are parsed by the pipeline, not by discord.ext.commands.
        bot = commands.Bot(command_prefix=commands.when_mentioned, intents=intents, help_command=None, proxy=proxy)
        self._bot = bot

        @bot.event
        async def on_ready() -> None:
            logger.info("discord.ready user={} id={}", str(bot.user), bot.user.id if bot.user else "<unknown>")

        @bot.event
        async def on_message(message: discord.Message) -> None:
            await self._on_message(message)

        logger.info(
            "discord.start allow_from_count={} allow_channels_count={} proxy_enabled={}",
            len(self._config.allow_from),
            len(self._config.allow_channels),
            bool(proxy),
        )
        try:
            async with bot:
                await bot.start(token)
        finally:
            self._bot = None
            logger.info("discord.stopped")

    def message_text(self, message: discord.Message) -> str:
        return message.content or ""

    async def send(self, message: discord.Message, content: str) -> None:
        kwargs: dict[str, Any] = {
            "content": content,
            "reference": message.to_reference(fail_if_not_exists=False),
            "mention_author": False,
        }
        await message.channel.send(**kwargs)

    async def _on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return
        if self._bot is not None and self._bot.user is not None and message.author.id == self._bot.user.id:
            return
        if self.get_invocation(message) is None:
            return
        if not self._allow_message(message):
            return

        logger.info(
            "discord.inbound channel_id={} sender_id={} username={}",
            message.channel.id,
            message.author.id,
            message.author.name,
        )
        async with message.channel.typing():
            await self.run_message(message)

    def _allow_message(self, message: discord.Message) -> bool:
        channel_id = str(message.channel.id)
        if self._config.allow_channels and channel_id not in self._config.allow_channels:
            logger.debug("discord.inbound.denied channel_id={} reason=allow_channels", channel_id)
            return False

        sender_tokens = {str(message.author.id), message.author.name}
        if getattr(message.author, "global_name", None):
            sender_tokens.add(cast(str, message.author.global_name))
        if self._config.allow_from and sender_tokens.isdisjoint(self._config.allow_from):
            logger.warning(
                "discord.inbound.denied channel_id={} sender_id={} reason=allow_from",
                message.channel.id,
                message.author.id,
            )
            return False
        return True
