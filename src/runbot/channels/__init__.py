"""Channel adapters."""

from runbot.channels.base import BaseChannel
from runbot.channels.discord import DiscordChannel, DiscordConfig

__all__ = ["BaseChannel", "DiscordChannel", "DiscordConfig"]
