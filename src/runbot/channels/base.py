"""Base channel interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from loguru import logger

from runbot.app.runtime import AppRuntime
from runbot.core.commands import split_command
from runbot.core.types import CommandInvocation

DELIVERY_FALLBACK = "Experienced error sending message..."

T = TypeVar("T")


class BaseChannel(ABC, Generic[T]):
    """Abstract base class for channel adapters.

    ``T`` is the transport's message type; replies are sent back to where the
    message came from.
    """

    name: str = "base"

    def __init__(self, runtime: AppRuntime) -> None:
        self.runtime = runtime

    @abstractmethod
    async def start(self) -> None:
        """Connect and process messages until stopped."""

    @abstractmethod
    def message_text(self, message: T) -> str:
        """Return the raw text content of a message."""

    @abstractmethod
    async def send(self, message: T, content: str) -> None:
        """Send one reply next to the given message."""

    def get_invocation(self, message: T) -> CommandInvocation | None:
        return split_command(self.message_text(message), self.runtime.settings.command_prefix)

    async def run_message(self, message: T) -> None:
        """Run one message through the pipeline and deliver its replies."""
        try:
            invocation = self.get_invocation(message)
            if invocation is None:
                return
            replies = await self.runtime.handle_input(invocation.text, invocation.language_hint)
            await self.deliver(message, replies)
        except Exception:
            logger.exception("{}.run.error", self.name)

    async def deliver(self, message: T, replies: list[str]) -> bool:
        """Send replies in order, stopping at the first failure.

        A failed send is logged and one fallback notice is attempted.
        """

        for index, reply in enumerate(replies):
            try:
                await self.send(message, reply)
            except Exception:
                logger.exception("{}.outbound.error fragment={}/{}", self.name, index + 1, len(replies))
                await self._send_fallback(message)
                return False
        return True

    async def _send_fallback(self, message: T) -> None:
        try:
            await self.send(message, DELIVERY_FALLBACK)
        except Exception:
            logger.exception("{}.outbound.fallback.error", self.name)
