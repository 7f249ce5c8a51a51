"""Application runtime wiring."""

from __future__ import annotations

from runbot.config import Settings
from runbot.core.languages import LanguageRegistry
from runbot.core.pipeline import Executor, RunPipeline


class AppRuntime:
    """Holds the settings, language registry and pipeline shared by all channels.

    Everything here is read-only once built, so channels may handle messages
    concurrently without locking.
    """

    def __init__(self, settings: Settings, registry: LanguageRegistry, executor: Executor) -> None:
        self.settings = settings
        self.registry = registry
        self.executor = executor
        self.pipeline = RunPipeline(
            registry,
            executor,
            message_char_limit=settings.message_char_limit,
            output_mode=settings.output_mode,
            list_languages_on_unresolved=settings.list_languages_on_unresolved,
        )

    async def handle_input(self, text: str, language_hint: str | None = None) -> list[str]:
        return await self.pipeline.handle(text, language_hint)
