"""Runtime bootstrap helpers."""

from __future__ import annotations

from loguru import logger

from runbot.app.runtime import AppRuntime
from runbot.config import Settings, load_settings
from runbot.core.languages import LanguageRegistry, default_registry
from runbot.executor.piston import PistonExecutor
from runbot.logging_utils import configure_logging


def build_registry(settings: Settings, executor: PistonExecutor) -> LanguageRegistry:
    if settings.language_source == "remote":
        return executor.fetch_runtimes_sync()
    return default_registry()


def build_runtime(settings: Settings | None = None, *, output_mode: str | None = None) -> AppRuntime:
    """Build the app runtime, loading the language registry once."""

    if settings is None:
        settings = load_settings()
    if output_mode:
        settings = settings.model_copy(update={"output_mode": output_mode})
    configure_logging(profile=settings.log_profile, level=settings.log_level)

    executor = PistonExecutor(settings.execution_api_base, timeout_seconds=settings.execution_timeout_seconds)
    registry = build_registry(settings, executor)
    logger.debug(
        "runtime.configured languages={} msg_char_lim={} output_mode={} language_source={}",
        len(registry),
        settings.message_char_limit,
        settings.output_mode,
        settings.language_source,
    )
    return AppRuntime(settings, registry, executor)
