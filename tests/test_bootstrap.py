from __future__ import annotations

import pytest

from runbot.app.bootstrap import build_runtime
from runbot.config import Settings
from runbot.core.languages import DEFAULT_LANGUAGES, LanguageRegistry
from runbot.executor.piston import PistonExecutor
from runbot.logging_utils import configure_logging


def test_build_runtime_uses_static_languages() -> None:
    runtime = build_runtime(Settings(execution_api_base="https://piston.example/api/v2"))

    assert len(runtime.registry) == len(DEFAULT_LANGUAGES)
    assert isinstance(runtime.executor, PistonExecutor)
    assert runtime.executor.api_base == "https://piston.example/api/v2"
    assert runtime.pipeline.message_char_limit == 500


def test_build_runtime_loads_remote_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    remote = LanguageRegistry.from_mapping({"python": ["py"]})
    monkeypatch.setattr(PistonExecutor, "fetch_runtimes_sync", lambda self: remote)

    runtime = build_runtime(Settings(language_source="remote"))

    assert runtime.registry is remote


def test_build_runtime_overrides_output_mode() -> None:
    runtime = build_runtime(Settings(), output_mode="crop")
    assert runtime.settings.output_mode == "crop"
    assert runtime.pipeline.output_mode == "crop"


def test_configure_logging_is_idempotent() -> None:
    configure_logging(profile="default", level="debug")
    configure_logging(profile="default", level="DEBUG")
    configure_logging(profile="console", level="INFO")
