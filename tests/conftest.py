from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from runbot.app.runtime import AppRuntime
from runbot.config import Settings
from runbot.core.languages import LanguageRegistry
from runbot.core.types import ExecutionResult


class FakeExecutor:
    def __init__(self, result: ExecutionResult | None = None) -> None:
        self.result = result or ExecutionResult(output="out")
        self.calls: list[tuple[str, str]] = []

    async def run(self, language: str, code: str) -> ExecutionResult:
        self.calls.append((language, code))
        return self.result


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in list(os.environ):
        if key.upper().startswith("RUNBOT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def registry() -> LanguageRegistry:
    return LanguageRegistry.from_mapping({
        "python": ["py", "py3"],
        "javascript": ["js", "node"],
        "c++": ["cpp"],
    })


@pytest.fixture
def make_executor() -> type[FakeExecutor]:
    return FakeExecutor


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def make_runtime(registry: LanguageRegistry, executor: FakeExecutor) -> Callable[..., AppRuntime]:
    def _make(**overrides: object) -> AppRuntime:
        settings = Settings(**overrides)  # type: ignore[arg-type]
        return AppRuntime(settings, registry, executor)

    return _make
