"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

FENCE = "```"


@dataclass(frozen=True)
class LanguageEntry:
    """One supported language and the aliases users may type for it."""

    canonical_name: str
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedMessage:
    """Classification of one message as a fenced code block."""

    is_code_message: bool
    raw_tag: str = ""
    body: str = ""


@dataclass(frozen=True)
class ResolvedRequest:
    """Execution request; ``language`` is None when unresolved."""

    language: str | None
    code: str


@dataclass(frozen=True)
class ExecutionResult:
    """Output of one backend call; ``error`` is set on failure."""

    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class OutputFragment:
    """One size-bounded piece of chunked output."""

    payload: str

    @property
    def text(self) -> str:
        return f"{FENCE}\n{self.payload}\n{FENCE}"


@dataclass(frozen=True)
class CropResult:
    """Cropped output and how many trailing characters were dropped."""

    text: str
    dropped: int = 0

    @property
    def cropped(self) -> bool:
        return self.dropped > 0


@dataclass(frozen=True)
class CommandInvocation:
    """A ``!run`` command line split from the code block below it."""

    language_hint: str | None
    text: str
