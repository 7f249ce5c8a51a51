"""Chat command line parsing."""

from __future__ import annotations

import re

from runbot.core.extractor import normalize_newlines
from runbot.core.types import CommandInvocation

WHITESPACE_RE = re.compile(r"\s+")


def split_command(text: str, prefix: str) -> CommandInvocation | None:
    """Split ``<prefix> [language]`` off the first line of a message.

    Returns None when the message is not addressed to the command, or is the
    bare command with nothing after it.
    """

    first, _, rest = normalize_newlines(text).partition("\n")
    words = WHITESPACE_RE.split(first.strip())
    if not words or words[0] != prefix:
        return None

    args = words[1:]
    if not args and not rest.strip():
        return None
    hint = args[0] if args else None
    return CommandInvocation(language_hint=hint, text=rest)
