"""Fenced code block extraction."""

from __future__ import annotations

from runbot.core.types import FENCE, ParsedMessage

NOT_CODE = ParsedMessage(is_code_message=False)


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def extract(message: str) -> ParsedMessage:
    """Classify a message as a fenced code block and pull out its tag and body.

    The first line must start with the fence and the last line must be exactly
    the fence. Everything after the opening fence is the tag; lines in between
    are the body, joined verbatim.
    """

    lines = normalize_newlines(message).split("\n")
    if len(lines) < 2:
        return NOT_CODE

    first, last = lines[0], lines[-1]
    if not first.startswith(FENCE) or last != FENCE:
        return NOT_CODE

    return ParsedMessage(
        is_code_message=True,
        raw_tag=first[len(FENCE) :],
        body="\n".join(lines[1:-1]),
    )
