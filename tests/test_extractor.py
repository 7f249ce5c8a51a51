from __future__ import annotations

import pytest

from runbot.core.extractor import extract


def test_extract_fenced_block_with_tag() -> None:
    parsed = extract("```python\nprint(1)\n```")
    assert parsed.is_code_message
    assert parsed.raw_tag == "python"
    assert parsed.body == "print(1)"


def test_extract_normalizes_crlf() -> None:
    parsed = extract("```js\r\nconsole.log(1)\r\nconsole.log(2)\r\n```")
    assert parsed.is_code_message
    assert parsed.raw_tag == "js"
    assert parsed.body == "console.log(1)\nconsole.log(2)"


def test_extract_keeps_body_verbatim() -> None:
    body = "def f():\n    return 1\n\nprint(f())"
    parsed = extract(f"```py\n{body}\n```")
    assert parsed.body == body


def test_extract_empty_tag() -> None:
    parsed = extract("```\necho hi\n```")
    assert parsed.is_code_message
    assert parsed.raw_tag == ""
    assert parsed.body == "echo hi"


def test_extract_fences_only_has_empty_body() -> None:
    parsed = extract("```\n```")
    assert parsed.is_code_message
    assert parsed.body == ""


@pytest.mark.parametrize(
    "message",
    [
        "",
        "```python print(1)```",
        "print(1)\nprint(2)",
        "```python\nprint(1)",
        "```python\nprint(1)\n``` trailing",
        "``python\nprint(1)\n```",
        "```python\nprint(1)\n```\n",
    ],
)
def test_extract_rejects_non_code_messages(message: str) -> None:
    assert not extract(message).is_code_message
