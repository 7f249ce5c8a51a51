from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from runbot.config import Settings, load_settings, require_discord_token
from runbot.errors import TokenNotConfiguredError


def test_settings_defaults() -> None:
    settings = Settings()
    assert settings.message_char_limit == 500
    assert settings.command_prefix == "!run"
    assert settings.output_mode == "chunk"
    assert settings.language_source == "static"
    assert settings.discord_allow_from == []


def test_settings_read_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RUNBOT_MESSAGE_CHAR_LIMIT", "1900")
    monkeypatch.setenv("RUNBOT_OUTPUT_MODE", "crop")
    monkeypatch.setenv("RUNBOT_DISCORD_ALLOW_CHANNELS", '["123", "456"]')

    settings = Settings()

    assert settings.message_char_limit == 1900
    assert settings.output_mode == "crop"
    assert settings.discord_allow_channels == ["123", "456"]


def test_settings_validate_limits() -> None:
    with pytest.raises(ValidationError):
        Settings(message_char_limit=5000)
    with pytest.raises(ValidationError):
        Settings(output_mode="scroll")  # type: ignore[arg-type]


def test_load_settings_from_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "bot.env"
    env_file.write_text("RUNBOT_COMMAND_PREFIX=/exec\nRUNBOT_LOG_LEVEL=debug\n", encoding="utf-8")

    settings = load_settings(env_file)

    assert settings.command_prefix == "/exec"
    assert settings.log_level == "debug"


def test_require_discord_token() -> None:
    with pytest.raises(TokenNotConfiguredError, match="empty"):
        require_discord_token(Settings())
    with pytest.raises(TokenNotConfiguredError, match="too short"):
        require_discord_token(Settings(discord_token="abc"))
    assert require_discord_token(Settings(discord_token="  0123456789abcdef ")) == "0123456789abcdef"
