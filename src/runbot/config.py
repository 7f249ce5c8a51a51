"""Configuration management for runbot."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from runbot.errors import TokenNotConfiguredError
from runbot.executor.piston import DEFAULT_API_BASE

MIN_TOKEN_LENGTH = 10
DISCORD_MESSAGE_LIMIT = 2000


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="RUNBOT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Discord Configuration
    discord_token: str | None = Field(None, description="Discord bot token")
    discord_allow_from: list[str] = Field(default_factory=list, description="User ids or names allowed to run code")
    discord_allow_channels: list[str] = Field(default_factory=list, description="Channel ids the bot listens in")
    discord_proxy: str | None = Field(None, description="Optional proxy URL for the Discord gateway")
    command_prefix: str = Field(default="!run", description="Command that introduces a code block")

    # Output Configuration
    message_char_limit: int = Field(
        default=500,
        ge=100,
        le=DISCORD_MESSAGE_LIMIT,
        description="Maximum characters per reply; kept low to avoid rate limiting",
    )
    output_mode: Literal["chunk", "crop"] = Field(default="chunk", description="Split long output or crop it")
    list_languages_on_unresolved: bool = Field(
        default=True, description="List supported languages when a language is not recognised"
    )

    # Execution Configuration
    execution_api_base: str = Field(default=DEFAULT_API_BASE, description="Piston API base URL")
    execution_timeout_seconds: float = Field(default=60, gt=0, description="HTTP timeout for one execution")
    language_source: Literal["static", "remote"] = Field(
        default="static", description="Use the built-in language list or the service's runtimes catalog"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_profile: Literal["default", "console"] = Field(default="default", description="Log output profile")


def load_settings(env_file: Path | None = None) -> Settings:
    """Load settings from the environment and an optional ``.env`` file."""

    if env_file is not None:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


def require_discord_token(settings: Settings) -> str:
    token = (settings.discord_token or "").strip()
    if not token:
        raise TokenNotConfiguredError("discord token is empty; set RUNBOT_DISCORD_TOKEN")
    if len(token) < MIN_TOKEN_LENGTH:
        raise TokenNotConfiguredError("discord token seems too short")
    return token
