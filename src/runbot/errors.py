"""Application-level exception types for runbot."""

from __future__ import annotations


class RunbotError(Exception):
    """Base exception for runbot."""


class ConfigurationError(RunbotError):
    """Base exception for configuration and startup validation errors."""


class TokenNotConfiguredError(ConfigurationError):
    """Raised when the Discord token is missing or implausibly short."""


class LanguageRegistryError(ConfigurationError):
    """Raised when a language registry has duplicate names or colliding aliases."""


class InvalidInputError(RunbotError):
    """Raised when an inbound message cannot become an execution request.

    The exception message is shown to the user as-is.
    """


class EmptyCodeError(InvalidInputError):
    """Raised when a code block contains no code."""


class MissingLanguageError(InvalidInputError):
    """Raised when neither the fence nor the command names a language."""


class UnresolvedLanguageError(InvalidInputError):
    """Raised when the requested language is not in the registry."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Invalid input: language '{tag}' is not supported")
        self.tag = tag


class ExecutionServiceError(RunbotError):
    """Raised when the execution service cannot be reached or answers garbage."""
