"""Domain-specific exception hierarchy for Docspell."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DocspellError(Exception):
    """Base exception for Docspell-specific errors with optional remediation text."""

    message: str
    remediation: str | None = None

    def __post_init__(self) -> None:  # pragma: no cover - dataclass validation hook
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InputValidationError(DocspellError):
    """Raised when the CLI receives invalid or missing input."""


class TreeLoadError(DocspellError):
    """Raised when a serialized documentation tree cannot be read."""


class DictionaryLanguageError(DocspellError):
    """Raised when the requested dictionary language is not installed."""


class WordlistError(DocspellError):
    """Raised when a word source or the personal wordlist cannot be read or written."""


__all__ = [
    "DocspellError",
    "InputValidationError",
    "TreeLoadError",
    "DictionaryLanguageError",
    "WordlistError",
]
