"""Shared exit code definitions for Docspell CLI operations."""
from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Deterministic exit codes returned by every command."""

    SUCCESS = 0
    UNEXPECTED_ERROR = 1
    INVALID_INPUT = 2
    TREE_ERROR = 3
    DICTIONARY_ERROR = 4
    WORDLIST_ERROR = 5
    MISSPELLINGS_FOUND = 6


__all__ = ["ExitCode"]
