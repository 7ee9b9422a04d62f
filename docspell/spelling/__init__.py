"""Spelling capability contract and its pyspellchecker backend."""
from __future__ import annotations

from .backend import PySpellCheckerBackend
from .capability import SpellingCapability, SuggestionMode

__all__ = ["PySpellCheckerBackend", "SpellingCapability", "SuggestionMode"]
