"""Misspelling engine: word scanning, session dictionary, detection."""
from __future__ import annotations

from .detector import MisspellingDetector, MisspellingRecord, find_misspelled
from .dictionary import (
    DEFAULT_WORDS,
    SessionDictionary,
    add_name,
    build_session_dictionary,
    split_name,
)
from .words import extract_words, report_offset

__all__ = [
    "DEFAULT_WORDS",
    "MisspellingDetector",
    "MisspellingRecord",
    "SessionDictionary",
    "add_name",
    "build_session_dictionary",
    "extract_words",
    "find_misspelled",
    "report_offset",
    "split_name",
]
