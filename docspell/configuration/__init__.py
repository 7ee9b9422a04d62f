"""Configuration utilities for Docspell."""
from __future__ import annotations

from .settings import (
    APP_NAME,
    DEFAULT_CONFIG_FILENAME,
    FALLBACK_LANGUAGE,
    SpellcheckSettings,
    default_language,
    default_personal_wordlist,
    load_settings_file,
    resolve_settings,
)
from .wordlists import read_wordlist

__all__ = [
    "APP_NAME",
    "DEFAULT_CONFIG_FILENAME",
    "FALLBACK_LANGUAGE",
    "SpellcheckSettings",
    "default_language",
    "default_personal_wordlist",
    "load_settings_file",
    "read_wordlist",
    "resolve_settings",
]
