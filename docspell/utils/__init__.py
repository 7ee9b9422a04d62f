"""Utility helpers for Docspell."""

from __future__ import annotations

from .io import (
    LoadedDocument,
    format_display_path,
    load_text_document,
    normalize_newlines,
)
from .text import CONTEXT_WINDOW, ContextWindow, context_window

__all__ = [
    "CONTEXT_WINDOW",
    "ContextWindow",
    "LoadedDocument",
    "context_window",
    "format_display_path",
    "load_text_document",
    "normalize_newlines",
]
