"""Reporting helpers for Docspell CLI output."""
from __future__ import annotations

from .renderer import (
    MAX_SUGGESTIONS,
    NO_MISSPELLINGS_MESSAGE,
    ReportEnvelope,
    ReportRenderOptions,
    format_header,
    render_entry,
    render_report,
    suggestion_text,
)

__all__ = [
    "MAX_SUGGESTIONS",
    "NO_MISSPELLINGS_MESSAGE",
    "ReportEnvelope",
    "ReportRenderOptions",
    "format_header",
    "render_entry",
    "render_report",
    "suggestion_text",
]
