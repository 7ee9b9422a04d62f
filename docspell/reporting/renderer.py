"""Rendering utilities for misspelling reports."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from docspell.engine import MisspellingRecord
from docspell.spelling import SpellingCapability
from docspell.tree import Location
from docspell.utils import context_window

NO_MISSPELLINGS_MESSAGE = "No misspellings found"
MAX_SUGGESTIONS = 5

_HIGHLIGHT_START = "\x1b[1;31m"
_HIGHLIGHT_END = "\x1b[m"
_ELLIPSIS = "..."


@dataclass(frozen=True)
class ReportRenderOptions:
    """Render-time switches influencing report layout."""

    highlight: bool = True
    max_suggestions: int = MAX_SUGGESTIONS


@dataclass(frozen=True)
class ReportEnvelope:
    """Assembled report lines plus the number of misspellings behind them."""

    lines: tuple[str, ...]
    misspelling_count: int

    @property
    def has_misspellings(self) -> bool:
        return self.misspelling_count > 0


def format_header(name: str | None, location: Location) -> str:
    """Return the heading line that introduces an item's misspellings."""

    if name:
        return f"{name} in {location.full_name}:"
    return f"In {location.full_name}:"


def highlight_word(word: str, options: ReportRenderOptions) -> str:
    if options.highlight:
        return f"{_HIGHLIGHT_START}{word}{_HIGHLIGHT_END}"
    return f"*{word}*"


def suggestion_text(
    text: str,
    word: str,
    offset: int,
    speller: SpellingCapability,
    options: ReportRenderOptions = ReportRenderOptions(),
) -> str:
    """Create the context and suggestion block for *word* found at *offset* in *text*."""

    window = context_window(text, word, offset)
    before = f"{_ELLIPSIS if window.truncated_left else ''}{window.before}"
    after = f"{window.after}{_ELLIPSIS if window.truncated_right else ''}"

    suggestions = list(speller.suggest(word))[: options.max_suggestions]

    return (
        f'"{before}{highlight_word(word, options)}{after}"\n'
        "\n"
        f'"{word}" suggestions:\n'
        f"\t{', '.join(suggestions)}\n"
        "\n"
    )


def render_entry(
    name: str | None,
    location: Location,
    text: str,
    misspellings: Sequence[MisspellingRecord],
    speller: SpellingCapability,
    options: ReportRenderOptions = ReportRenderOptions(),
) -> List[str]:
    """Return the report lines for one documented item, or nothing when it is clean."""

    if not misspellings:
        return []

    lines = [format_header(name, location), ""]
    lines.extend(
        suggestion_text(text, record.word, record.offset, speller, options)
        for record in misspellings
    )
    return lines


def render_report(envelope: ReportEnvelope) -> str:
    """Join the collected entries, or return the all-clear message."""

    if not envelope.has_misspellings:
        return NO_MISSPELLINGS_MESSAGE
    return "\n".join(envelope.lines)


__all__ = [
    "MAX_SUGGESTIONS",
    "NO_MISSPELLINGS_MESSAGE",
    "ReportEnvelope",
    "ReportRenderOptions",
    "format_header",
    "highlight_word",
    "render_entry",
    "render_report",
    "suggestion_text",
]
