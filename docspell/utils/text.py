"""Text helpers shared by the engine and the report renderer."""
from __future__ import annotations

import re
from dataclasses import dataclass

CONTEXT_WINDOW = 10


@dataclass(frozen=True)
class ContextWindow:
    """Characters surrounding a word, with truncation flags for ellipses."""

    before: str
    after: str
    truncated_left: bool
    truncated_right: bool


def context_window(text: str, word: str, offset: int, window: int = CONTEXT_WINDOW) -> ContextWindow:
    """Locate *word* near *offset* in *text* and capture up to *window* characters each side.

    Leading characters up to ``offset - window`` are skipped, then the last
    occurrence of *word* starting within the next *window* characters is used. When the
    word cannot be found there the window is empty.
    """

    if window < 0:
        raise ValueError("window must be non-negative")

    prefix = max(offset - window, 0)
    pattern = re.compile(
        rf"\A.{{{prefix}}}(.{{0,{window}}}){re.escape(word)}(.{{0,{window}}})",
        re.DOTALL,
    )
    match = pattern.match(text)
    if match is None:
        return ContextWindow(before="", after="", truncated_left=False, truncated_right=False)

    before, after = match.group(1), match.group(2)
    return ContextWindow(
        before=before,
        after=after,
        truncated_left=prefix > 0,
        truncated_right=len(after) >= window,
    )


__all__ = ["CONTEXT_WINDOW", "ContextWindow", "context_window"]
