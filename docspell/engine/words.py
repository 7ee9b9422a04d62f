"""Candidate word scanning over comment text."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Tuple

_WORD_PATTERN = re.compile(r"[a-z]+", re.IGNORECASE)


def report_offset(start: int) -> int:
    """Translate a match start index into the offset recorded for a misspelling.

    Offsets after the first character are shifted one place to the right;
    existing reports depend on this numbering.
    """

    return 0 if start == 0 else start + 1


@dataclass(frozen=True)
class WordScan:
    """Restartable scan of ASCII alphabetic runs in *text*."""

    text: str

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        for match in _WORD_PATTERN.finditer(self.text):
            yield match.group(), report_offset(match.start())


def extract_words(text: str) -> WordScan:
    """Return a lazy iterable of ``(word, offset)`` pairs found in *text*."""

    return WordScan(text or "")


__all__ = ["WordScan", "extract_words", "report_offset"]
