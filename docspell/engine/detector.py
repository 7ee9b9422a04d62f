"""Misspelling detection for a single comment."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from docspell.engine.dictionary import SessionDictionary
from docspell.engine.words import extract_words
from docspell.spelling import SpellingCapability
from docspell.tree import Comment


@dataclass(frozen=True)
class MisspellingRecord:
    """A flagged word and its offset within the owning comment's text."""

    word: str
    offset: int

    def __iter__(self):
        return iter((self.word, self.offset))


def find_misspelled(comment: Comment, speller: SpellingCapability) -> List[MisspellingRecord]:
    """Return the misspelled words of *comment* in the order they appear.

    Empty comments return immediately without consulting *speller*.
    """

    if comment.empty:
        return []

    return [
        MisspellingRecord(word=word, offset=offset)
        for word, offset in extract_words(comment.text)
        if not speller.check(word)
    ]


class MisspellingDetector:
    """Detector bound to a fully built session dictionary."""

    def __init__(self, session: SessionDictionary) -> None:
        self.session = session

    @property
    def speller(self) -> SpellingCapability:
        return self.session.speller

    def find_misspelled(self, comment: Comment) -> List[MisspellingRecord]:
        return find_misspelled(comment, self.session.speller)


__all__ = ["MisspellingDetector", "MisspellingRecord", "find_misspelled"]
