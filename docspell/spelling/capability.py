"""Contract between the misspelling engine and any spelling backend."""
from __future__ import annotations

from enum import Enum
from typing import List, Protocol, runtime_checkable


class SuggestionMode(str, Enum):
    """How hard a backend searches for corrections, from quickest to most thorough."""

    ULTRA = "ultra"
    FAST = "fast"
    NORMAL = "normal"
    SLOW = "slow"
    BAD_SPELLERS = "bad-spellers"

    @property
    def edit_distance(self) -> int:
        """Maximum edit distance explored when collecting suggestions."""

        if self in (SuggestionMode.ULTRA, SuggestionMode.FAST):
            return 1
        return 2


@runtime_checkable
class SpellingCapability(Protocol):
    """Operations the engine needs from a spelling dictionary.

    Implementations are stateful: words added to the session stay known for
    the lifetime of the object, and personal additions survive once
    :meth:`save_personal_wordlists` has been called. Calls are never made
    concurrently.
    """

    suggestion_mode: SuggestionMode
    run_together: bool

    def check(self, word: str) -> bool:
        """Return True when *word* is spelled correctly, ignoring case."""

    def suggest(self, word: str) -> List[str]:
        """Return candidate corrections for *word*, best first."""

    def add_to_session(self, word: str) -> None:
        """Treat *word* as correct until the process exits."""

    def add_to_personal(self, word: str) -> None:
        """Queue *word* for the persistent personal wordlist."""

    def save_personal_wordlists(self) -> None:
        """Persist every queued personal word."""


__all__ = ["SpellingCapability", "SuggestionMode"]
