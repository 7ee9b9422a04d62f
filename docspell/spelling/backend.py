"""Spelling backend built on pyspellchecker with an aspell-style personal wordlist."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from spellchecker import SpellChecker

from docspell.errors import DictionaryLanguageError, WordlistError
from docspell.spelling.capability import SuggestionMode
from docspell.utils import load_text_document

logger = logging.getLogger("docspell.spelling.backend")

_PWL_HEADER_PREFIX = "personal_ws-"
_RUN_TOGETHER_HEAD_MIN = 3
_RUN_TOGETHER_TAIL_MIN = 4


class PySpellCheckerBackend:
    """Spelling capability backed by the pyspellchecker frequency dictionaries."""

    def __init__(
        self,
        language: str,
        *,
        suggestion_mode: SuggestionMode = SuggestionMode.NORMAL,
        run_together: bool = True,
        personal_wordlist: Path | None = None,
    ) -> None:
        self.language = language
        self.run_together = run_together
        self.personal_wordlist = personal_wordlist
        self._personal_words: set[str] = set()
        self._pending_personal = False

        try:
            self._spell = SpellChecker(language=language, distance=suggestion_mode.edit_distance)
        except ValueError as exc:
            raise DictionaryLanguageError(
                message=f"dictionary {language} not installed",
                remediation=(
                    "Pass --spell-language with one of the bundled pyspellchecker "
                    "languages such as en, es, fr, de or pt."
                ),
            ) from exc

        self._suggestion_mode = suggestion_mode
        if personal_wordlist is not None:
            self._load_personal_wordlist(personal_wordlist)

        logger.info(
            "Loaded spelling dictionary",
            extra={
                "language": language,
                "suggestion_mode": suggestion_mode.value,
                "run_together": run_together,
                "personal_words": len(self._personal_words),
            },
        )

    @property
    def suggestion_mode(self) -> SuggestionMode:
        return self._suggestion_mode

    @suggestion_mode.setter
    def suggestion_mode(self, mode: SuggestionMode) -> None:
        self._suggestion_mode = mode
        self._spell.distance = mode.edit_distance

    def check(self, word: str) -> bool:
        if not word:
            return True
        if self._spell.known([word]):
            return True
        return self.run_together and self._is_run_together(word.lower())

    def suggest(self, word: str) -> List[str]:
        candidates = self._spell.candidates(word) or set()
        lowered = word.lower()
        ranked = sorted(
            (candidate for candidate in candidates if candidate != lowered),
            key=lambda candidate: (-self._spell.word_frequency[candidate], candidate),
        )
        return ranked

    def add_to_session(self, word: str) -> None:
        if word:
            self._spell.word_frequency.load_words([word])

    def add_to_personal(self, word: str) -> None:
        word = word.strip()
        if not word:
            return
        self.add_to_session(word)
        if word not in self._personal_words:
            self._personal_words.add(word)
            self._pending_personal = True

    def add_words_to_personal(self, words: Iterable[str]) -> int:
        """Add each of *words* to the personal wordlist; return how many were new."""

        before = len(self._personal_words)
        for word in words:
            self.add_to_personal(word)
        return len(self._personal_words) - before

    def save_personal_wordlists(self) -> None:
        if not self._pending_personal:
            return
        if self.personal_wordlist is None:
            raise WordlistError(
                message="No personal wordlist path is configured.",
                remediation="Pass --personal-wordlist or set 'personal_wordlist' in the config file.",
            )

        lines = [f"{_PWL_HEADER_PREFIX}1.1 {self.language} {len(self._personal_words)}"]
        lines.extend(sorted(self._personal_words))
        try:
            self.personal_wordlist.parent.mkdir(parents=True, exist_ok=True)
            self.personal_wordlist.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            raise WordlistError(
                message=f"Unable to write the personal wordlist {self.personal_wordlist}.",
                remediation="Verify the directory exists and is writable.",
            ) from exc

        self._pending_personal = False
        logger.info(
            "Saved personal wordlist",
            extra={"path": str(self.personal_wordlist), "word_count": len(self._personal_words)},
        )

    @property
    def personal_words(self) -> frozenset[str]:
        return frozenset(self._personal_words)

    def _load_personal_wordlist(self, path: Path) -> None:
        if not path.exists():
            return

        document = load_text_document(path, "personal wordlist", error_type=WordlistError)
        for line in document.text.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith(("#", _PWL_HEADER_PREFIX)):
                continue
            self._personal_words.add(stripped)
        if self._personal_words:
            self._spell.word_frequency.load_words(sorted(self._personal_words))

    def _is_run_together(self, word: str) -> bool:
        """Return True when *word* is exactly two known words joined together.

        The leading word needs three letters and the trailing word four. The
        frequency lists carry suffix fragments such as ``ing`` and ``ally``,
        so shorter tails would accept typos like ``begining``.
        """

        for split in range(_RUN_TOGETHER_HEAD_MIN, len(word) - _RUN_TOGETHER_TAIL_MIN + 1):
            if self._spell.known([word[:split]]) and self._spell.known([word[split:]]):
                return True
        return False


__all__ = ["PySpellCheckerBackend"]
