from __future__ import annotations

from pathlib import Path

import pytest

from docspell.errors import DictionaryLanguageError, WordlistError
from docspell.spelling import PySpellCheckerBackend, SpellingCapability, SuggestionMode


@pytest.fixture(scope="module")
def backend() -> PySpellCheckerBackend:
    return PySpellCheckerBackend("en")


def test_backend_satisfies_capability_protocol(backend: PySpellCheckerBackend) -> None:
    assert isinstance(backend, SpellingCapability)


def test_check_is_case_insensitive(backend: PySpellCheckerBackend) -> None:
    assert backend.check("method")
    assert backend.check("Method")
    assert backend.check("METHOD")
    assert not backend.check("acidentally")


def test_suggest_offers_accidentally(backend: PySpellCheckerBackend) -> None:
    suggestions = backend.suggest("acidentally")

    assert "accidentally" in suggestions[:5]
    assert "acidentally" not in suggestions


def test_suggest_returns_empty_list_for_gibberish(backend: PySpellCheckerBackend) -> None:
    assert backend.suggest("qxzqxzqxzqxz") == []


def test_add_to_session_makes_word_known() -> None:
    speller = PySpellCheckerBackend("en", run_together=False)
    assert not speller.check("blorbzork")

    speller.add_to_session("blorbzork")
    speller.add_to_session("blorbzork")

    assert speller.check("Blorbzork")


def test_run_together_accepts_compound_words() -> None:
    strict = PySpellCheckerBackend("en", run_together=False)
    relaxed = PySpellCheckerBackend("en", run_together=True)

    assert not strict.check("keyboardlayout")
    assert relaxed.check("keyboardlayout")
    assert not relaxed.check("qxzqxzqxzqxz")


@pytest.mark.parametrize("typo", ["begining", "acidentally"])
def test_default_backend_flags_typos_with_suffix_fragments(
    backend: PySpellCheckerBackend, typo: str
) -> None:
    assert backend.run_together is True
    assert not backend.check(typo)


def test_default_backend_still_accepts_compounds(backend: PySpellCheckerBackend) -> None:
    assert backend.check("keyboardlayout")


def test_unknown_language_fails_fast() -> None:
    with pytest.raises(DictionaryLanguageError) as exc:
        PySpellCheckerBackend("xx")

    assert "dictionary xx not installed" in exc.value.message


def test_suggestion_mode_sets_edit_distance() -> None:
    speller = PySpellCheckerBackend("en", suggestion_mode=SuggestionMode.FAST)

    assert speller.suggestion_mode is SuggestionMode.FAST
    speller.suggestion_mode = SuggestionMode.BAD_SPELLERS
    assert speller.suggestion_mode.edit_distance == 2


def test_personal_wordlist_round_trip(tmp_path: Path) -> None:
    wordlist = tmp_path / "nested" / "personal.en.pws"
    speller = PySpellCheckerBackend("en", personal_wordlist=wordlist)

    speller.add_to_personal("rubygems")
    speller.add_to_personal("zorkmidqx")
    speller.save_personal_wordlists()

    lines = wordlist.read_text(encoding="utf-8").splitlines()
    assert lines == ["personal_ws-1.1 en 2", "rubygems", "zorkmidqx"]

    reloaded = PySpellCheckerBackend("en", run_together=False, personal_wordlist=wordlist)
    assert reloaded.check("zorkmidqx")
    assert reloaded.personal_words == frozenset({"rubygems", "zorkmidqx"})


def test_save_without_changes_does_not_write(tmp_path: Path) -> None:
    wordlist = tmp_path / "personal.en.pws"
    speller = PySpellCheckerBackend("en", personal_wordlist=wordlist)

    speller.save_personal_wordlists()

    assert not wordlist.exists()


def test_save_requires_a_wordlist_path() -> None:
    speller = PySpellCheckerBackend("en")
    speller.add_to_personal("zorkmidqx")

    with pytest.raises(WordlistError):
        speller.save_personal_wordlists()
