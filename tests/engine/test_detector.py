from __future__ import annotations

import pytest

from docspell.engine import (
    MisspellingDetector,
    MisspellingRecord,
    build_session_dictionary,
    find_misspelled,
)
from docspell.tree import Comment, DocumentationTree


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
def test_find_misspelled_skips_empty_comments(fake_speller, text: str) -> None:
    assert find_misspelled(Comment(text), fake_speller) == []
    assert fake_speller.checked == []


def test_find_misspelled_reports_unknown_words_in_order(fake_speller) -> None:
    comment = Comment("teh method is acidentally wrong")

    found = find_misspelled(comment, fake_speller)

    assert found == [
        MisspellingRecord(word="teh", offset=0),
        MisspellingRecord(word="acidentally", offset=15),
    ]


def test_find_misspelled_is_case_insensitive(fake_speller) -> None:
    assert find_misspelled(Comment("THE Method IS Wrong"), fake_speller) == []


def test_find_misspelled_reports_repeated_words_separately(fake_speller) -> None:
    text = "teh one and teh other"

    found = find_misspelled(Comment(text), fake_speller)

    assert [record.word for record in found] == ["teh", "teh"]
    assert [record.offset for record in found] == [0, 13]
    assert text[found[1].offset - 1 :].startswith("teh")


def test_misspelling_record_unpacks_as_pair() -> None:
    word, offset = MisspellingRecord(word="teh", offset=4)

    assert (word, offset) == ("teh", 4)


def test_detector_ignores_identifier_fragments(fake_speller, sample_tree) -> None:
    detector = MisspellingDetector(build_session_dictionary(sample_tree, fake_speller))

    found = detector.find_misspelled(Comment("Call do_something or frobnicate the gizmo"))

    assert [record.word for record in found] == ["Call", "or"]


def test_detector_uses_session_speller(fake_speller) -> None:
    session = build_session_dictionary(DocumentationTree(), fake_speller)
    detector = MisspellingDetector(session)

    assert detector.speller is fake_speller
    assert detector.find_misspelled(Comment("sudo validator")) == []
