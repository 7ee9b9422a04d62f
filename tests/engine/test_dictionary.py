from __future__ import annotations

from docspell.engine import DEFAULT_WORDS, add_name, build_session_dictionary, split_name
from docspell.tree import Alias, DocumentationTree, File, Module


def test_split_name_drops_empty_pieces() -> None:
    assert split_name("__do_something__") == ("do", "something")
    assert split_name("") == ()


def test_add_name_registers_each_piece(fake_speller) -> None:
    parts = add_name(fake_speller, "MAX_SIZE")

    assert parts == ("MAX", "SIZE")
    assert fake_speller.session == ["MAX", "SIZE"]


def test_build_session_dictionary_collects_every_identifier(fake_speller, sample_tree) -> None:
    session = build_session_dictionary(sample_tree, fake_speller)

    expected = {
        *DEFAULT_WORDS,
        "Widget",
        "Comparable",
        "MAX",
        "SIZE",
        "label",
        "text",
        "do",
        "something",
        "frobnicate",
        "twiddle",
        "srv",
        "app",
        "lib",
        "gizmo",
        "tools",
        "rb",
    }
    assert expected <= session.words
    assert session.speller is fake_speller
    assert fake_speller.check("gizmo")
    assert fake_speller.check("FROBNICATE")


def test_build_session_dictionary_registers_external_aliases(fake_speller) -> None:
    tree = DocumentationTree(
        modules=(
            Module(
                name="Kernel",
                external_aliases=(Alias(old_name="old_zork", new_name="new_blorb"),),
            ),
        )
    )

    session = build_session_dictionary(tree, fake_speller)

    assert {"old", "zork", "new", "blorb"} <= session.words


def test_build_session_dictionary_splits_windows_paths(fake_speller) -> None:
    tree = DocumentationTree(files=(File(absolute_name="C:\\work\\quux.README.md"),))

    session = build_session_dictionary(tree, fake_speller)

    assert {"work", "quux", "README", "md"} <= session.words


def test_build_session_dictionary_is_idempotent(fake_speller, sample_tree) -> None:
    first = build_session_dictionary(sample_tree, fake_speller)
    known_after_first = set(fake_speller.known)

    second = build_session_dictionary(sample_tree, fake_speller)

    assert first.words == second.words
    assert fake_speller.known == known_after_first


def test_build_session_dictionary_accepts_extra_default_words(fake_speller) -> None:
    session = build_session_dictionary(
        DocumentationTree(), fake_speller, default_words=(*DEFAULT_WORDS, "rubygems")
    )

    assert "rubygems" in session.words
    assert len(session) == len(DEFAULT_WORDS) + 1
