from __future__ import annotations

import logging
from typing import Iterable

import pytest

from docspell.cli import configure_logging
from docspell.spelling import SuggestionMode
from docspell.tree import (
    Alias,
    Attribute,
    Comment,
    Constant,
    DocumentationTree,
    File,
    Include,
    Location,
    Method,
    Module,
)

ENGLISH_WORDS = frozenset(
    """
    a an and are be by for from in input is it of on one the this to when with
    method validates wrong line contains you make typo find returns report each
    word its offset comment text file class module helper value values example other
    """.split()
)


class FakeSpeller:
    """Deterministic spelling capability with a fixed vocabulary and canned suggestions."""

    def __init__(
        self,
        known: Iterable[str] = ENGLISH_WORDS,
        suggestions: dict[str, list[str]] | None = None,
    ) -> None:
        self.known = {word.lower() for word in known}
        self.suggestions = dict(suggestions or {})
        self.suggestion_mode = SuggestionMode.NORMAL
        self.run_together = True
        self.session: list[str] = []
        self.personal: list[str] = []
        self.checked: list[str] = []
        self.suggested: list[str] = []
        self.saved = 0

    def check(self, word: str) -> bool:
        self.checked.append(word)
        return word.lower() in self.known

    def suggest(self, word: str) -> list[str]:
        self.suggested.append(word)
        return list(self.suggestions.get(word, []))

    def add_to_session(self, word: str) -> None:
        self.session.append(word)
        self.known.add(word.lower())

    def add_to_personal(self, word: str) -> None:
        self.personal.append(word)
        self.known.add(word.lower())

    def save_personal_wordlists(self) -> None:
        self.saved += 1


@pytest.fixture
def fake_speller() -> FakeSpeller:
    return FakeSpeller(
        suggestions={
            "acidentally": [
                "accidentally",
                "incidentally",
                "accidental",
                "occidental",
                "accidently",
                "coincidentally",
            ],
            "teh": ["the", "tea", "ten"],
        }
    )


@pytest.fixture
def sample_tree() -> DocumentationTree:
    location = Location("lib/widget.rb", 12)
    return DocumentationTree(
        modules=(
            Module(
                name="Widget",
                full_name="Shop::Widget",
                kind="class",
                comments=((Comment("A widget class"), Location("lib/widget.rb", 1)),),
                includes=(Include(name="Comparable", owner="Shop::Widget", location=location),),
                constants=(
                    Constant(
                        name="MAX_SIZE",
                        comment=Comment("The max size value"),
                        owner="Shop::Widget",
                        location=location,
                    ),
                ),
                attributes=(
                    Attribute(name="label_text", rw="RW", owner="Shop::Widget", location=location),
                ),
                methods=(
                    Method(
                        name="do_something",
                        comment=Comment("This method validates acidentally wrong input"),
                        owner="Shop::Widget",
                        location=location,
                    ),
                ),
                aliases=(
                    Alias(old_name="frobnicate", new_name="twiddle", owner="Shop::Widget", location=location),
                ),
            ),
        ),
        files=(File(absolute_name="/srv/app/lib/gizmo_tools.rb", relative_name="lib/gizmo_tools.rb"),),
    )


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Ensure each test runs with a clean logging configuration."""

    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.WARNING  # type: ignore[attr-defined]
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    yield
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    configure_logging._configured = False  # type: ignore[attr-defined]
    configure_logging._level = logging.WARNING  # type: ignore[attr-defined]
