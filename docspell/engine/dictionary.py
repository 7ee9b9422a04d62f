"""Session dictionary seeding from the identifiers of a documentation tree."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from docspell.spelling import SpellingCapability
from docspell.tree import DocumentationTree

logger = logging.getLogger("docspell.engine.dictionary")

# Common words a dictionary may not include but that documentation uses.
# Keep this list sorted.
DEFAULT_WORDS: Tuple[str, ...] = (
    "http",
    "https",
    "newb",
    "sudo",
    "validator",
)

_PATH_SEPARATORS = re.compile(r"[/\\.]")


@dataclass(frozen=True)
class SessionDictionary:
    """Proof that the session words of a tree have been registered with *speller*.

    Only :func:`build_session_dictionary` creates one, and detection requires
    it, so checking cannot start against a half-seeded dictionary.
    """

    speller: SpellingCapability
    words: frozenset[str]

    def __len__(self) -> int:
        return len(self.words)


def split_name(name: str) -> Tuple[str, ...]:
    """Split an identifier on underscores, dropping empty pieces."""

    return tuple(part for part in (name or "").split("_") if part)


def add_name(speller: SpellingCapability, name: str) -> Tuple[str, ...]:
    """Add each underscore-separated piece of *name* to the session dictionary."""

    parts = split_name(name)
    for part in parts:
        speller.add_to_session(part)
    return parts


def tree_identifiers(tree: DocumentationTree) -> Iterable[str]:
    """Yield every identifier of *tree* that contributes session words."""

    for module in tree.modules:
        yield from module.identifier_names()
        for source in module.comment_sources():
            yield from source.identifier_names()

    for file in tree.files:
        for name in file.identifier_names():
            yield from _PATH_SEPARATORS.split(name)


def build_session_dictionary(
    tree: DocumentationTree,
    speller: SpellingCapability,
    *,
    default_words: Iterable[str] = DEFAULT_WORDS,
) -> SessionDictionary:
    """Register default words and all tree identifiers with *speller*."""

    registered: set[str] = set()

    for word in default_words:
        if word:
            speller.add_to_session(word)
            registered.add(word)

    for identifier in tree_identifiers(tree):
        registered.update(add_name(speller, identifier))

    logger.info(
        "Built session dictionary",
        extra={
            "session_words": len(registered),
            "module_count": len(tree.modules),
            "file_count": len(tree.files),
        },
    )
    return SessionDictionary(speller=speller, words=frozenset(registered))


__all__ = [
    "DEFAULT_WORDS",
    "SessionDictionary",
    "add_name",
    "build_session_dictionary",
    "split_name",
    "tree_identifiers",
]
