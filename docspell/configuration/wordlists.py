"""Word sources used to seed the personal wordlist."""
from __future__ import annotations

from pathlib import Path
from typing import TextIO

from docspell.errors import WordlistError
from docspell.utils import load_text_document


def read_wordlist(source: str | None, stdin: TextIO) -> list[str]:
    """Return the words named by *source*.

    ``None`` reads whitespace-separated words from *stdin*, a value containing
    a comma is an inline list, and anything else is a file path.
    """

    if source is None:
        return stdin.read().split()

    if "," in source:
        return [word.strip() for word in source.split(",") if word.strip()]

    path = Path(source).expanduser()
    if not path.is_file():
        raise WordlistError(
            message=f"Word list file {source} does not exist.",
            remediation="Pass a comma-separated list of words, a readable file, or nothing to read stdin.",
        )
    return load_text_document(path, "word list", error_type=WordlistError).text.split()


__all__ = ["read_wordlist"]
