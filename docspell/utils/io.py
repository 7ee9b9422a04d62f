"""Filesystem helpers for tree documents and word sources."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from docspell.errors import DocspellError, InputValidationError

_PREFERRED_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "cp1252")
_ENCODING_LABELS: dict[str, str] = {
    "utf-8-sig": "UTF-8 (with BOM)",
    "cp1252": "Windows-1252",
    "utf-8": "UTF-8",
}


@dataclass(frozen=True)
class LoadedDocument:
    """Text read from disk together with the encoding that decoded it."""

    path: Path
    text: str
    encoding: str

    @property
    def display_name(self) -> str:
        """Return the filename quoted when needed for display contexts."""

        return format_display_path(self.path)

    @property
    def display_encoding(self) -> str:
        return _ENCODING_LABELS.get(self.encoding, self.encoding)


def normalize_newlines(text: str) -> str:
    """Convert Windows/legacy newline sequences to Unix-style newlines."""

    if "\r" not in text:
        return text

    # Windows text mode can turn a written `\r\n` into `\r\r\n`.
    text = text.replace("\r\r\n", "\n")
    text = text.replace("\r\n", "\n")
    return text.replace("\r", "\n")


def format_display_path(path: Path) -> str:
    """Format a path for human-readable output without leaking directories."""

    name = path.name
    if " " in name:
        return f'"{name}"'
    return name


def load_text_document(
    path: Path,
    description: str,
    *,
    error_type: type[DocspellError] = InputValidationError,
) -> LoadedDocument:
    """Read text from disk using UTF-8 BOM first, then Windows-1252 fallback.

    Failures are raised as *error_type* so callers can map them onto their own
    exit codes.
    """

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise error_type(
            message=f"Unable to read the {description} file {format_display_path(path)}.",
            remediation="Verify the path exists and that the file is readable.",
        ) from exc

    last_error: UnicodeDecodeError | None = None
    for encoding in _PREFERRED_ENCODINGS:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as exc:
            last_error = exc
            continue
        return LoadedDocument(path=path, text=normalize_newlines(text), encoding=encoding)

    supported = ", ".join(_ENCODING_LABELS[enc] for enc in _PREFERRED_ENCODINGS)
    raise error_type(
        message=(
            f"The {description} file {format_display_path(path)} is not encoded as {supported}."
        ),
        remediation="Re-save the file using UTF-8 and retry.",
    ) from last_error


__all__ = [
    "LoadedDocument",
    "format_display_path",
    "load_text_document",
    "normalize_newlines",
]
