"""Loading of serialized documentation trees written by the documentation builder."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Callable, TypeVar

import yaml

from docspell.errors import TreeLoadError
from docspell.tree.models import (
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
from docspell.utils import load_text_document

logger = logging.getLogger("docspell.tree.loader")

_T = TypeVar("_T")
_ACCESS_MODES = ("R", "W", "RW")


def load_tree(paths: Sequence[Path]) -> DocumentationTree:
    """Load and merge serialized trees from *paths*, preserving file order."""

    modules: list[Module] = []
    files: list[File] = []

    for path in paths:
        payload = _load_payload(path)
        tree = parse_tree(payload, source=path)
        modules.extend(tree.modules)
        files.extend(tree.files)
        logger.info(
            "Loaded documentation tree",
            extra={
                "tree_source": str(path),
                "module_count": len(tree.modules),
                "file_count": len(tree.files),
            },
        )

    return DocumentationTree(modules=tuple(modules), files=tuple(files))


def parse_tree(payload: object, *, source: Path | str = "<memory>") -> DocumentationTree:
    """Build a :class:`DocumentationTree` from an already-decoded mapping."""

    if payload is None:
        return DocumentationTree()
    if not isinstance(payload, Mapping):
        raise TreeLoadError(
            message=f"Documentation tree {source} must define a mapping at the root level.",
            remediation="Provide 'modules' and 'files' lists at the top of the document.",
        )

    modules = _parse_list(payload.get("modules"), "modules", source, _parse_module)
    files = _parse_list(payload.get("files"), "files", source, _parse_file)
    return DocumentationTree(modules=modules, files=files)


def _load_payload(path: Path) -> object:
    document = load_text_document(path, "documentation tree", error_type=TreeLoadError)
    logger.debug(
        "Decoded documentation tree",
        extra={"tree_source": document.display_name, "encoding": document.display_encoding},
    )
    try:
        return yaml.safe_load(document.text)
    except yaml.YAMLError as exc:
        raise TreeLoadError(
            message=f"Documentation tree {document.display_name} contains invalid YAML or JSON.",
            remediation="Regenerate the tree with the documentation builder and retry.",
        ) from exc


def _parse_list(
    data: object,
    key: str,
    source: Path | str,
    parse: Callable[[Mapping, Path | str], _T],
) -> tuple[_T, ...]:
    if data is None:
        return ()
    if not isinstance(data, Sequence) or isinstance(data, str | bytes):
        raise TreeLoadError(
            message=f"'{key}' in {source} must be a list.",
            remediation=f"Use a YAML or JSON list for '{key}'.",
        )

    items: list[_T] = []
    for entry in data:
        if not isinstance(entry, Mapping):
            raise TreeLoadError(
                message=f"Entries under '{key}' in {source} must be mappings.",
                remediation="Check the documentation builder output for truncated records.",
            )
        items.append(parse(entry, source))
    return tuple(items)


def _parse_module(data: Mapping, source: Path | str) -> Module:
    name = _require_name(data, "name", "module", source)
    full_name = _optional_text(data.get("full_name")) or name
    kind = "module" if str(data.get("kind", "class")).strip().lower() == "module" else "class"

    comments = tuple(
        (_parse_comment(entry), _parse_location(entry.get("location")))
        for entry in _mappings(data.get("comments"), "comments", source)
    )

    def members(key: str, build: Callable[[Mapping], _T]) -> tuple[_T, ...]:
        return tuple(build(entry) for entry in _mappings(data.get(key), key, source))

    return Module(
        name=name,
        full_name=full_name,
        kind=kind,
        comments=comments,
        includes=members(
            "includes",
            lambda entry: Include(
                name=_require_name(entry, "name", "include", source),
                comment=_parse_comment(entry),
                location=_parse_location(entry.get("location")),
                owner=full_name,
            ),
        ),
        constants=members(
            "constants",
            lambda entry: Constant(
                name=_require_name(entry, "name", "constant", source),
                comment=_parse_comment(entry),
                location=_parse_location(entry.get("location")),
                owner=full_name,
            ),
        ),
        attributes=members(
            "attributes",
            lambda entry: Attribute(
                name=_require_name(entry, "name", "attribute", source),
                rw=_parse_access(entry.get("rw")),
                comment=_parse_comment(entry),
                location=_parse_location(entry.get("location")),
                owner=full_name,
            ),
        ),
        methods=members(
            "methods",
            lambda entry: Method(
                name=_require_name(entry, "name", "method", source),
                singleton=bool(entry.get("singleton", False)),
                comment=_parse_comment(entry),
                location=_parse_location(entry.get("location")),
                owner=full_name,
            ),
        ),
        aliases=members("aliases", lambda entry: _parse_alias(entry, full_name, source)),
        external_aliases=members(
            "external_aliases", lambda entry: _parse_alias(entry, full_name, source)
        ),
    )


def _parse_alias(data: Mapping, owner: str, source: Path | str) -> Alias:
    return Alias(
        old_name=_require_name(data, "old_name", "alias", source),
        new_name=_require_name(data, "new_name", "alias", source),
        comment=_parse_comment(data),
        location=_parse_location(data.get("location")),
        owner=owner,
    )


def _parse_file(data: Mapping, source: Path | str) -> File:
    absolute_name = _require_name(data, "absolute_name", "file", source)
    return File(
        absolute_name=absolute_name,
        relative_name=_optional_text(data.get("name")) or absolute_name,
        comment=_parse_comment(data),
    )


def _parse_comment(data: Mapping) -> Comment:
    raw = data.get("comment", data.get("text"))
    if isinstance(raw, Mapping):
        raw = raw.get("text")
    return Comment(text="" if raw is None else str(raw))


def _parse_location(raw: object) -> Location:
    if isinstance(raw, Mapping):
        path = _optional_text(raw.get("path")) or "(unknown)"
        return Location(path=path, line=_parse_line(raw.get("line")))

    text = _optional_text(raw)
    if not text:
        return Location(path="(unknown)")

    path, separator, line = text.rpartition(":")
    if separator and line.isdigit():
        return Location(path=path, line=int(line))
    return Location(path=text)


def _parse_line(raw: object) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _parse_access(raw: object) -> str:
    value = str(raw or "R").strip().upper()
    return value if value in _ACCESS_MODES else "R"


def _mappings(data: object, key: str, source: Path | str) -> tuple[Mapping, ...]:
    return _parse_list(data, key, source, lambda entry, _source: entry)


def _require_name(data: Mapping, key: str, kind: str, source: Path | str) -> str:
    value = _optional_text(data.get(key))
    if not value:
        raise TreeLoadError(
            message=f"A {kind} entry in {source} is missing its '{key}'.",
            remediation="Every documented item needs a name; regenerate the tree.",
        )
    return value


def _optional_text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


__all__ = ["load_tree", "parse_tree"]
