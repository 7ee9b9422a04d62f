"""Dataclasses describing the documentation tree consumed by Docspell."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Literal, Protocol, Tuple

ModuleKind = Literal["class", "module"]
AttributeAccess = Literal["R", "W", "RW"]

_ATTRIBUTE_DEFINITIONS: dict[str, str] = {
    "R": "attr_reader",
    "W": "attr_writer",
    "RW": "attr_accessor",
}


@dataclass(frozen=True)
class Location:
    """Source position of a documented item, used for report headers only."""

    path: str
    line: int | None = None

    @property
    def full_name(self) -> str:
        if self.line is None:
            return self.path
        return f"{self.path}:{self.line}"

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Comment:
    """Free-text documentation attached to a tree entity."""

    text: str = ""

    def __post_init__(self) -> None:  # pragma: no cover - simple normalization
        object.__setattr__(self, "text", "" if self.text is None else str(self.text))

    @property
    def empty(self) -> bool:
        """Return True when the comment holds nothing but whitespace."""

        return not self.text.strip()


class CommentSource(Protocol):
    """Uniform accessor implemented by every comment-bearing tree node."""

    @property
    def report_name(self) -> str | None: ...

    @property
    def comment(self) -> Comment: ...

    @property
    def location(self) -> Location: ...

    def identifier_names(self) -> Tuple[str, ...]: ...


@dataclass(frozen=True)
class Include:
    name: str
    comment: Comment = field(default_factory=Comment)
    location: Location = field(default_factory=lambda: Location(""))
    owner: str = ""

    @property
    def report_name(self) -> str:
        return f"{self.owner}.include {self.name}"

    def identifier_names(self) -> Tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True)
class Constant:
    name: str
    comment: Comment = field(default_factory=Comment)
    location: Location = field(default_factory=lambda: Location(""))
    owner: str | None = None

    @property
    def report_name(self) -> str:
        parent = self.owner or "(unknown)"
        return f"{parent}::{self.name}"

    def identifier_names(self) -> Tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True)
class Attribute:
    name: str
    rw: AttributeAccess = "R"
    comment: Comment = field(default_factory=Comment)
    location: Location = field(default_factory=lambda: Location(""))
    owner: str = ""

    @property
    def definition(self) -> str:
        """Return the declaration keyword matching the attribute's access mode."""

        return _ATTRIBUTE_DEFINITIONS.get(self.rw, "attr")

    @property
    def report_name(self) -> str:
        return f"{self.owner}.{self.definition} :{self.name}"

    def identifier_names(self) -> Tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True)
class Method:
    name: str
    singleton: bool = False
    comment: Comment = field(default_factory=Comment)
    location: Location = field(default_factory=lambda: Location(""))
    owner: str = ""

    @property
    def full_name(self) -> str:
        separator = "::" if self.singleton else "#"
        return f"{self.owner}{separator}{self.name}"

    @property
    def report_name(self) -> str:
        return self.full_name

    def identifier_names(self) -> Tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True)
class Alias:
    old_name: str
    new_name: str
    comment: Comment = field(default_factory=Comment)
    location: Location = field(default_factory=lambda: Location(""))
    owner: str | None = None

    @property
    def report_name(self) -> str:
        return f"{self.owner or 'Object'} alias {self.old_name} {self.new_name}"

    def identifier_names(self) -> Tuple[str, ...]:
        return (self.old_name, self.new_name)


@dataclass(frozen=True)
class ModuleComment:
    """One (comment, location) pair of a module that may be reopened across files."""

    comment: Comment
    location: Location
    definition: str

    @property
    def report_name(self) -> str:
        return self.definition

    def identifier_names(self) -> Tuple[str, ...]:
        return ()


@dataclass(frozen=True)
class Module:
    """A documented class or module with its nested members."""

    name: str
    full_name: str = ""
    kind: ModuleKind = "class"
    comments: Tuple[Tuple[Comment, Location], ...] = ()
    includes: Tuple[Include, ...] = ()
    constants: Tuple[Constant, ...] = ()
    attributes: Tuple[Attribute, ...] = ()
    methods: Tuple[Method, ...] = ()
    aliases: Tuple[Alias, ...] = ()
    external_aliases: Tuple[Alias, ...] = ()

    def __post_init__(self) -> None:  # pragma: no cover - simple normalization
        object.__setattr__(self, "full_name", self.full_name or self.name)
        for name in (
            "comments",
            "includes",
            "constants",
            "attributes",
            "methods",
            "aliases",
            "external_aliases",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def definition(self) -> str:
        return f"{self.kind} {self.full_name}"

    def identifier_names(self) -> Tuple[str, ...]:
        return (self.name,)

    def comment_sources(self) -> Iterator[CommentSource]:
        """Yield every comment-bearing entry of the module in report order."""

        for comment, location in self.comments:
            yield ModuleComment(comment=comment, location=location, definition=self.definition)
        yield from self.includes
        yield from self.constants
        yield from self.attributes
        yield from self.methods
        yield from self.aliases
        yield from self.external_aliases


@dataclass(frozen=True)
class File:
    """A top-level documented file; it is its own report location."""

    absolute_name: str
    relative_name: str = ""
    comment: Comment = field(default_factory=Comment)

    def __post_init__(self) -> None:  # pragma: no cover - simple normalization
        object.__setattr__(self, "relative_name", self.relative_name or self.absolute_name)

    @property
    def report_name(self) -> None:
        return None

    @property
    def location(self) -> Location:
        return Location(self.relative_name)

    @property
    def full_name(self) -> str:
        return self.relative_name

    def identifier_names(self) -> Tuple[str, ...]:
        return (self.absolute_name,)


@dataclass(frozen=True)
class DocumentationTree:
    """Root container exposing documented modules and top-level files in stable order."""

    modules: Tuple[Module, ...] = ()
    files: Tuple[File, ...] = ()

    def __post_init__(self) -> None:  # pragma: no cover - simple normalization
        object.__setattr__(self, "modules", tuple(self.modules))
        object.__setattr__(self, "files", tuple(self.files))

    def comment_sources(self) -> Iterator[CommentSource]:
        """Walk every comment-bearing node: module members first, then files."""

        for module in self.modules:
            yield from module.comment_sources()
        yield from self.files

    @property
    def is_empty(self) -> bool:
        return not self.modules and not self.files


__all__ = [
    "Alias",
    "Attribute",
    "AttributeAccess",
    "Comment",
    "CommentSource",
    "Constant",
    "DocumentationTree",
    "File",
    "Include",
    "Location",
    "Method",
    "Module",
    "ModuleComment",
    "ModuleKind",
]
