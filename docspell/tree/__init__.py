"""Documentation tree model and loader."""
from __future__ import annotations

from .loader import load_tree, parse_tree
from .models import (
    Alias,
    Attribute,
    Comment,
    CommentSource,
    Constant,
    DocumentationTree,
    File,
    Include,
    Location,
    Method,
    Module,
    ModuleComment,
)

__all__ = [
    "Alias",
    "Attribute",
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
    "load_tree",
    "parse_tree",
]
