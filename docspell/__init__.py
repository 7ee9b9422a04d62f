"""Docspell CLI package."""
from __future__ import annotations

from .errors import DocspellError

__all__ = ("__version__", "DocspellError")

__version__ = "1.0.0"
