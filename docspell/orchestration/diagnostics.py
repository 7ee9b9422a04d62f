"""Offline diagnostics helpers for the Docspell CLI."""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path
from typing import Mapping, Tuple

from spellchecker import SpellChecker

from docspell.configuration import (
    SpellcheckSettings,
    default_personal_wordlist,
    resolve_settings,
)

_TRACKED_DISTRIBUTIONS: tuple[str, ...] = ("pyspellchecker", "typer", "rich", "PyYAML")


@dataclass(frozen=True)
class HealthCheck:
    """Represents the outcome of an individual health validation."""

    name: str
    status: str
    detail: str
    remediation: str | None = None


@dataclass(frozen=True)
class HealthReport:
    """Aggregated health diagnostics for the Docspell CLI."""

    python_version: str
    language: str
    personal_wordlist: Path
    dependency_versions: Tuple[str, ...]
    checks: Tuple[HealthCheck, ...]
    config_sources: Tuple[Path, ...] = ()

    @property
    def overall_status(self) -> str:
        """Summarise overall readiness based on individual checks."""

        return "PASS" if all(check.status == "PASS" for check in self.checks) else "FAIL"


def collect_health_report(
    settings: SpellcheckSettings | None = None,
    environ: Mapping[str, str] | None = None,
) -> HealthReport:
    """Gather diagnostics for the settings a check run would use.

    Without *settings* they are resolved the same way ``check`` resolves them,
    so a working-directory settings file is honoured.
    """

    if settings is None:
        settings = resolve_settings(environ=environ)
    resolved_language = settings.language
    wordlist = settings.personal_wordlist or default_personal_wordlist(resolved_language)
    versions = tuple(_installed_versions())

    checks = (
        check_python_version(),
        check_dictionary_language(resolved_language),
        check_personal_wordlist(wordlist),
        _check_dependencies(versions),
    )

    return HealthReport(
        python_version=format_python_version(),
        language=resolved_language,
        personal_wordlist=wordlist,
        dependency_versions=versions,
        checks=checks,
        config_sources=settings.sources,
    )


def check_python_version() -> HealthCheck:
    version = format_python_version()
    if sys.version_info >= (3, 10):
        return HealthCheck(
            name="Python runtime",
            status="PASS",
            detail=f"Detected Python {version}.",
        )

    return HealthCheck(
        name="Python runtime",
        status="FAIL",
        detail=f"Detected Python {version}; Docspell requires 3.10 or newer.",
        remediation="Install Python 3.10 or newer and recreate the virtual environment.",
    )


def check_dictionary_language(language: str) -> HealthCheck:
    try:
        SpellChecker(language=language)
    except ValueError:
        return HealthCheck(
            name="Dictionary language",
            status="FAIL",
            detail=f"dictionary {language} not installed.",
            remediation="Set LANG or pass --spell-language with a bundled language such as en.",
        )
    return HealthCheck(
        name="Dictionary language",
        status="PASS",
        detail=f"Dictionary '{language}' is available.",
    )


def check_personal_wordlist(path: Path) -> HealthCheck:
    if path.is_file():
        writable = os.access(path, os.W_OK)
        detail = f"Personal wordlist present at {path}."
    else:
        parent = _nearest_existing_parent(path)
        writable = os.access(parent, os.W_OK)
        detail = f"No personal wordlist yet; it will be created at {path}."

    if writable:
        return HealthCheck(name="Personal wordlist", status="PASS", detail=detail)

    return HealthCheck(
        name="Personal wordlist",
        status="FAIL",
        detail=f"{path} is not writable.",
        remediation="Fix the directory permissions or pass --personal-wordlist.",
    )


def format_python_version() -> str:
    return f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"


def _installed_versions() -> list[str]:
    versions: list[str] = []
    for name in _TRACKED_DISTRIBUTIONS:
        try:
            versions.append(f"{name}=={metadata.version(name)}")
        except metadata.PackageNotFoundError:
            continue
    return versions


def _check_dependencies(versions: Tuple[str, ...]) -> HealthCheck:
    if len(versions) == len(_TRACKED_DISTRIBUTIONS):
        return HealthCheck(
            name="Dependencies",
            status="PASS",
            detail="Installed: " + ", ".join(versions),
        )

    found = {entry.split("==", 1)[0] for entry in versions}
    missing = [name for name in _TRACKED_DISTRIBUTIONS if name not in found]
    return HealthCheck(
        name="Dependencies",
        status="FAIL",
        detail="Missing: " + ", ".join(missing),
        remediation="Reinstall the project with 'pip install -e .'.",
    )


def _nearest_existing_parent(path: Path) -> Path:
    for candidate in path.parents:
        if candidate.exists():
            return candidate
    return Path.cwd()


__all__ = [
    "HealthCheck",
    "HealthReport",
    "check_dictionary_language",
    "check_personal_wordlist",
    "check_python_version",
    "collect_health_report",
    "format_python_version",
]
