"""Spellcheck settings resolved from CLI options, a YAML file and the environment."""
from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

import typer
import yaml

from docspell.errors import InputValidationError
from docspell.spelling import SuggestionMode

APP_NAME = "docspell"
FALLBACK_LANGUAGE = "en"
DEFAULT_CONFIG_FILENAME = ".docspell.yaml"

_SETTING_KEYS = ("language", "suggestion_mode", "run_together", "personal_wordlist", "words")


@dataclass(frozen=True)
class SpellcheckSettings:
    """Everything the engine needs to know before a run starts."""

    language: str = FALLBACK_LANGUAGE
    suggestion_mode: SuggestionMode = SuggestionMode.NORMAL
    run_together: bool = True
    personal_wordlist: Path | None = None
    extra_words: tuple[str, ...] = ()
    add_words: tuple[str, ...] | None = None
    highlight: bool = True
    sources: tuple[Path, ...] = ()


def default_language(environ: Mapping[str, str] | None = None) -> str:
    """Derive a dictionary language from ``LANG`` (``en_US.UTF-8`` becomes ``en``)."""

    env = os.environ if environ is None else environ
    raw = (env.get("LANG") or "").strip()
    language = raw.split(".", 1)[0].split("@", 1)[0]
    language = language.split("_", 1)[0].split("-", 1)[0].lower()
    if not language or language in ("c", "posix"):
        return FALLBACK_LANGUAGE
    return language


def default_personal_wordlist(language: str) -> Path:
    """Return the per-user personal wordlist location for *language*."""

    return Path(typer.get_app_dir(APP_NAME)) / f"personal.{language}.pws"


def load_settings_file(path: Path) -> dict:
    """Read a YAML settings file and return only the recognised keys."""

    display = str(path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise InputValidationError(
            message=f"Unable to read settings file {display}.",
            remediation="Check the --config path and file permissions.",
        ) from exc

    try:
        loaded = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        raise InputValidationError(
            message=f"Settings file {display} contains invalid YAML.",
            remediation="Fix the YAML syntax or remove the --config option.",
        ) from exc

    if not isinstance(loaded, Mapping):
        raise InputValidationError(
            message=f"Settings file {display} must define a mapping at the root level.",
            remediation=f"Use keys such as {', '.join(_SETTING_KEYS)}.",
        )

    unknown = sorted(str(key) for key in loaded if key not in _SETTING_KEYS)
    if unknown:
        raise InputValidationError(
            message=f"Settings file {display} has unknown keys: {', '.join(unknown)}.",
            remediation=f"Supported keys are {', '.join(_SETTING_KEYS)}.",
        )
    return dict(loaded)


def resolve_settings(
    *,
    language: str | None = None,
    suggestion_mode: SuggestionMode | None = None,
    run_together: bool | None = None,
    personal_wordlist: Path | None = None,
    add_words: Sequence[str] | None = None,
    highlight: bool = True,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> SpellcheckSettings:
    """Merge CLI values over the settings file over built-in defaults.

    A ``.docspell.yaml`` in the working directory is read when no *config_path*
    is given.
    """

    file_settings: dict = {}
    sources: tuple[Path, ...] = ()
    if config_path is None:
        discovered = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if discovered.is_file():
            config_path = discovered
    if config_path is not None:
        file_settings = load_settings_file(config_path)
        sources = (config_path,)

    resolved_language = _validate_language(
        language or file_settings.get("language") or default_language(environ)
    )

    if suggestion_mode is None:
        suggestion_mode = _parse_suggestion_mode(
            file_settings.get("suggestion_mode", SuggestionMode.NORMAL.value)
        )

    if run_together is None:
        run_together = _parse_run_together(file_settings.get("run_together", True), config_path)

    if personal_wordlist is None:
        configured = file_settings.get("personal_wordlist")
        personal_wordlist = (
            Path(str(configured)).expanduser()
            if configured
            else default_personal_wordlist(resolved_language)
        )

    return SpellcheckSettings(
        language=resolved_language,
        suggestion_mode=suggestion_mode,
        run_together=run_together,
        personal_wordlist=personal_wordlist,
        extra_words=_parse_words(file_settings.get("words"), config_path),
        add_words=tuple(add_words) if add_words is not None else None,
        highlight=highlight,
        sources=sources,
    )


def _validate_language(value: object) -> str:
    language = str(value or "").strip()
    if not language:
        raise InputValidationError(
            message="Dictionary language cannot be empty.",
            remediation="Pass --spell-language, e.g. --spell-language=en.",
        )
    return language


def _parse_suggestion_mode(value: object) -> SuggestionMode:
    try:
        return SuggestionMode(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in SuggestionMode)
        raise InputValidationError(
            message=f"Unknown suggestion mode '{value}'.",
            remediation=f"Choose one of: {choices}.",
        ) from exc


def _parse_run_together(value: object, source: Path | None) -> bool:
    if isinstance(value, bool):
        return value
    raise InputValidationError(
        message=f"'run_together' in {source} must be true or false, got {value!r}.",
        remediation="Use an unquoted YAML boolean, e.g. run_together: false.",
    )


def _parse_words(value: object, source: Path | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise InputValidationError(
            message=f"'words' in {source} must be a list of strings.",
            remediation="Use a YAML list, e.g. words: [rubygems, yaml].",
        )
    return tuple(str(word).strip() for word in value if str(word).strip())


__all__ = [
    "APP_NAME",
    "DEFAULT_CONFIG_FILENAME",
    "FALLBACK_LANGUAGE",
    "SpellcheckSettings",
    "default_language",
    "default_personal_wordlist",
    "load_settings_file",
    "resolve_settings",
]
