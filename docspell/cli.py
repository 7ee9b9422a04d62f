from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from . import DocspellError, __version__
from .configuration import SpellcheckSettings, read_wordlist, resolve_settings
from .errors import InputValidationError
from .exit_codes import ExitCode
from .orchestration import (
    HealthReport,
    collect_health_report,
    handle_domain_error,
    run_add_words,
    run_pipeline,
)
from .reporting import render_report
from .spelling import SuggestionMode

APP_NAME = "docspell"
STDIN_MARKER = "-"
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

app = typer.Typer(
    name=APP_NAME,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(*, quiet: bool = True) -> None:
    """Initialise application-wide logging on stderr."""

    level = logging.WARNING if quiet else logging.INFO
    root = logging.getLogger()

    if getattr(configure_logging, "_configured", False):
        root.setLevel(level)
        for handler in root.handlers:
            handler.setLevel(level)
        configure_logging._level = level
        return

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))

    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    configure_logging._configured = True
    configure_logging._level = level


def _is_quiet_mode() -> bool:
    return getattr(configure_logging, "_level", logging.WARNING) == logging.WARNING


def _validate_tree_paths(paths: list[Path]) -> list[Path]:
    """Ensure at least one readable tree file was supplied."""

    if not paths:
        raise InputValidationError(
            message="Missing documentation tree path.",
            remediation="Pass one or more YAML or JSON tree files written by the documentation builder.",
        )

    resolved: list[Path] = []
    for path in paths:
        candidate = path.expanduser()
        try:
            resolved_path = candidate.resolve()
        except OSError:
            resolved_path = candidate
        if not resolved_path.is_file():
            raise InputValidationError(
                message=f"Documentation tree {_quote_path(resolved_path)} does not exist or is not a file.",
                remediation="Verify the tree path and ensure the file is readable.",
            )
        resolved.append(resolved_path)
    return resolved


def _resolve_word_source(source: str | None) -> list[str] | None:
    """Read the words named by ``--spell-add-words``; ``-`` reads stdin."""

    if source is None:
        return None
    return read_wordlist(None if source == STDIN_MARKER else source, sys.stdin)


def _quote_path(path: Path) -> str:
    value = str(path)
    if " " in value:
        return f'"{value}"'
    return value


def _render_health_report(report: HealthReport) -> None:
    """Pretty-print the health diagnostics to the console."""

    typer.echo("Docspell environment diagnostics")
    typer.echo(f"Python runtime     : {report.python_version}")
    typer.echo(f"Dictionary         : {report.language}")
    typer.echo(f"Personal wordlist  : {report.personal_wordlist}")
    sources = ", ".join(str(path) for path in report.config_sources) or "none"
    typer.echo(f"Settings file      : {sources}")

    if report.dependency_versions:
        typer.echo("Dependencies       : " + ", ".join(report.dependency_versions))
    else:
        typer.echo("Dependencies       : none detected")

    typer.echo("")
    for check in report.checks:
        typer.echo(f"[{check.status}] {check.name} - {check.detail}")
        if check.remediation:
            typer.echo(f"    Remediation: {check.remediation}")

    typer.echo("")
    typer.echo(f"Overall status: {report.overall_status}")


def _settings_or_exit(**kwargs: object) -> SpellcheckSettings:
    try:
        return resolve_settings(**kwargs)
    except DocspellError as exc:
        outcome = handle_domain_error(exc)
        raise typer.Exit(code=int(outcome.exit_code)) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    quiet: bool = typer.Option(
        True,
        "--quiet/--verbose",
        help="Suppress statistics and informational logs (default), or show them.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the Docspell version and exit.",
    ),
    health: bool = typer.Option(
        False,
        "--health",
        help="Run offline diagnostics to verify dictionary and wordlist readiness.",
    ),
) -> None:
    """Report misspelled words in documentation comments."""

    configure_logging(quiet=quiet)

    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if health:
        _render_health_report(collect_health_report(_settings_or_exit()))
        raise typer.Exit(code=int(ExitCode.SUCCESS))

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=int(ExitCode.SUCCESS))


@app.command("check")
def check(
    trees: list[Path] = typer.Argument(
        ...,
        help="Documentation tree files (YAML or JSON) written by the documentation builder.",
        show_default=False,
    ),
    spell_language: Optional[str] = typer.Option(
        None,
        "--spell-language",
        help="Language to use for spell checking. Defaults to the language in LANG.",
    ),
    spell_add_words: Optional[str] = typer.Option(
        None,
        "--spell-add-words",
        metavar="WORDLIST",
        help=(
            "Adds words to the personal wordlist. WORDLIST may be a comma-separated "
            "list of words, a file, or '-' to read words from stdin."
        ),
    ),
    suggestion_mode: Optional[SuggestionMode] = typer.Option(
        None,
        "--suggestion-mode",
        case_sensitive=False,
        help="How thoroughly to search for suggestions.",
    ),
    run_together: Optional[bool] = typer.Option(
        None,
        "--run-together/--no-run-together",
        help="Accept words made of two dictionary words joined together (default on).",
        show_default=False,
    ),
    personal_wordlist: Optional[Path] = typer.Option(
        None,
        "--personal-wordlist",
        dir_okay=False,
        help="Personal wordlist file to load and update.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="YAML settings file (language, suggestion_mode, run_together, personal_wordlist, words).",
    ),
    no_highlight: bool = typer.Option(
        False,
        "--no-highlight",
        help="Mark misspelled words with asterisks instead of terminal colours.",
    ),
    fail_on_misspelling: bool = typer.Option(
        False,
        "--fail-on-misspelling",
        help="Exit with a non-zero status when any misspelling is reported.",
    ),
) -> None:
    """Check every documentation comment in TREES and print a misspelling report."""

    logger = logging.getLogger("docspell.cli")

    try:
        tree_paths = _validate_tree_paths(trees)
        add_words = _resolve_word_source(spell_add_words)
    except DocspellError as exc:
        outcome = handle_domain_error(exc)
        raise typer.Exit(code=int(outcome.exit_code)) from exc

    settings = _settings_or_exit(
        language=spell_language,
        suggestion_mode=suggestion_mode,
        run_together=run_together,
        personal_wordlist=personal_wordlist,
        add_words=add_words,
        highlight=not no_highlight,
        config_path=config,
    )
    logger.info(
        "Resolved settings",
        extra={
            "language": settings.language,
            "suggestion_mode": settings.suggestion_mode.value,
            "tree_count": len(tree_paths),
            "config_sources": [str(path) for path in settings.sources],
        },
    )

    outcome = run_pipeline(tree_paths, settings)

    if outcome.report is None:
        raise typer.Exit(code=int(outcome.exit_code))

    if outcome.message and not _is_quiet_mode():
        typer.echo(outcome.message, err=True)

    text = render_report(outcome.report)
    typer.echo(text, nl=not text.endswith("\n"))

    if fail_on_misspelling and outcome.report.has_misspellings:
        raise typer.Exit(code=int(ExitCode.MISSPELLINGS_FOUND))
    raise typer.Exit(code=int(outcome.exit_code))


@app.command("add-words")
def add_words(
    wordlist: str = typer.Argument(
        STDIN_MARKER,
        metavar="WORDLIST",
        help="Comma-separated words, a file, or '-' to read words from stdin.",
    ),
    spell_language: Optional[str] = typer.Option(
        None,
        "--spell-language",
        help="Language whose personal wordlist is updated.",
    ),
    personal_wordlist: Optional[Path] = typer.Option(
        None,
        "--personal-wordlist",
        dir_okay=False,
        help="Personal wordlist file to update.",
    ),
) -> None:
    """Add words to the personal wordlist without checking a tree."""

    try:
        words = _resolve_word_source(wordlist) or []
    except DocspellError as exc:
        outcome = handle_domain_error(exc)
        raise typer.Exit(code=int(outcome.exit_code)) from exc

    settings = _settings_or_exit(language=spell_language, personal_wordlist=personal_wordlist)
    outcome = run_add_words(words, settings)

    if outcome.exit_code == ExitCode.SUCCESS and outcome.message and not _is_quiet_mode():
        typer.echo(outcome.message)
    raise typer.Exit(code=int(outcome.exit_code))


@app.command("health")
def health(
    spell_language: Optional[str] = typer.Option(
        None,
        "--spell-language",
        help="Language whose dictionary is checked.",
    ),
    personal_wordlist: Optional[Path] = typer.Option(
        None,
        "--personal-wordlist",
        dir_okay=False,
        help="Personal wordlist file to check.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="YAML settings file, as passed to 'check'.",
    ),
) -> None:
    """Run offline diagnostics for the settings 'check' would use."""

    settings = _settings_or_exit(
        language=spell_language,
        personal_wordlist=personal_wordlist,
        config_path=config,
    )
    report = collect_health_report(settings)
    _render_health_report(report)
    raise typer.Exit(code=int(ExitCode.SUCCESS))


def entrypoint() -> None:
    """Execute the Typer application."""

    app()


__all__ = ["app", "entrypoint", "configure_logging", "ExitCode"]
