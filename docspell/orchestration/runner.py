"""Execution orchestrator for Docspell CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Sequence

from docspell.configuration import SpellcheckSettings
from docspell.engine import (
    DEFAULT_WORDS,
    MisspellingDetector,
    build_session_dictionary,
)
from docspell.errors import (
    DictionaryLanguageError,
    DocspellError,
    InputValidationError,
    TreeLoadError,
    WordlistError,
)
from docspell.exit_codes import ExitCode
from docspell.reporting import ReportEnvelope, ReportRenderOptions, render_entry
from docspell.spelling import PySpellCheckerBackend, SpellingCapability
from docspell.tree import DocumentationTree, load_tree

logger = logging.getLogger("docspell.orchestration.runner")

SpellerFactory = Callable[[SpellcheckSettings], SpellingCapability]


@dataclass(frozen=True)
class SpellcheckSummary:
    """Counters describing one report run."""

    module_count: int = 0
    file_count: int = 0
    comments_checked: int = 0
    session_words: int = 0
    misspelling_count: int = 0
    skipped_comments: int = 0

    def describe(self) -> str:
        return (
            f"Checked {self.comments_checked} comments across {self.module_count} "
            f"classes and modules and {self.file_count} files; "
            f"{self.session_words} session words; "
            f"{self.misspelling_count} misspellings."
        )


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of invoking the orchestration pipeline."""

    exit_code: ExitCode
    status: str
    message: str | None = None
    remediation: str | None = None
    report: ReportEnvelope | None = None
    summary: SpellcheckSummary | None = None


_ERROR_MAPPINGS: tuple[
    tuple[type[DocspellError], ExitCode, str, str | None],
    ...,
] = (
    (
        InputValidationError,
        ExitCode.INVALID_INPUT,
        "Input validation failed.",
        "Double-check the tree paths and options passed on the command line.",
    ),
    (
        TreeLoadError,
        ExitCode.TREE_ERROR,
        "Failed to load the documentation tree.",
        "Regenerate the tree with the documentation builder and retry.",
    ),
    (
        DictionaryLanguageError,
        ExitCode.DICTIONARY_ERROR,
        "The requested dictionary language is not available.",
        "Pass --spell-language with an installed dictionary language.",
    ),
    (
        WordlistError,
        ExitCode.WORDLIST_ERROR,
        "Unable to read or update the word list.",
        "Check the word list path and the personal wordlist permissions.",
    ),
)


def build_speller(settings: SpellcheckSettings) -> SpellingCapability:
    """Create the default spelling backend described by *settings*."""

    return PySpellCheckerBackend(
        settings.language,
        suggestion_mode=settings.suggestion_mode,
        run_together=settings.run_together,
        personal_wordlist=settings.personal_wordlist,
    )


def seed_personal_wordlist(speller: SpellingCapability, words: Iterable[str]) -> int:
    """Add *words* to the personal wordlist and persist it; return how many were given."""

    count = 0
    for word in words:
        speller.add_to_personal(word)
        count += 1
    speller.save_personal_wordlists()
    logger.info("Seeded personal wordlist", extra={"word_count": count})
    return count


def generate_report(
    tree: DocumentationTree,
    speller: SpellingCapability,
    *,
    default_words: Iterable[str] = DEFAULT_WORDS,
    options: ReportRenderOptions = ReportRenderOptions(),
) -> tuple[ReportEnvelope, SpellcheckSummary]:
    """Build the session dictionary from *tree*, then check every comment in it."""

    session = build_session_dictionary(tree, speller, default_words=default_words)
    detector = MisspellingDetector(session)

    lines: list[str] = []
    misspellings = 0
    checked = 0
    skipped = 0

    for source in tree.comment_sources():
        comment = source.comment
        if comment.empty:
            continue
        checked += 1
        try:
            found = detector.find_misspelled(comment)
            entry = render_entry(
                source.report_name,
                source.location,
                comment.text,
                found,
                speller,
                options,
            )
        except (TypeError, ValueError) as exc:
            skipped += 1
            logger.warning(
                "Skipping comment that could not be checked",
                extra={"location": source.location.full_name, "error": str(exc)},
            )
            continue
        misspellings += len(found)
        lines.extend(entry)

    summary = SpellcheckSummary(
        module_count=len(tree.modules),
        file_count=len(tree.files),
        comments_checked=checked,
        session_words=len(session),
        misspelling_count=misspellings,
        skipped_comments=skipped,
    )
    logger.info(
        "Checked documentation comments",
        extra={
            "comments_checked": checked,
            "misspelling_count": misspellings,
            "skipped_comments": skipped,
        },
    )
    envelope = ReportEnvelope(
        lines=tuple(lines),
        misspelling_count=misspellings,
    )
    return envelope, summary


def run_pipeline(
    tree_paths: Sequence[Path],
    settings: SpellcheckSettings,
    *,
    speller_factory: SpellerFactory | None = None,
) -> ExecutionOutcome:
    """Load the tree, prepare the dictionary and produce the misspelling report."""

    factory = speller_factory or build_speller

    try:
        speller = factory(settings)
        if settings.add_words:
            seed_personal_wordlist(speller, settings.add_words)
        tree = load_tree(tree_paths)
        if tree.is_empty:
            logger.warning(
                "Documentation tree has no modules or files",
                extra={"tree_count": len(tree_paths)},
            )
        envelope, summary = generate_report(
            tree,
            speller,
            default_words=(*DEFAULT_WORDS, *settings.extra_words),
            options=ReportRenderOptions(highlight=settings.highlight),
        )
    except DocspellError as error:
        return handle_domain_error(error)
    except Exception as error:  # pragma: no cover
        logger.exception("Unexpected error occurred during the spellcheck run.")
        return ExecutionOutcome(
            exit_code=ExitCode.UNEXPECTED_ERROR,
            status="failure",
            message=str(error) or "An unexpected error occurred during the spellcheck run.",
            remediation="Re-run with --verbose and inspect logs for details before retrying.",
        )

    return ExecutionOutcome(
        exit_code=ExitCode.SUCCESS,
        status="success",
        message=summary.describe(),
        report=envelope,
        summary=summary,
    )


def run_add_words(
    words: Sequence[str],
    settings: SpellcheckSettings,
    *,
    speller_factory: SpellerFactory | None = None,
) -> ExecutionOutcome:
    """Persist *words* to the personal wordlist without checking a tree."""

    factory = speller_factory or build_speller
    try:
        speller = factory(settings)
        count = seed_personal_wordlist(speller, words)
    except DocspellError as error:
        return handle_domain_error(error)

    return ExecutionOutcome(
        exit_code=ExitCode.SUCCESS,
        status="success",
        message=f"Added {count} words to {settings.personal_wordlist}.",
    )


def handle_domain_error(error: DocspellError) -> ExecutionOutcome:
    """Translate a domain error into an execution outcome and log remediation hints."""

    exit_code, default_message, default_remediation = _map_error(error)
    message = error.message or default_message
    remediation = error.remediation or default_remediation

    logger.error(message, extra={"exit_code": int(exit_code)})
    if remediation:
        logger.error("Remediation: %s", remediation)

    return ExecutionOutcome(
        exit_code=exit_code,
        status="failure",
        message=message,
        remediation=remediation,
    )


def _map_error(error: DocspellError) -> tuple[ExitCode, str, str | None]:
    """Match an error instance to its configured exit code and remediation."""

    for error_type, exit_code, message, remediation in _ERROR_MAPPINGS:
        if isinstance(error, error_type):
            return exit_code, message, remediation

    return (
        ExitCode.UNEXPECTED_ERROR,
        "An unexpected error occurred during the spellcheck run.",
        "Re-run with --verbose and retry. If the issue persists, open a bug ticket with the logs.",
    )


__all__ = [
    "ExecutionOutcome",
    "SpellcheckSummary",
    "build_speller",
    "generate_report",
    "handle_domain_error",
    "run_add_words",
    "run_pipeline",
    "seed_personal_wordlist",
]
