"""Orchestration layer for Docspell."""
from __future__ import annotations

from .diagnostics import HealthCheck, HealthReport, collect_health_report
from .runner import (
    ExecutionOutcome,
    SpellcheckSummary,
    build_speller,
    generate_report,
    handle_domain_error,
    run_add_words,
    run_pipeline,
    seed_personal_wordlist,
)

__all__ = [
    "ExecutionOutcome",
    "HealthCheck",
    "HealthReport",
    "SpellcheckSummary",
    "build_speller",
    "collect_health_report",
    "generate_report",
    "handle_domain_error",
    "run_add_words",
    "run_pipeline",
    "seed_personal_wordlist",
]
