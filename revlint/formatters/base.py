from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from ..config import Config
from ..lint import Failure, Severity


class Formatter(Protocol):
    """Turns a drained failure stream into one output document."""

    name: str

    def format(self, failures: Iterable[Failure], config: Config) -> str: ...


def severity(config: Config, failure: Failure) -> Severity:
    """Severity of a failure, falling back to the rule and session defaults."""
    return failure.severity or config.severity_for(failure.rule_name)


def failure_to_dict(failure: Failure, config: Config) -> dict:
    """Convert a failure to a JSON-serializable dict."""
    pos = failure.position
    return {
        "file": failure.filename,
        "line": pos.start.line if pos else 0,
        "column": pos.start.column if pos else 0,
        "end_line": pos.end.line if pos else 0,
        "end_column": pos.end.column if pos else 0,
        "message": failure.failure,
        "rule": failure.rule_name,
        "category": failure.category,
        "confidence": failure.confidence,
        "severity": severity(config, failure),
    }
