"""Positions, failures and disabled intervals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Severity = Literal["warning", "error"]

SEVERITY_WARNING: Severity = "warning"
SEVERITY_ERROR: Severity = "error"


@dataclass(frozen=True)
class Position:
    """A location in a source file. Lines and columns are 1-based."""

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class FailurePosition:
    """Start and end of the code a failure points at."""

    start: Position
    end: Position

    @classmethod
    def file_level(cls, filename: str) -> "FailurePosition":
        """Position for failures that concern the whole file (line 0)."""
        pos = Position(filename=filename, line=0, column=0)
        return cls(start=pos, end=pos)


@dataclass
class Failure:
    """A single lint finding.

    Rules build these and hand them to the pipeline, which fills in
    `rule_name`, `position` and `severity` when the rule left them unset.
    """

    failure: str
    confidence: float = 1.0
    rule_name: str = ""
    node: Any = None
    position: FailurePosition | None = None
    severity: Severity | None = None
    category: str = ""
    internal: bool = False

    @classmethod
    def internal_fault(cls, message: str) -> "Failure":
        """Build a failure that aborts linting of the current file."""
        return cls(failure=message, internal=True)

    @property
    def filename(self) -> str:
        if self.position is None:
            return ""
        return self.position.start.filename

    def __str__(self) -> str:
        loc = str(self.position.start) if self.position else "<unknown>"
        return f"{loc}: [{self.rule_name}] {self.failure}"


@dataclass(frozen=True)
class DisabledInterval:
    """Inclusive line range in which a rule's failures are dropped.

    `end` is None when the interval runs to the end of the file.
    """

    rule_name: str
    start: int
    end: int | None = None

    def covers(self, line: int) -> bool:
        if line < self.start:
            return False
        return self.end is None or line <= self.end
