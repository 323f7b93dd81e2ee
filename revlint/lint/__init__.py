"""Lint engine: source model, suppression directives and rule pipeline."""

from .directives import SPECIFY_DISABLE_REASON, Directive, Suppressions, disabled_intervals, parse_directive
from .errors import InternalFaultError, LintError, ParseError, RenderError, SourceReadError
from .failure import (
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    DisabledInterval,
    Failure,
    FailurePosition,
    Position,
    Severity,
)
from .linter import Linter
from .package import Package
from .pipeline import lint_file
from .rule import Arguments, Rule
from .source import Comment, SourceUnit

__all__ = [
    "SPECIFY_DISABLE_REASON",
    "SEVERITY_ERROR",
    "SEVERITY_WARNING",
    "Arguments",
    "Comment",
    "Directive",
    "DisabledInterval",
    "Failure",
    "FailurePosition",
    "InternalFaultError",
    "LintError",
    "Linter",
    "Package",
    "ParseError",
    "Position",
    "RenderError",
    "Rule",
    "Severity",
    "SourceReadError",
    "SourceUnit",
    "Suppressions",
    "disabled_intervals",
    "lint_file",
    "parse_directive",
]
