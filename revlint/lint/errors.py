"""Errors raised by the lint engine.

Ordinary diagnostics never travel as exceptions; only the conditions below
abort work.
"""

from __future__ import annotations


class LintError(Exception):
    """Base class for errors that abort a lint session."""


class ParseError(LintError):
    """A source file could not be parsed into a syntax tree."""

    def __init__(self, filename: str, line: int | None, message: str):
        self.filename = filename
        self.line = line
        self.message = message
        loc = f"{filename}:{line}" if line else filename
        super().__init__(f"{loc}: {message}")


class InternalFaultError(LintError):
    """A rule reported an engine-level fault while linting a file."""

    def __init__(self, filename: str, rule_name: str, message: str):
        self.filename = filename
        self.rule_name = rule_name
        self.message = message
        super().__init__(f"{filename}: rule {rule_name!r} failed: {message}")


class RenderError(RuntimeError):
    """A syntax tree node could not be rendered back to source text."""


class SourceReadError(LintError):
    """A source file could not be read from disk."""

    def __init__(self, filename: str, message: str):
        self.filename = filename
        self.message = message
        super().__init__(f"{filename}: {message}")
