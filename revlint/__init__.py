"""revlint - rule-based Python linter with inline suppression directives."""

__version__ = "0.1.0"
