"""Output formatters for the failure stream."""

from __future__ import annotations

from .base import Formatter, failure_to_dict, severity
from .checkstyle import CheckstyleFormatter
from .friendly import FriendlyFormatter
from .json_output import JSONFormatter
from .text import DefaultFormatter, PlainFormatter

FORMATTERS: dict[str, Formatter] = {
    f.name: f
    for f in (
        DefaultFormatter(),
        PlainFormatter(),
        JSONFormatter(),
        CheckstyleFormatter(),
        FriendlyFormatter(),
    )
}


def get_formatter(name: str) -> Formatter:
    try:
        return FORMATTERS[name]
    except KeyError:
        raise ValueError(f"unknown formatter {name!r}, expected one of {', '.join(FORMATTERS)}") from None


__all__ = [
    "FORMATTERS",
    "CheckstyleFormatter",
    "DefaultFormatter",
    "Formatter",
    "FriendlyFormatter",
    "JSONFormatter",
    "PlainFormatter",
    "failure_to_dict",
    "get_formatter",
    "severity",
]
