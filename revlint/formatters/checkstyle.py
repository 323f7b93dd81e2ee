"""Checkstyle XML output, understood by most CI dashboards."""

from __future__ import annotations

from collections.abc import Iterable
from xml.sax.saxutils import escape

from ..config import Config
from ..lint import Failure
from .base import severity

_XML_ENTITIES = {
    '"': "&#34;",
    "'": "&#39;",
    "\t": "&#x9;",
    "\n": "&#xA;",
    "\r": "&#xD;",
}


def _escape(text: str) -> str:
    return escape(text, _XML_ENTITIES)


class CheckstyleFormatter:
    name = "checkstyle"

    def format(self, failures: Iterable[Failure], config: Config) -> str:
        by_file: dict[str, list[Failure]] = {}
        for failure in failures:
            by_file.setdefault(failure.filename, []).append(failure)

        lines = ["<?xml version='1.0' encoding='UTF-8'?>", '<checkstyle version="5.0">']
        for filename in sorted(by_file):
            lines.append(f'    <file name="{_escape(filename)}">')
            for failure in by_file[filename]:
                start = failure.position.start if failure.position else None
                lines.append(
                    "      <error"
                    f' line="{start.line if start else 0}"'
                    f' column="{start.column if start else 0}"'
                    f' message="{_escape(failure.failure)} (confidence {failure.confidence:g})"'
                    f' severity="{severity(config, failure)}"'
                    f' source="revive/{_escape(failure.rule_name)}"/>'
                )
            lines.append("    </file>")
        lines.append("</checkstyle>")
        return "\n".join(lines)
