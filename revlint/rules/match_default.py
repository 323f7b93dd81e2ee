from __future__ import annotations

import ast

from ..lint import Arguments, Failure, SourceUnit
from .common import header_position

ALLOW_NO_DEFAULT = "allowNoDefault"


def _has_default(node: ast.Match) -> bool:
    if not node.cases:
        return False
    last = node.cases[-1]
    return isinstance(last.pattern, ast.MatchAs) and last.pattern.pattern is None and last.guard is None


class EnforceMatchDefaultRule:
    """Require `match` statements to end with a catch-all `case _:`."""

    name = "enforce-match-default"
    description = (
        "A `match` statement without an irrefutable last case silently ignores "
        "unmatched subjects. Pass the argument `allowNoDefault` to accept them."
    )

    def apply(self, unit: SourceUnit, arguments: Arguments) -> list[Failure]:
        if ALLOW_NO_DEFAULT in arguments:
            return []

        failures = []
        for node in ast.walk(unit.tree):
            if isinstance(node, ast.Match) and not _has_default(node):
                failures.append(
                    Failure(
                        failure="match must have a default case clause",
                        confidence=1.0,
                        node=node,
                        position=header_position(unit, node),
                        category="style",
                    )
                )
        return failures
