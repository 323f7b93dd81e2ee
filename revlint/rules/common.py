from __future__ import annotations

import ast

from ..lint import FailurePosition, SourceUnit


def header_position(unit: SourceUnit, node: ast.stmt) -> FailurePosition:
    """Point at the first line of a compound statement only.

    The full node spans its body, which would make suppression directives
    anywhere in the body apply to the statement itself.
    """
    pos = unit.to_position(node)
    return FailurePosition(start=pos, end=pos)
