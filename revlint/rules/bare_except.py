from __future__ import annotations

import ast

from ..lint import Arguments, Failure, SourceUnit
from .common import header_position


class BareExceptRule:
    name = "bare-except"
    description = "`except:` also catches SystemExit and KeyboardInterrupt; name the exception type."

    def apply(self, unit: SourceUnit, arguments: Arguments) -> list[Failure]:
        return [
            Failure(
                failure="bare except clause, specify the exception type",
                confidence=1.0,
                node=node,
                position=header_position(unit, node),
                category="errors",
            )
            for node in ast.walk(unit.tree)
            if isinstance(node, ast.ExceptHandler) and node.type is None
        ]
