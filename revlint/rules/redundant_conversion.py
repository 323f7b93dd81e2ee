from __future__ import annotations

import ast

from ..lint import Arguments, Failure, SourceUnit

CONVERSIONS = frozenset({"bool", "int", "float", "complex", "str", "bytes"})


class RedundantConversionRule:
    """Flag conversions of a constant to the type it already has, e.g. `int(3)`."""

    name = "redundant-conversion"
    description = "Converting a literal to its own type has no effect: `int(3)` is `3`."

    def apply(self, unit: SourceUnit, arguments: Arguments) -> list[Failure]:
        failures = []
        for node in ast.walk(unit.tree):
            if not isinstance(node, ast.Call) or node.keywords or len(node.args) != 1:
                continue
            if not isinstance(node.func, ast.Name) or node.func.id not in CONVERSIONS:
                continue
            arg = node.args[0]
            if isinstance(arg, ast.Starred):
                continue
            if unit.is_untyped_const(arg) != node.func.id:
                continue
            # the builtin may be shadowed, hence less than full confidence
            failures.append(
                Failure(
                    failure=f"redundant conversion {unit.render(node)}: {unit.render(arg)} already has type {node.func.id}",
                    confidence=0.9,
                    node=node,
                    category="style",
                )
            )
        return failures
