from __future__ import annotations

import ast

from ..lint import Arguments, Failure, SourceUnit
from .common import header_position


class ExportedDocstringRule:
    """Public module-level functions and classes of importable files need docstrings."""

    name = "exported-docstring"
    description = (
        "Functions and classes that other packages can import should be documented. "
        "Test files and entry-point packages are not checked."
    )

    def apply(self, unit: SourceUnit, arguments: Arguments) -> list[Failure]:
        if not unit.is_importable():
            return []

        failures = []
        for node in unit.tree.body:
            if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
                continue
            if node.name.startswith("_") or ast.get_docstring(node) is not None:
                continue
            kind = "class" if isinstance(node, ast.ClassDef) else "function"
            failures.append(
                Failure(
                    failure=f"exported {kind} {node.name} should have a docstring",
                    confidence=1.0,
                    node=node,
                    position=header_position(unit, node),
                    category="comments",
                )
            )
        return failures
