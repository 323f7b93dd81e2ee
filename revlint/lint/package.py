"""Package abstraction: a group of source units sharing one context."""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .errors import RenderError, SourceReadError
from .failure import FailurePosition, Position
from .source import Comment, SourceUnit

logger = logging.getLogger(__name__)

ENTRY_POINT_FILE = "__main__.py"


class Package:
    """A set of source units linted together.

    Position resolution and rendering go through the package so that every
    unit of the package shares one context. The package is read-only once
    built; concurrent file passes may use it freely.
    """

    def __init__(self, name: str = "", *, is_main: bool = False):
        self.name = name
        self._is_main = is_main
        self.files: dict[str, SourceUnit] = {}

    @classmethod
    def from_sources(
        cls,
        sources: Mapping[str, bytes | str],
        *,
        name: str = "",
        is_main: bool | None = None,
    ) -> "Package":
        """Build a package from in-memory file contents.

        Raises ParseError if any file cannot be parsed.
        """
        if is_main is None:
            is_main = any(Path(fn).name == ENTRY_POINT_FILE for fn in sources)
        pkg = cls(name, is_main=is_main)
        for filename, content in sources.items():
            if isinstance(content, str):
                content = content.encode("utf-8")
            pkg.files[filename] = SourceUnit(filename, content, pkg)
        return pkg

    @classmethod
    def from_paths(cls, paths: Iterable[Path], *, name: str | None = None) -> "Package":
        """Read and parse a group of files into one package.

        Raises SourceReadError if a file cannot be read, ParseError if it
        cannot be parsed.
        """
        paths = list(paths)
        if name is None:
            name = paths[0].parent.name if paths else ""
        logger.debug("loading package %r (%d files)", name, len(paths))
        sources: dict[str, bytes] = {}
        for p in paths:
            try:
                sources[str(p)] = p.read_bytes()
            except OSError as exc:
                raise SourceReadError(str(p), exc.strerror or str(exc)) from exc
        return cls.from_sources(sources, name=name)

    def is_main(self) -> bool:
        """True for entry-point packages, whose symbols cannot be imported."""
        return self._is_main

    def position(self, filename: str, node: Any, *, end: bool = False) -> Position:
        """Map a node (or comment) location to a 1-based line/column."""
        line = getattr(node, "lineno", None)
        if line is None:
            return Position(filename=filename, line=0, column=0)
        col = getattr(node, "col_offset", 0) or 0
        if end:
            line = getattr(node, "end_lineno", None) or line
            end_col = getattr(node, "end_col_offset", None)
            if end_col is not None:
                col = end_col
        return Position(filename=filename, line=line, column=col + 1)

    def failure_position(self, filename: str, node: Any) -> FailurePosition:
        return FailurePosition(
            start=self.position(filename, node),
            end=self.position(filename, node, end=True),
        )

    def render(self, node: Any) -> str:
        """Render a node back to source text.

        Raises RenderError when the node is malformed; that is a bug in the
        caller, not something to report as a finding.
        """
        if isinstance(node, Comment):
            return node.text
        if not isinstance(node, ast.AST):
            raise RenderError(f"cannot render {type(node).__name__} object")
        try:
            return ast.unparse(node)
        except (AttributeError, TypeError, ValueError, RecursionError) as exc:
            raise RenderError(f"cannot render {type(node).__name__} node: {exc}") from exc

    def __repr__(self) -> str:
        return f"Package(name={self.name!r}, files={len(self.files)}, is_main={self._is_main})"
