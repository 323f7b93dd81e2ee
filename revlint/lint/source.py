"""Source unit abstraction: one parsed Python file."""

from __future__ import annotations

import ast
import io
import re
import tokenize
from dataclasses import dataclass
from fnmatch import fnmatch
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

from .errors import ParseError
from .failure import FailurePosition, Position

if TYPE_CHECKING:
    from .package import Package

TEST_FILE_PATTERNS = ("test_*.py", "*_test.py")

# Line terminators recognized by the tokenizer; str.splitlines knows more.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

# Default type of a constant expression evaluated outside any context.
_DEFAULT_TYPES: dict[type, str] = {
    bool: "bool",
    int: "int",
    float: "float",
    complex: "complex",
    str: "str",
    bytes: "bytes",
}


@dataclass(frozen=True)
class Comment:
    """A `#` comment.

    Location attributes mirror the ones `ast` nodes carry, so comments can be
    used wherever a node is expected for position resolution.
    """

    text: str
    lineno: int
    col_offset: int
    end_lineno: int
    end_col_offset: int


def _scan_comments(filename: str, content: bytes) -> tuple[Comment, ...]:
    comments: list[Comment] = []
    try:
        for tok in tokenize.tokenize(io.BytesIO(content).readline):
            if tok.type != tokenize.COMMENT:
                continue
            comments.append(
                Comment(
                    text=tok.string,
                    lineno=tok.start[0],
                    col_offset=tok.start[1],
                    end_lineno=tok.end[0],
                    end_col_offset=tok.end[1],
                )
            )
    except (tokenize.TokenError, SyntaxError) as exc:
        raise ParseError(filename, None, str(exc)) from exc
    return tuple(comments)


class SourceUnit:
    """A single source file of a package.

    The content is parsed once here; a file that does not parse cannot be
    constructed.
    """

    def __init__(self, name: str, content: bytes, package: "Package"):
        self.name = name
        self.package = package
        self._content = bytes(content)
        try:
            self.tree: ast.Module = ast.parse(self._content, filename=name)
        except SyntaxError as exc:
            raise ParseError(name, exc.lineno, exc.msg) from exc
        except ValueError as exc:
            # source containing null bytes
            raise ParseError(name, None, str(exc)) from exc
        self.comments = _scan_comments(name, self._content)
        encoding, _ = tokenize.detect_encoding(io.BytesIO(self._content).readline)
        self.text = self._content.decode(encoding, errors="replace")

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def lines(self) -> list[str]:
        """Source lines, numbered like `ast` and `tokenize` number them."""
        lines = _LINE_BREAK.split(self.text)
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def is_test(self) -> bool:
        """True if the file holds tests (pytest naming conventions)."""
        base = PurePath(self.name).name
        return any(fnmatch(base, pattern) for pattern in TEST_FILE_PATTERNS)

    def is_importable(self) -> bool:
        """True if symbols defined here can be imported by other packages.

        Test files and entry-point packages are never imported.
        """
        if self.is_test():
            return False
        if self.package.is_main():
            return False
        return True

    def to_position(self, node: Any, *, end: bool = False) -> Position:
        return self.package.position(self.name, node, end=end)

    def to_failure_position(self, node: Any) -> FailurePosition:
        return self.package.failure_position(self.name, node)

    def render(self, node: Any) -> str:
        return self.package.render(node)

    def is_untyped_const(self, expr: ast.expr) -> str | None:
        """Return the default type name of `expr` if it is a bare constant.

        The expression is rendered and re-evaluated on its own, so the
        surrounding code cannot influence the result.
        """
        text = self.render(expr)
        try:
            value = ast.literal_eval(text)
        except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError):
            return None
        return _DEFAULT_TYPES.get(type(value))

    def __repr__(self) -> str:
        return f"SourceUnit({self.name!r})"
