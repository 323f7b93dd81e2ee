from __future__ import annotations

from ..lint import Arguments, Failure, FailurePosition, Position, SourceUnit

DEFAULT_LINE_LENGTH = 80


class LineLengthLimitRule:
    """Flag lines longer than a configured number of characters."""

    name = "line-length-limit"
    description = f"Lines must not exceed the given length (argument 1, default {DEFAULT_LINE_LENGTH})."

    def apply(self, unit: SourceUnit, arguments: Arguments) -> list[Failure]:
        limit = DEFAULT_LINE_LENGTH
        if arguments:
            limit = arguments[0]
            if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
                return [
                    Failure.internal_fault(
                        f"invalid value passed as argument number to the {self.name} rule: {limit!r}"
                    )
                ]

        failures = []
        for lineno, line in enumerate(unit.lines, start=1):
            length = len(line)
            if length <= limit:
                continue
            failures.append(
                Failure(
                    failure=f"line is {length} characters, out of limit {limit}",
                    confidence=1.0,
                    position=FailurePosition(
                        start=Position(filename=unit.name, line=lineno, column=1),
                        end=Position(filename=unit.name, line=lineno, column=length),
                    ),
                    category="code-style",
                )
            )
        return failures
