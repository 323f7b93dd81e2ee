"""Pytest configuration and fixtures."""

import textwrap
from collections.abc import Callable

import pytest

from revlint.config import Config
from revlint.lint import Failure, FailurePosition, Package, Position, SourceUnit


class LineRule:
    """Test rule reporting one failure on each of the given lines."""

    def __init__(self, name: str, lines: list[int], *, confidence: float = 1.0, rule_name: str = ""):
        self.name = name
        self.lines = lines
        self.confidence = confidence
        self.rule_name = rule_name
        self.calls = 0

    def apply(self, unit: SourceUnit, arguments) -> list[Failure]:
        self.calls += 1
        return [
            Failure(
                failure=f"{self.name} at line {line}",
                confidence=self.confidence,
                rule_name=self.rule_name,
                position=FailurePosition(
                    start=Position(unit.name, line, 1),
                    end=Position(unit.name, line, 1),
                ),
            )
            for line in self.lines
        ]


class FaultRule:
    """Test rule reporting an internal fault, optionally for one file only."""

    def __init__(self, name: str = "faulty", *, only: str | None = None):
        self.name = name
        self.only = only
        self.calls = 0

    def apply(self, unit: SourceUnit, arguments) -> list[Failure]:
        self.calls += 1
        if self.only is not None and unit.name != self.only:
            return []
        return [Failure.internal_fault("rule state corrupted")]


@pytest.fixture
def make_unit() -> Callable[..., SourceUnit]:
    """Build a single-file package and return its unit."""

    def _make(source: str, name: str = "pkg/sample.py", *, is_main: bool | None = None) -> SourceUnit:
        pkg = Package.from_sources({name: textwrap.dedent(source)}, name="pkg", is_main=is_main)
        return pkg.files[name]

    return _make


@pytest.fixture
def config() -> Config:
    """Session configuration that keeps every failure."""
    return Config(confidence=0.0)


@pytest.fixture
def line_rule() -> type[LineRule]:
    return LineRule


@pytest.fixture
def fault_rule() -> type[FaultRule]:
    return FaultRule
