from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from .failure import Failure
    from .source import SourceUnit

Arguments = Sequence[Any]


@runtime_checkable
class Rule(Protocol):
    """A lint rule.

    `apply` inspects a unit and returns its findings without mutating the
    unit. Engine-level faults are reported with `Failure.internal_fault`,
    never by raising.
    """

    name: str

    def apply(self, unit: "SourceUnit", arguments: Arguments) -> list["Failure"]: ...
