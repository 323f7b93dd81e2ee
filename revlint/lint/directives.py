"""Inline suppression directives.

A directive is a comment of the form

    # revive:disable-next-line:rule-a,rule-b some reason

Supported actions are `enable` and `disable`, optionally scoped to the
comment's own line (`-line`) or the following one (`-next-line`). Without a
rule list the directive applies to every configured rule. Comments that do
not match the grammar are ignored.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from .failure import DisabledInterval, Failure
from .source import Comment, SourceUnit

SPECIFY_DISABLE_REASON = "specify-disable-reason"
MISSING_REASON_MESSAGE = "reason of lint disabling not found"

DIRECTIVE_PATTERN = re.compile(
    r"^#\s*revive:(enable|disable)(?:-(line|next-line))?(?::(\S*))?\s*(?: (.+))?$"
)


class Action(str, Enum):
    ENABLE = "enable"
    DISABLE = "disable"


class Scope(str, Enum):
    PERSISTENT = ""
    LINE = "line"
    NEXT_LINE = "next-line"


@dataclass(frozen=True)
class Directive:
    action: Action
    scope: Scope
    rule_names: tuple[str, ...]
    reason: str
    comment: Comment

    @property
    def disables(self) -> bool:
        return self.action is Action.DISABLE

    @property
    def target_line(self) -> int:
        if self.scope is Scope.NEXT_LINE:
            return self.comment.lineno + 1
        return self.comment.lineno


def parse_directive(comment: Comment) -> Directive | None:
    """Parse a comment into a directive, or None if it is not one."""
    match = DIRECTIVE_PATTERN.match(comment.text)
    if match is None:
        return None
    action, modifier, names, reason = match.groups()
    rule_names = tuple(n.strip() for n in (names or "").split(",") if n.strip())
    return Directive(
        action=Action(action),
        scope=Scope(modifier or ""),
        rule_names=rule_names,
        reason=(reason or "").strip(),
        comment=comment,
    )


@dataclass(frozen=True)
class _Toggle:
    disabled: bool
    line: int


@dataclass
class Suppressions:
    """Result of scanning one unit's directives."""

    intervals: dict[str, list[DisabledInterval]] = field(default_factory=dict)
    advisories: list[Failure] = field(default_factory=list)

    def is_suppressed(self, failure: Failure) -> bool:
        """True if the failure's start or end line lies in a disabled interval."""
        intervals = self.intervals.get(failure.rule_name)
        if not intervals or failure.position is None:
            return False
        start = failure.position.start.line
        end = failure.position.end.line
        return any(iv.covers(start) or iv.covers(end) for iv in intervals)


def disabled_intervals(
    unit: SourceUnit,
    rule_names: Sequence[str],
    *,
    must_specify_disable_reason: bool = False,
) -> Suppressions:
    """Compute, per rule name, the line intervals in which it is disabled.

    `rule_names` are the configured rules, used for directives that name no
    rule. With `must_specify_disable_reason`, disable directives without a
    reason are reported as advisories and not applied.
    """
    toggles: dict[str, list[_Toggle]] = {}
    advisories: list[Failure] = []

    def is_disabled(name: str) -> bool:
        events = toggles.get(name)
        return bool(events) and events[-1].disabled

    def push(name: str, *events: _Toggle) -> None:
        toggles.setdefault(name, []).extend(events)

    for comment in unit.comments:
        directive = parse_directive(comment)
        if directive is None:
            continue

        if must_specify_disable_reason and directive.disables and not directive.reason:
            advisories.append(
                Failure(
                    failure=MISSING_REASON_MESSAGE,
                    confidence=1.0,
                    rule_name=SPECIFY_DISABLE_REASON,
                    node=comment,
                    position=unit.to_failure_position(comment),
                )
            )
            continue

        names = directive.rule_names or tuple(rule_names)
        line = directive.target_line
        for name in names:
            if directive.disables == is_disabled(name):
                # already in the requested state
                continue
            if directive.scope is Scope.PERSISTENT:
                push(name, _Toggle(directive.disables, line))
            elif directive.disables:
                push(name, _Toggle(True, line), _Toggle(False, line))
            else:
                push(name, _Toggle(False, line - 1), _Toggle(True, line + 1))

    return Suppressions(intervals=_to_intervals(toggles), advisories=advisories)


def _to_intervals(toggles: dict[str, list[_Toggle]]) -> dict[str, list[DisabledInterval]]:
    # Events alternate disable/enable starting with a disable.
    result: dict[str, list[DisabledInterval]] = {}
    for name, events in toggles.items():
        intervals: list[DisabledInterval] = []
        for i in range(0, len(events), 2):
            start = events[i].line
            end = events[i + 1].line if i + 1 < len(events) else None
            if end is not None and end < start:
                continue
            intervals.append(DisabledInterval(rule_name=name, start=start, end=end))
        result[name] = intervals
    return result
