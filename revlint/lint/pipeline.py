"""Rule application pipeline for a single source unit."""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from .directives import SPECIFY_DISABLE_REASON, disabled_intervals
from .errors import InternalFaultError
from .failure import Failure, FailurePosition
from .rule import Rule
from .source import SourceUnit

if TYPE_CHECKING:
    from ..config import Config

logger = logging.getLogger(__name__)


def lint_file(
    unit: SourceUnit,
    rules: Sequence[Rule],
    config: "Config",
    *,
    cancel: threading.Event | None = None,
) -> Iterator[Failure]:
    """Apply `rules` to `unit` in order and yield the surviving failures.

    Failures disabled by inline directives or below the configured confidence
    are dropped. A rule returning an internal failure aborts the file with
    InternalFaultError; failures yielded before that point stay delivered.
    Setting `cancel` stops the pass before the next rule.
    """
    must_specify_reason = SPECIFY_DISABLE_REASON in config.directives
    suppressions = disabled_intervals(
        unit,
        [rule.name for rule in rules],
        must_specify_disable_reason=must_specify_reason,
    )

    for advisory in suppressions.advisories:
        severity = config.directive_severity(SPECIFY_DISABLE_REASON)
        yield dataclasses.replace(advisory, severity=severity)

    for rule in rules:
        if cancel is not None and cancel.is_set():
            logger.debug("lint of %s cancelled before rule %s", unit.name, rule.name)
            return

        rule_config = config.rule_config(rule.name)
        if rule_config.must_exclude(unit.name):
            logger.debug("rule %s excluded for %s", rule.name, unit.name)
            continue

        failures = [
            _normalize(failure, rule, unit, config)
            for failure in rule.apply(unit, rule_config.arguments)
        ]
        for failure in failures:
            if suppressions.is_suppressed(failure):
                continue
            if failure.confidence < config.confidence:
                continue
            yield failure


def _normalize(failure: Failure, rule: Rule, unit: SourceUnit, config: "Config") -> Failure:
    if failure.internal:
        raise InternalFaultError(unit.name, rule.name, failure.failure)

    changes: dict = {}
    rule_name = failure.rule_name or rule.name
    if not failure.rule_name:
        changes["rule_name"] = rule_name
    if failure.position is None:
        if failure.node is not None:
            changes["position"] = unit.to_failure_position(failure.node)
        else:
            changes["position"] = FailurePosition.file_level(unit.name)
    if failure.severity is None:
        changes["severity"] = config.severity_for(rule_name)
    if not changes:
        return failure
    return dataclasses.replace(failure, **changes)
