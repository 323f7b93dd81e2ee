"""Lint configuration.

Configuration lives in a TOML file:

    confidence = 0.8
    severity = "warning"

    [directive.specify-disable-reason]

    [rule.line-length-limit]
    arguments = [100]
    exclude = ["*_test.py"]

Evaluation is code, the file is only data.
"""

from __future__ import annotations

import fnmatch
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any

from .lint.failure import SEVERITY_ERROR, SEVERITY_WARNING, Severity

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.8
SEVERITIES = (SEVERITY_WARNING, SEVERITY_ERROR)


class ConfigError(ValueError):
    """Invalid configuration."""


@dataclass
class RuleConfig:
    """Settings for one rule. A rule without an entry runs with defaults."""

    arguments: list[Any] = field(default_factory=list)
    severity: Severity | None = None
    disabled: bool = False
    exclude: list[str] = field(default_factory=list)
    _regexps: list[re.Pattern] = field(default_factory=list, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._regexps = []
        for pattern in self.exclude:
            if pattern.startswith("~"):
                try:
                    self._regexps.append(re.compile(pattern[1:]))
                except re.error as exc:
                    raise ConfigError(f"invalid exclude pattern {pattern!r}: {exc}") from exc

    def must_exclude(self, filename: str) -> bool:
        """True if `filename` matches one of the exclude patterns.

        Patterns are globs, or regular expressions when prefixed with `~`.
        """
        if not self.exclude:
            return False
        path = PurePath(filename).as_posix()
        if any(rx.search(path) for rx in self._regexps):
            return True
        for pattern in self.exclude:
            if pattern.startswith("~"):
                continue
            if fnmatch.fnmatch(path, pattern) or PurePath(path).match(pattern):
                return True
        return False


@dataclass
class DirectiveConfig:
    severity: Severity | None = None


@dataclass
class Config:
    confidence: float = DEFAULT_CONFIDENCE
    severity: Severity = SEVERITY_WARNING
    enable_all_rules: bool = False
    error_code: int = 1
    warning_code: int = 0
    rules: dict[str, RuleConfig] = field(default_factory=dict)
    directives: dict[str, DirectiveConfig] = field(default_factory=dict)

    def rule_config(self, name: str) -> RuleConfig:
        return self.rules.get(name) or RuleConfig()

    def severity_for(self, rule_name: str) -> Severity:
        rc = self.rules.get(rule_name)
        if rc is not None and rc.severity:
            return rc.severity
        return self.severity

    def directive_severity(self, name: str) -> Severity:
        dc = self.directives.get(name)
        if dc is not None and dc.severity:
            return dc.severity
        return self.severity


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _severity(value: Any, where: str) -> Severity | None:
    if value is None:
        return None
    sev = str(value).strip().lower()
    if sev not in SEVERITIES:
        raise ConfigError(f"{where}: severity must be one of {', '.join(SEVERITIES)}, got {value!r}")
    return sev  # type: ignore[return-value]


def parse_config(data: dict[str, Any]) -> Config:
    """Build a Config from already decoded TOML data."""
    try:
        confidence = float(data.get("confidence", DEFAULT_CONFIDENCE))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"confidence must be a number: {exc}") from exc
    if not 0.0 <= confidence <= 1.0:
        raise ConfigError(f"confidence must be within [0, 1], got {confidence}")

    severity = _severity(data.get("severity"), "config") or SEVERITY_WARNING

    rules: dict[str, RuleConfig] = {}
    for name, raw in _coerce_dict(data.get("rule")).items():
        raw = _coerce_dict(raw)
        arguments = raw.get("arguments", [])
        if not isinstance(arguments, list):
            arguments = [arguments]
        exclude = raw.get("exclude", [])
        if isinstance(exclude, str):
            exclude = [exclude]
        rules[name] = RuleConfig(
            arguments=arguments,
            severity=_severity(raw.get("severity"), f"rule {name}"),
            disabled=bool(raw.get("disabled", False)),
            exclude=[str(p) for p in exclude],
        )

    directives: dict[str, DirectiveConfig] = {}
    for name, raw in _coerce_dict(data.get("directive")).items():
        raw = _coerce_dict(raw)
        directives[name] = DirectiveConfig(severity=_severity(raw.get("severity"), f"directive {name}"))

    return Config(
        confidence=confidence,
        severity=severity,
        enable_all_rules=bool(data.get("enable_all_rules", False)),
        error_code=int(data.get("error_code", 1)),
        warning_code=int(data.get("warning_code", 0)),
        rules=rules,
        directives=directives,
    )


def load_config(path: Path) -> Config:
    """Load configuration from a TOML file."""
    import tomllib

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    logger.debug("loaded configuration from %s", path)
    return parse_config(data)


def default_config() -> Config:
    """Configuration used when no file is given: every built-in rule enabled."""
    from .rules import RULES

    return Config(rules={name: RuleConfig() for name in RULES})
