"""Built-in rule catalog."""

from __future__ import annotations

from ..config import Config, ConfigError
from ..lint import Rule
from .bare_except import BareExceptRule
from .docstring import ExportedDocstringRule
from .line_length import LineLengthLimitRule
from .match_default import EnforceMatchDefaultRule
from .redundant_conversion import RedundantConversionRule

RULES: dict[str, Rule] = {
    rule.name: rule
    for rule in (
        EnforceMatchDefaultRule(),
        LineLengthLimitRule(),
        RedundantConversionRule(),
        ExportedDocstringRule(),
        BareExceptRule(),
    )
}


def get_rule_ids() -> list[str]:
    return list(RULES)


def get_lint_rules(config: Config, catalog: dict[str, Rule] | None = None) -> list[Rule]:
    """Resolve the rules to run, in configuration order.

    With `enable_all_rules` every catalog rule runs, in catalog order.
    Disabled rules are left out; unknown rule names raise ConfigError.
    """
    catalog = RULES if catalog is None else catalog

    unknown = [name for name in config.rules if name not in catalog]
    if unknown:
        raise ConfigError(f"cannot find rule: {', '.join(unknown)}")

    names = list(catalog) if config.enable_all_rules else list(config.rules)
    return [catalog[name] for name in names if not config.rule_config(name).disabled]


__all__ = [
    "RULES",
    "BareExceptRule",
    "EnforceMatchDefaultRule",
    "ExportedDocstringRule",
    "LineLengthLimitRule",
    "RedundantConversionRule",
    "get_lint_rules",
    "get_rule_ids",
]
