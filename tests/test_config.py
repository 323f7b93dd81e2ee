"""Tests for configuration loading."""

from pathlib import Path

import pytest

from revlint.config import Config, ConfigError, RuleConfig, default_config, load_config, parse_config
from revlint.rules import RULES, get_lint_rules


def test_load_config(tmp_path: Path):
    path = tmp_path / "revlint.toml"
    path.write_text(
        """
confidence = 0.5
severity = "error"
error_code = 3

[directive.specify-disable-reason]
severity = "warning"

[rule.line-length-limit]
arguments = [100]
exclude = ["*_test.py", "~generated/"]

[rule.bare-except]
disabled = true
""",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.confidence == 0.5
    assert config.severity == "error"
    assert config.error_code == 3
    assert config.warning_code == 0
    assert config.rules["line-length-limit"].arguments == [100]
    assert config.rules["bare-except"].disabled
    assert config.directive_severity("specify-disable-reason") == "warning"


def test_invalid_toml_is_a_config_error(tmp_path: Path):
    path = tmp_path / "revlint.toml"
    path.write_text("confidence = \n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "data",
    [
        {"confidence": 1.5},
        {"confidence": "high"},
        {"severity": "fatal"},
        {"rule": {"bare-except": {"severity": "loud"}}},
        {"rule": {"bare-except": {"exclude": ["~("]}}},
    ],
)
def test_invalid_values(data):
    with pytest.raises(ConfigError):
        parse_config(data)


def test_scalar_arguments_are_wrapped():
    config = parse_config({"rule": {"line-length-limit": {"arguments": 120}}})
    assert config.rule_config("line-length-limit").arguments == [120]


@pytest.mark.parametrize(
    "filename, excluded",
    [
        ("pkg/api_test.py", True),
        ("pkg/generated/models.py", True),
        ("pkg/api.py", False),
    ],
)
def test_exclude_patterns(filename, excluded):
    rc = RuleConfig(exclude=["*_test.py", "~generated/"])
    assert rc.must_exclude(filename) is excluded


def test_severity_resolution():
    config = Config(severity="warning", rules={"bare-except": RuleConfig(severity="error")})
    assert config.severity_for("bare-except") == "error"
    assert config.severity_for("line-length-limit") == "warning"
    assert config.directive_severity("specify-disable-reason") == "warning"


def test_default_config_enables_every_rule():
    rules = get_lint_rules(default_config())
    assert [r.name for r in rules] == list(RULES)


def test_rule_selection_follows_config():
    config = parse_config({"rule": {"bare-except": {}, "line-length-limit": {}, "exported-docstring": {"disabled": True}}})
    assert [r.name for r in get_lint_rules(config)] == ["bare-except", "line-length-limit"]


def test_enable_all_rules():
    config = parse_config({"enable_all_rules": True, "rule": {"bare-except": {"disabled": True}}})
    names = [r.name for r in get_lint_rules(config)]
    assert "bare-except" not in names
    assert len(names) == len(RULES) - 1


def test_unknown_rule_is_rejected():
    with pytest.raises(ConfigError, match="cannot find rule: no-such-rule"):
        get_lint_rules(parse_config({"rule": {"no-such-rule": {}}}))
