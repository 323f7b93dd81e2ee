"""Tests for inline suppression directives."""

import pytest

from revlint.lint import SPECIFY_DISABLE_REASON, Comment, DisabledInterval, disabled_intervals, parse_directive
from revlint.lint.directives import Action, Scope

RULES = ["rule-a", "rule-b"]


def _comment(text: str, line: int = 1) -> Comment:
    return Comment(text=text, lineno=line, col_offset=0, end_lineno=line, end_col_offset=len(text))


def _intervals(unit, rules=RULES, **kwargs):
    return disabled_intervals(unit, rules, **kwargs).intervals


def test_parse_directive_fields():
    directive = parse_directive(_comment("# revive:disable-next-line:rule-a,rule-b legacy code"))
    assert directive is not None
    assert directive.action is Action.DISABLE
    assert directive.scope is Scope.NEXT_LINE
    assert directive.rule_names == ("rule-a", "rule-b")
    assert directive.reason == "legacy code"


@pytest.mark.parametrize(
    "text, scope, names, reason",
    [
        ("#revive:enable", Scope.PERSISTENT, (), ""),
        ("# revive:disable-line", Scope.LINE, (), ""),
        ("# revive:disable:", Scope.PERSISTENT, (), ""),
        ("# revive:disable:rule-a,,", Scope.PERSISTENT, ("rule-a",), ""),
        ("# revive:disable because reasons", Scope.PERSISTENT, (), "because reasons"),
        ("# revive:disable:rule-a   ", Scope.PERSISTENT, ("rule-a",), ""),
    ],
)
def test_parse_directive_variants(text, scope, names, reason):
    directive = parse_directive(_comment(text))
    assert directive is not None
    assert (directive.scope, directive.rule_names, directive.reason) == (scope, names, reason)


@pytest.mark.parametrize(
    "text",
    [
        "# revive:disabled:rule-a",
        "# revive:disable-lines:rule-a",
        "# revive disable",
        "# noqa",
        "## revive:enable-everything",
        "# revive:disable:rule-a\tlegacy code",
    ],
)
def test_malformed_directives_are_ignored(text):
    assert parse_directive(_comment(text)) is None


def test_persistent_disable_enable(make_unit):
    """A disable/enable pair suppresses the rule on every line in between."""
    unit = make_unit(
        """\
        x = 1
        # revive:disable:rule-a
        y = 2
        z = 3
        # revive:enable:rule-a
        w = 4
        """
    )
    assert _intervals(unit) == {"rule-a": [DisabledInterval("rule-a", 2, 5)]}


def test_unterminated_disable_runs_to_end_of_file(make_unit):
    unit = make_unit(
        """\
        x = 1
        # revive:disable:rule-b
        y = 2
        """
    )
    assert _intervals(unit) == {"rule-b": [DisabledInterval("rule-b", 2, None)]}


def test_disable_line(make_unit):
    unit = make_unit(
        """\
        x = 1
        y = 2  # revive:disable-line:rule-a
        z = 3
        """
    )
    assert _intervals(unit) == {"rule-a": [DisabledInterval("rule-a", 2, 2)]}


def test_disable_next_line(make_unit):
    unit = make_unit(
        """\
        # revive:disable-next-line:rule-a
        y = 2
        z = 3
        """
    )
    assert _intervals(unit) == {"rule-a": [DisabledInterval("rule-a", 2, 2)]}


def test_unnamed_directive_applies_to_every_configured_rule(make_unit):
    unit = make_unit(
        """\
        x = 1
        # revive:disable
        y = 2
        # revive:enable:rule-b
        """
    )
    assert _intervals(unit) == {
        "rule-a": [DisabledInterval("rule-a", 2, None)],
        "rule-b": [DisabledInterval("rule-b", 2, 4)],
    }


def test_repeated_disable_does_not_split_interval(make_unit):
    """Redundant toggles leave the observable intervals unchanged."""
    unit = make_unit(
        """\
        # revive:enable:rule-a
        # revive:disable:rule-a
        x = 1
        # revive:disable:rule-a
        y = 2
        # revive:enable:rule-a
        # revive:enable:rule-a
        z = 3
        """
    )
    assert _intervals(unit) == {"rule-a": [DisabledInterval("rule-a", 2, 6)]}


def test_enable_without_disable_has_no_effect(make_unit):
    unit = make_unit("# revive:enable:rule-a\nx = 1\n")
    assert "rule-a" not in _intervals(unit)


def test_disable_line_inside_disabled_region_keeps_region(make_unit):
    unit = make_unit(
        """\
        # revive:disable:rule-a
        x = 1
        y = 2  # revive:disable-line:rule-a
        z = 3
        """
    )
    assert _intervals(unit) == {"rule-a": [DisabledInterval("rule-a", 1, None)]}


def test_enable_line_inside_disabled_region(make_unit):
    """enable-line re-enables exactly its own line."""
    unit = make_unit(
        """\
        # revive:disable:rule-a
        x = 1
        y = 2  # revive:enable-line:rule-a
        z = 3
        # revive:enable:rule-a
        """
    )
    assert _intervals(unit) == {
        "rule-a": [
            DisabledInterval("rule-a", 1, 2),
            DisabledInterval("rule-a", 4, 5),
        ]
    }


def test_missing_reason_is_reported_and_not_applied(make_unit):
    unit = make_unit(
        """\
        x = 1
        # revive:disable:rule-a
        y = 2
        """
    )
    result = disabled_intervals(unit, RULES, must_specify_disable_reason=True)

    assert result.intervals == {}
    assert len(result.advisories) == 1
    advisory = result.advisories[0]
    assert advisory.rule_name == SPECIFY_DISABLE_REASON
    assert advisory.confidence == 1
    assert advisory.position.start.line == 2


def test_reason_satisfies_policy(make_unit):
    unit = make_unit("# revive:disable:rule-a generated code\nx = 1\n")
    result = disabled_intervals(unit, RULES, must_specify_disable_reason=True)

    assert result.advisories == []
    assert result.intervals == {"rule-a": [DisabledInterval("rule-a", 1, None)]}


def test_policy_covers_scoped_disables_but_not_enables(make_unit):
    unit = make_unit(
        """\
        x = 1  # revive:disable-line:rule-a
        # revive:enable:rule-a
        """
    )
    result = disabled_intervals(unit, RULES, must_specify_disable_reason=True)
    assert [a.position.start.line for a in result.advisories] == [1]


def test_interval_construction_is_idempotent(make_unit):
    unit = make_unit(
        """\
        # revive:disable:rule-a
        x = 1  # revive:disable-line:rule-b
        # revive:disable-next-line
        y = 2
        # revive:enable:rule-a
        """
    )
    assert disabled_intervals(unit, RULES) == disabled_intervals(unit, RULES)
