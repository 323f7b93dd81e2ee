"""Lint command implementation."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterator, Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..config import Config, ConfigError, default_config, load_config
from ..formatters import get_formatter
from ..lint import SEVERITY_ERROR, Failure, Linter, LintError
from ..rules import RULES, get_lint_rules, get_rule_ids

SKIP_DIRS = {".git", ".hg", ".tox", ".venv", "venv", "__pycache__", "node_modules"}


def collect_packages(paths: Sequence[Path], exclude: Sequence[str] = ()) -> list[list[Path]]:
    """Find Python files under `paths` and group them by directory.

    Every directory is one package.
    """
    groups: dict[Path, list[Path]] = {}
    for path in paths:
        if path.is_dir():
            files = sorted(p for p in path.rglob("*.py") if p.is_file())
        else:
            files = [path]
        for file in files:
            if SKIP_DIRS.intersection(file.parts):
                continue
            posix = file.as_posix()
            if any(fnmatch.fnmatch(posix, pat) or file.match(pat) for pat in exclude):
                continue
            group = groups.setdefault(file.parent, [])
            if file not in group:
                group.append(file)
    return [groups[d] for d in sorted(groups)]


def exit_code_for(failures: Sequence[Failure], config: Config) -> int:
    if any(f.severity == SEVERITY_ERROR for f in failures):
        return config.error_code
    if failures:
        return config.warning_code
    return 0


def run_lint(
    paths: Sequence[Path],
    *,
    config_path: Path | None = None,
    formatter_name: str = "default",
    confidence: float | None = None,
    max_workers: int | None = None,
    exclude: Sequence[str] = (),
) -> int:
    """Lint Python files and print the formatted failures.

    Returns:
        Exit code: the configured error/warning code depending on what was
        reported, 0 when nothing was, 2 when linting could not complete.
    """
    console = Console(stderr=True)

    try:
        config = load_config(config_path) if config_path else default_config()
        if confidence is not None:
            config.confidence = confidence
        rules = get_lint_rules(config)
        formatter = get_formatter(formatter_name)
    except (ConfigError, ValueError) as exc:
        console.print(f"✗ {exc}", style="bold red", markup=False)
        return 2

    packages = collect_packages(paths, exclude)
    n_files = sum(len(p) for p in packages)
    console.print(f"Linting {n_files} files with {len(rules)} rules...", style="dim")

    linter = Linter(rules, config, max_workers=max_workers)
    reported: list[Failure] = []

    def tracked() -> Iterator[Failure]:
        for failure in linter.lint(packages):
            reported.append(failure)
            yield failure

    try:
        output = formatter.format(tracked(), config)
    except LintError as exc:
        console.print(f"✗ {exc}", style="bold red", markup=False)
        return 2

    if output:
        print(output)
    return exit_code_for(reported, config)


def run_rules(rule_id: str | None = None) -> int:
    """List the rule catalog, or explain one rule.

    Returns:
        Exit code (0 = success, 1 = rule not found)
    """
    console = Console()

    if rule_id is None:
        table = Table(title="Rules")
        table.add_column("Rule", style="cyan")
        table.add_column("Description")
        for rid in get_rule_ids():
            table.add_row(rid, getattr(RULES[rid], "description", ""))
        console.print(table)
        return 0

    rule_id = rule_id.lower().strip()
    rule = RULES.get(rule_id)
    if rule is None:
        console.print(f"Unknown rule: {rule_id}", style="bold red")
        console.print()
        console.print("Known rules:", style="bold")
        for rid in sorted(get_rule_ids()):
            console.print(f"  - {rid}")
        return 1

    from rich.markdown import Markdown

    console.print(Markdown(f"# {rule.name}\n\n{getattr(rule, 'description', '')}"))
    return 0
