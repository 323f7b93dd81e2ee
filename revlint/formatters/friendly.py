"""Human-friendly output with a per-rule summary."""

from __future__ import annotations

import io
from collections import Counter, defaultdict
from collections.abc import Iterable

from rich.console import Console
from rich.table import Table

from ..config import Config
from ..lint import SEVERITY_ERROR, Failure
from .base import severity


class FriendlyFormatter:
    name = "friendly"

    def __init__(self, width: int = 120):
        self.width = width

    def format(self, failures: Iterable[Failure], config: Config) -> str:
        buf = io.StringIO()
        console = Console(file=buf, width=self.width, force_terminal=False, no_color=True)

        counts: dict[str, Counter] = defaultdict(Counter)
        for failure in failures:
            level = severity(config, failure)
            counts[level][failure.rule_name] += 1
            prefix = "ERROR" if level == SEVERITY_ERROR else "WARN"
            loc = str(failure.position.start) if failure.position else failure.filename
            console.print(f"{prefix}: {failure.failure}", markup=False, highlight=False)
            console.print(f"  {loc} ({failure.rule_name})", markup=False, highlight=False)

        errors = sum(counts["error"].values())
        warnings = sum(counts["warning"].values())
        if errors == 0 and warnings == 0:
            return ""

        console.print()
        for level, title in (("error", "Errors"), ("warning", "Warnings")):
            if not counts[level]:
                continue
            table = Table(title=title, show_header=True)
            table.add_column("Count", justify="right")
            table.add_column("Rule", style="cyan")
            for rule_name, n in sorted(counts[level].items(), key=lambda kv: (-kv[1], kv[0])):
                table.add_row(str(n), rule_name)
            console.print(table)

        console.print(f"{errors + warnings} problems ({errors} errors, {warnings} warnings)")
        return buf.getvalue().rstrip("\n")
