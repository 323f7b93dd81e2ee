"""CLI entrypoint for revlint."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .formatters import FORMATTERS


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=verbose)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="revlint")
@click.option("--verbose", is_flag=True, help="Log engine activity to stderr")
def cli(verbose: bool) -> None:
    """revlint - Python linter with inline suppression directives.

    Failures can be silenced in the source with comments such as
    `# revive:disable-next-line:bare-except legacy handler`.
    """
    _configure_logging(verbose)


@cli.command()
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="TOML configuration file (default: every built-in rule)",
)
@click.option(
    "--formatter",
    "formatter_name",
    type=click.Choice(list(FORMATTERS)),
    default="default",
    help="Output format",
)
@click.option(
    "--confidence",
    type=click.FloatRange(0.0, 1.0),
    default=None,
    help="Drop failures below this confidence (overrides the config file)",
)
@click.option(
    "--max-workers",
    type=click.IntRange(min=1),
    default=None,
    help="Number of files linted in parallel",
)
@click.option(
    "--exclude",
    multiple=True,
    metavar="GLOB",
    help="Skip files matching this pattern (repeatable)",
)
def lint(
    paths: tuple[Path, ...],
    config_path: Path | None,
    formatter_name: str,
    confidence: float | None,
    max_workers: int | None,
    exclude: tuple[str, ...],
) -> None:
    """Lint Python files or directories (default: current directory)."""
    from .commands.lint import run_lint

    exit_code = run_lint(
        list(paths) or [Path(".")],
        config_path=config_path,
        formatter_name=formatter_name,
        confidence=confidence,
        max_workers=max_workers,
        exclude=exclude,
    )
    sys.exit(exit_code)


@cli.command()
@click.argument("rule_id", required=False)
def rules(rule_id: str | None) -> None:
    """List available rules, or explain RULE_ID."""
    from .commands.lint import run_rules

    sys.exit(run_rules(rule_id))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
