"""Line-oriented text formatters."""

from __future__ import annotations

from collections.abc import Iterable

from ..config import Config
from ..lint import Failure


def _location(failure: Failure) -> str:
    if failure.position is None:
        return failure.filename
    return str(failure.position.start)


class DefaultFormatter:
    """`path:line:column: message`, one failure per line."""

    name = "default"

    def format(self, failures: Iterable[Failure], config: Config) -> str:
        return "\n".join(f"{_location(f)}: {f.failure}" for f in failures)


class PlainFormatter:
    """Like `default`, with the rule name."""

    name = "plain"

    def format(self, failures: Iterable[Failure], config: Config) -> str:
        return "\n".join(f"{_location(f)}: [{f.rule_name}] {f.failure}" for f in failures)
