from __future__ import annotations

import json
from collections.abc import Iterable

from ..config import Config
from ..lint import Failure
from .base import failure_to_dict


class JSONFormatter:
    """A JSON array with one object per failure."""

    name = "json"

    def format(self, failures: Iterable[Failure], config: Config) -> str:
        return json.dumps([failure_to_dict(f, config) for f in failures], indent=2)
