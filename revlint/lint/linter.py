"""Lint session: runs the pipeline over many files concurrently."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor, wait
from pathlib import Path
from queue import Queue
from typing import TYPE_CHECKING

from .failure import Failure
from .package import Package
from .pipeline import lint_file
from .rule import Rule
from .source import SourceUnit

if TYPE_CHECKING:
    from ..config import Config

logger = logging.getLogger(__name__)

# Marks the end of the failure stream.
_DONE = object()


class Linter:
    """Fans the rule pipeline out over source units and merges the results.

    Failures of one file keep rule order; there is no ordering across files.
    A slow consumer blocks the workers once `buffer_size` failures are
    pending.
    """

    def __init__(
        self,
        rules: Sequence[Rule],
        config: "Config",
        *,
        max_workers: int | None = None,
        buffer_size: int = 64,
    ):
        self.rules = list(rules)
        self.config = config
        self.max_workers = max_workers
        self.buffer_size = buffer_size

    def load_packages(self, packages: Iterable[Sequence[Path]]) -> list[Package]:
        """Parse each group of paths into a package.

        The first ParseError is raised before any rule runs.
        """
        groups = [list(paths) for paths in packages if paths]
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return list(pool.map(Package.from_paths, groups))

    def lint(self, packages: Iterable[Sequence[Path]]) -> Iterator[Failure]:
        """Lint groups of files, one group per package."""
        loaded = self.load_packages(packages)
        units = [unit for pkg in loaded for unit in pkg.files.values()]
        yield from self.lint_units(units)

    def lint_units(self, units: Iterable[SourceUnit]) -> Iterator[Failure]:
        """Lint already parsed units.

        If a file pass fails, the other passes are cancelled, the failures
        already produced are yielded and then the error is raised.
        """
        failures: Queue = Queue(maxsize=self.buffer_size)
        cancel = threading.Event()
        errors: list[BaseException] = []
        errors_lock = threading.Lock()

        def run(unit: SourceUnit) -> None:
            if cancel.is_set():
                return
            try:
                for failure in lint_file(unit, self.rules, self.config, cancel=cancel):
                    if cancel.is_set():
                        return
                    failures.put(failure)
            except Exception as exc:
                logger.error("aborting lint of %s: %s", unit.name, exc)
                with errors_lock:
                    errors.append(exc)
                cancel.set()

        pool = ThreadPoolExecutor(max_workers=self.max_workers)
        futures = [pool.submit(run, unit) for unit in units]

        def close() -> None:
            wait(futures)
            failures.put(_DONE)

        threading.Thread(target=close, name="revlint-close", daemon=True).start()

        done = False
        try:
            while True:
                item = failures.get()
                if item is _DONE:
                    done = True
                    break
                yield item
        finally:
            if not done:
                # consumer went away: stop the workers and unblock their puts
                cancel.set()
                while failures.get() is not _DONE:
                    pass
            pool.shutdown(wait=True)

        if errors:
            raise errors[0]
