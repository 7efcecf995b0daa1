"""
Wall-clock timing for solver passes.

A solve is timed as a whole (start/stop) and per pass (named sections).
The backends put the resulting dict into Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Stopwatch with named, accumulating sections.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('triangular_form'):
            ...
        with timer.section('reduced_row_echelon'):
            ...
        timer.stop()
        timer.result()
        # {'total_seconds': 2.1e-04, 'triangular_form': 1.2e-04, ...}

    Entering a section twice adds to its total. Sections are not required
    to nest or be disjoint.
    """

    def __init__(self):
        self._started_at: float | None = None
        self._total: float | None = None
        self._sections: dict[str, float] = {}

    @property
    def running(self) -> bool:
        return self._started_at is not None and self._total is None

    def start(self) -> None:
        self._started_at = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to section `name`."""
        entered = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - entered
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        'total_seconds' followed by every section, in first-entered order.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block; the timer is stopped on exit, even on error.

        with timed() as timer:
            solution = solve(equations)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
