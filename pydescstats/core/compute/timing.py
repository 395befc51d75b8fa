"""
Wall-clock timing for backend sections.

Every backend wraps its steps (sorting, binning, the cumulative scan, ...)
in named sections; the totals end up on Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Per-section wall-clock timer built on time.perf_counter().

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('median'):
            m = ordered[n // 2]
        with timer.section('quartiles'):
            q = linear_percentile(ordered, ranks)
        timer.stop()
        timer.result()
        # {'total_seconds': 4.1e-05, 'median': 2e-06, 'quartiles': 3.1e-05}

    A section entered twice adds to its previous time. Sections are not
    required to be disjoint, so their sum need not equal the total.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to section `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._sections[name] = (
                self._sections.get(name, 0.0) + time.perf_counter() - began
            )

    def result(self) -> dict[str, float]:
        """
        'total_seconds' followed by one entry per section.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a whole block.

    Usage:
        with timed() as timer:
            table = frequency_distribution(x)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
