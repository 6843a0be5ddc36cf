"""
Wall-clock timing for backend computations.

Backends record how long a fit took, overall and per phase, and ship the
numbers in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Overall stopwatch plus named phase timers.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('sums'):
            ...
        timer.stop()
        timer.result()  # {'total_seconds': ..., 'sums': ...}
    """

    def __init__(self) -> None:
        self._phases: dict[str, float] = {}
        self._started_at: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to phase `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - began
            self._phases[name] = self._phases.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Timings in seconds: 'total_seconds' plus one key per phase.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}
