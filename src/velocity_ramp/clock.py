"""Time sources for the ramp limiters.

A time source is any zero-argument callable returning the current time in
milliseconds. Limiters read it once per call to measure the elapsed time of
the current ramp phase, so loop jitter is absorbed into the ramp itself.

The process-wide default clock is constructed once and is read-only
afterwards: it can be replaced with ``install_default_clock`` only before
anything has read it.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

TimeSource = Callable[[], float]


class MonotonicClock:
    """Wall-clock time source in whole milliseconds (monotonic)."""

    def __call__(self) -> float:
        return float(time.monotonic_ns() // 1_000_000)


class ManualClock:
    """Deterministic time source advanced explicitly by the caller.

    Used by tests and by offline simulations that step the limiters on a
    fixed time grid.
    """

    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        """Move the clock forward by ``ms`` milliseconds and return the new time."""
        if ms < 0:
            raise ValueError(f"cannot advance a clock by a negative amount (got {ms} ms)")
        self._now += ms
        return self._now

    def set(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError(f"clock cannot move backwards ({self._now} ms -> {ms} ms)")
        self._now = float(ms)


_default_clock: Optional[TimeSource] = None
_default_clock_frozen: bool = False


def install_default_clock(clock: TimeSource) -> None:
    """Install the process-wide default clock.

    Must be called before the default is first read (typically at process
    start-up).

    Raises:
        RuntimeError: If the default clock has already been read.
    """
    global _default_clock

    if _default_clock_frozen:
        raise RuntimeError("default clock is already in use and cannot be replaced")
    _default_clock = clock


def default_clock() -> TimeSource:
    """Return the process-wide default clock, freezing it on first read."""
    global _default_clock, _default_clock_frozen

    if _default_clock is None:
        _default_clock = MonotonicClock()
    _default_clock_frozen = True
    return _default_clock
