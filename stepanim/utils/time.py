"""Time/clock abstraction to aid testability and deterministic animations."""

from __future__ import annotations

import time as _time
from typing import Protocol


class TimeSource(Protocol):
    """Anything with a ``now()`` returning seconds on a monotonic scale."""

    def now(self) -> float: ...


class Clock:
    """Clock abstraction to aid testability."""

    def now(self) -> float:
        """Return current monotonic time in seconds."""
        return _time.monotonic()


class ManualClock:
    """Clock that only moves when told to.

    Used by tests and by headless rendering, where frames must be reproducible.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward (or backward, for negative values)."""
        self._now += seconds

    def set(self, value: float) -> None:
        self._now = value
