"""Pause-aware run clock measuring elapsed milliseconds."""
from __future__ import annotations

import time
from typing import Callable


class RunClock:
    """Elapsed time since start, net of time spent paused.

    ``time_source`` returns seconds from a monotonic origin (``time.monotonic``
    by default). Every method takes an optional ``now`` reading in the same
    units; ``None`` reads the source.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic) -> None:
        self._time_source = time_source
        self._origin: float | None = None
        self._paused_at: float | None = None
        self._paused_total = 0.0
        self._elapsed_ms = 0.0

    @property
    def started(self) -> bool:
        return self._origin is not None

    @property
    def paused(self) -> bool:
        return self._paused_at is not None

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time as of the last sample, pause or resume."""
        return self._elapsed_ms

    def _read(self, now: float | None) -> float:
        return self._time_source() if now is None else now

    def start(self, now: float | None = None) -> None:
        self._origin = self._read(now)
        self._paused_at = None
        self._paused_total = 0.0
        self._elapsed_ms = 0.0

    def sample(self, now: float | None = None) -> float:
        """Recompute elapsed from the source. Frozen while paused."""
        if self._origin is None or self._paused_at is not None:
            return self._elapsed_ms
        raw = (self._read(now) - self._origin - self._paused_total) * 1000.0
        # A fake source may step backwards; elapsed never does.
        if raw > self._elapsed_ms:
            self._elapsed_ms = raw
        return self._elapsed_ms

    def pause(self, now: float | None = None) -> None:
        if self._origin is None or self._paused_at is not None:
            return
        now = self._read(now)
        self.sample(now)
        self._paused_at = now

    def resume(self, now: float | None = None) -> None:
        if self._paused_at is None:
            return
        now = self._read(now)
        self._paused_total += max(0.0, now - self._paused_at)
        self._paused_at = None
