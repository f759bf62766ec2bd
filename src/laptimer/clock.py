"""Millisecond time sources for gate triggers."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can stamp a trigger with a monotonic millisecond time."""

    def now_ms(self) -> int: ...


class MonotonicClock:
    """Real time source backed by ``time.monotonic_ns``."""

    def now_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000


class ManualClock:
    """Clock that only moves when told to. Used for replays and tests.

    Usage:
        clock = ManualClock()
        clock.advance(30_000)
        clock.now_ms()  # 30000
    """

    def __init__(self, start_ms: int = 0) -> None:
        self._now = start_ms

    def now_ms(self) -> int:
        return self._now

    def set(self, ms: int) -> None:
        if ms < self._now:
            raise ValueError(f"clock cannot move backwards ({ms} < {self._now})")
        self._now = ms

    def advance(self, ms: int) -> int:
        """Move forward by ``ms`` and return the new time."""
        self.set(self._now + ms)
        return self._now
