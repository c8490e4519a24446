"""A pausable countdown measured against the monotonic clock."""

from __future__ import annotations

import time


def _now_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class Stopwatch:
    """Tracks elapsed time against a fixed period, in milliseconds."""

    def __init__(self, period_ms: int) -> None:
        self.period_ms = period_ms
        self._running = False
        self._timestamp = 0
        self._elapsed_ms = 0

    def __repr__(self) -> str:
        return (
            f"Stopwatch(period_ms={self.period_ms}, running={self._running}, "
            f"elapsed_ms={self.elapsed_milliseconds()})"
        )

    def is_expired(self) -> bool:
        """True once more than the full period has elapsed."""
        return self.elapsed_milliseconds() > self.period_ms

    def is_running(self) -> bool:
        return self._running

    def is_paused(self) -> bool:
        return not self._running

    def resume(self) -> None:
        """Start counting from now."""
        self._running = True
        self._timestamp = _now_ms()

    def pause(self) -> None:
        """Stop counting; the elapsed time becomes the length of the last run."""
        self._running = False
        self._elapsed_ms = abs(_now_ms() - self._timestamp)

    def remaining_milliseconds(self) -> int:
        """Milliseconds left in the period, or 0 once expired."""
        elapsed = self.elapsed_milliseconds()
        if elapsed > self.period_ms:
            return 0
        return self.period_ms - elapsed

    def elapsed_milliseconds(self) -> int:
        if self._running:
            return self._elapsed_ms + abs(_now_ms() - self._timestamp)
        return self._elapsed_ms