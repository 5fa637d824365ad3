"""Stopwatch for active workout time."""

from __future__ import annotations

import time
from typing import Callable


class SessionClock:
    """Accumulates time while running, freezes while paused.

    The clock has no timer of its own; callers read :attr:`elapsed_seconds`
    whenever they refresh a display.

    Args:
        now: Monotonic time source in seconds. Replay and tests pass a manual one.
    """

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._accumulated_s = 0.0
        self._started_at: float | None = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        """Start or resume; no-op when already running."""

        if self._started_at is None:
            self._started_at = self._now()

    resume = start

    def pause(self) -> None:
        if self._started_at is not None:
            self._accumulated_s += max(0.0, self._now() - self._started_at)
            self._started_at = None

    def stop(self) -> None:
        """Stop and reset to zero."""

        self._started_at = None
        self._accumulated_s = 0.0

    @property
    def elapsed_seconds(self) -> float:
        if self._started_at is None:
            return self._accumulated_s
        return self._accumulated_s + max(0.0, self._now() - self._started_at)

    @property
    def elapsed_whole_seconds(self) -> int:
        return int(self.elapsed_seconds)


class ManualTime:
    """Settable time source for replaying recorded samples."""

    def __init__(self, start_s: float = 0.0) -> None:
        self.value = start_s

    def __call__(self) -> float:
        return self.value

    def set(self, value_s: float) -> None:
        self.value = value_s

    def advance(self, seconds: float) -> None:
        self.value += seconds
