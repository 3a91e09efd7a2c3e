"""
Single-threaded debouncing of change notifications.

Bursts of notify() calls collapse into one ready() == True once the source
has been quiet for `delay` seconds. No threads or timers: the caller's loop
polls ready(). The clock is injectable so tests can drive time by hand.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

DEBOUNCE_SECONDS = 0.5


class Debouncer:
    def __init__(self, delay: float = DEBOUNCE_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.delay = delay
        self.clock = clock
        self._deadline: Optional[float] = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def notify(self) -> None:
        """Record a change; restarts the quiet period."""
        self._deadline = self.clock() + self.delay

    def ready(self) -> bool:
        """True exactly once per burst, after the quiet period has elapsed."""
        if self._deadline is None or self.clock() < self._deadline:
            return False
        self._deadline = None
        return True

    def cancel(self) -> None:
        self._deadline = None
