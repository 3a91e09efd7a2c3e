"""
Poll a feedback file and re-run a callback when it changes.

Change detection is by (mtime, size); notifications go through a Debouncer
so an editor writing the file in several steps triggers a single recompute.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional, Tuple

from .debounce import Debouncer

logger = logging.getLogger(__name__)

POLL_SECONDS = 0.5


class FileWatcher:
    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._last = self._stamp()

    def _stamp(self) -> Optional[Tuple[int, int]]:
        try:
            st = self.path.stat()
        except FileNotFoundError:
            return None
        return st.st_mtime_ns, st.st_size

    def changed(self) -> bool:
        stamp = self._stamp()
        if stamp == self._last:
            return False
        self._last = stamp
        return True


def watch(path: Path | str, on_change: Callable[[], None], *,
          debouncer: Optional[Debouncer] = None,
          poll_seconds: float = POLL_SECONDS,
          should_stop: Callable[[], bool] = lambda: False,
          sleep: Callable[[float], None] = time.sleep) -> None:
    """
    Loop until `should_stop()` is true: poll `path`, debounce, call `on_change`.
    Exceptions from `on_change` propagate and end the loop.
    """
    watcher = FileWatcher(path)
    debouncer = debouncer or Debouncer()
    logger.debug("watching %s every %.2fs", watcher.path, poll_seconds)
    while not should_stop():
        if watcher.changed():
            debouncer.notify()
        if debouncer.ready():
            on_change()
        sleep(poll_seconds)
