"""
Holder for the Dictionary currently in use.

A reload either fully replaces the Dictionary or leaves the previous one in
place: the new Dictionary is built completely before the reference is swapped,
and any error from fetching or sanitizing propagates without touching state.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from packages.engine import Dictionary, HintError, load_dictionary

logger = logging.getLogger(__name__)


class DictionaryStore:
    def __init__(self, dictionary: Optional[Dictionary] = None):
        self._current = dictionary

    @property
    def current(self) -> Optional[Dictionary]:
        return self._current

    @property
    def ready(self) -> bool:
        return self._current is not None

    def load(self, raw_entries: Iterable[str]) -> Dictionary:
        """Sanitize `raw_entries` and swap it in. Raises EmptyDictionaryError."""
        return self.reload(lambda: raw_entries)

    def reload(self, fetch: Callable[[], Iterable[str]]) -> Dictionary:
        """
        Call `fetch()` for raw entries, build a Dictionary, then swap it in.

        Raises whatever `fetch` or load_dictionary raise (domain errors, or
        OSError for unreadable files); the previously loaded Dictionary (if
        any) stays current in that case.
        """
        try:
            new = load_dictionary(fetch())
        except (HintError, OSError) as e:
            kept = len(self._current) if self._current is not None else 0
            logger.warning("dictionary reload failed, keeping %d words: %s", kept, e)
            raise
        self._current = new
        logger.debug("dictionary replaced: %d words", len(new))
        return new
