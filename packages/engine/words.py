"""
Word and dictionary primitives.

A word is a plain `str` of exactly WORD_LENGTH lowercase ASCII letters.
A Dictionary is the immutable, ordered, de-duplicated collection of such words
that every other component reads from.

Sanitizing rules (applied by load_dictionary):
  - strip surrounding whitespace, lowercase
  - drop anything that is not exactly WORD_LENGTH ASCII letters
  - drop repeats (first occurrence wins, so source order is preserved)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, Tuple

from .errors import EmptyDictionaryError

logger = logging.getLogger(__name__)

WORD_LENGTH = 5


def normalize_word(raw: str) -> str:
    """Trim + lowercase. Does not validate."""
    return raw.strip().lower()


def is_word(word: str) -> bool:
    """
    True iff `word` is already a clean word: WORD_LENGTH lowercase a–z letters.

    `str.isalpha` alone accepts accented and non-Latin letters, so the check is
    restricted to ASCII explicitly.
    """
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and word.isascii()
        and word.isalpha()
        and word.islower()
    )


@dataclass(frozen=True)
class Dictionary:
    """Immutable ordered word collection. Build it with load_dictionary()."""
    words: Tuple[str, ...]
    _index: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        words = tuple(self.words)
        bad = [w for w in words if not is_word(w)]
        if bad:
            raise ValueError(f"not {WORD_LENGTH}-letter lowercase words: {bad[:5]!r}")
        if len(set(words)) != len(words):
            raise ValueError("dictionary words must be unique")
        object.__setattr__(self, "words", words)
        object.__setattr__(self, "_index", frozenset(words))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __getitem__(self, i):
        return self.words[i]

    def __contains__(self, word: object) -> bool:
        return word in self._index


def load_dictionary(raw_entries: Iterable[str]) -> Dictionary:
    """
    Sanitize `raw_entries` into a Dictionary.

    Raises:
      EmptyDictionaryError if no entry survives sanitizing.
    """
    seen = set()
    words = []
    dropped = 0
    for raw in raw_entries:
        w = normalize_word(raw)
        if not is_word(w):
            dropped += 1
            continue
        if w in seen:
            continue
        seen.add(w)
        words.append(w)

    if not words:
        raise EmptyDictionaryError(
            f"word source contained no usable {WORD_LENGTH}-letter words")

    logger.debug("dictionary loaded: %d words (%d entries dropped)", len(words), dropped)
    return Dictionary(tuple(words))
