"""
Shared pieces for the rankers: the Ranked pair, the letter-coverage table and
the stable descending sort.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, NamedTuple, Tuple


class Ranked(NamedTuple):
    word: str
    score: int


# Ordered high → low; ties keep input order.
RankedList = Tuple[Ranked, ...]


def letter_coverage(words: Iterable[str]) -> Counter:
    """
    letter -> number of words containing it at least once.
    ('geese' adds 1 to 'e', not 3.)
    """
    counts = Counter()
    for w in words:
        counts.update(set(w))
    return counts


def coverage_score(word: str, counts: Counter) -> int:
    """Sum of `counts` over the DISTINCT letters of `word`."""
    return sum(counts[ch] for ch in set(word))


def sort_ranked(scored: Iterable[Ranked]) -> RankedList:
    # sorted() is stable, so equal scores stay in input order
    return tuple(sorted(scored, key=lambda r: -r.score))
