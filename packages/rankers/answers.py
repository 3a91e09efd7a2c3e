"""
Answer ranker (distinct-letter coverage over the candidate set).

Idea:
  - Count, for each letter, how many remaining candidates contain it.
  - Score every candidate as the sum of those counts over its DISTINCT letters.
  - Highest first: the word sharing the most letters with the most other
    candidates is a greedy stand-in for expected information gain, restricted
    to words that can still be the answer.
"""

from __future__ import annotations

from typing import Sequence

from .base import Ranked, RankedList, coverage_score, letter_coverage, sort_ranked


def rank_answers(candidates: Sequence[str]) -> RankedList:
    counts = letter_coverage(candidates)
    return sort_ranked(Ranked(w, coverage_score(w, counts)) for w in candidates)
