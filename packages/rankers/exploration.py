"""
Exploration ranker ("strategic eliminators").

Scores EVERY dictionary word, not only the candidates: a probe word is useful
when it tests many unresolved letters, whether or not it can be the answer.

Per distinct letter of a word:
  - letter in the raw absent set      -> ABSENT_PENALTY subtracted
  - letter already known (G/Y)        -> 0, it carries no new information
  - otherwise                         -> its coverage among current candidates

The absent set is deliberately NOT reconciled here: a letter that is both
reported absent and known still costs the penalty.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from packages.engine.constraints import ConstraintModel

from .base import Ranked, RankedList, letter_coverage, sort_ranked

logger = logging.getLogger(__name__)

EXPLORATION_TOP_N = 15
ABSENT_PENALTY = 5


def rank_exploration_guesses(dictionary: Iterable[str], candidates: Sequence[str],
                             constraints: ConstraintModel,
                             top_n: int = EXPLORATION_TOP_N) -> RankedList:
    """
    Args:
      dictionary  : every guessable word (Dictionary or iterable of words)
      candidates  : words still consistent with the feedback (filter output)
      constraints : the same model the candidates were filtered with
      top_n       : maximum number of entries returned

    Returns:
      at most `top_n` Ranked entries, best first, ties in dictionary order.
    """
    if top_n < 0:
        raise ValueError(f"top_n must be >= 0, got {top_n}")

    counts = letter_coverage(candidates)
    known = constraints.known_letters()
    banned = constraints.absent

    def _score(word: str) -> int:
        s = 0
        for ch in set(word):
            if ch in banned:
                s -= ABSENT_PENALTY
            elif ch in known:
                continue
            else:
                s += counts[ch]
        return s

    ranked = sort_ranked(Ranked(w, _score(w)) for w in dictionary)
    logger.debug("exploration: scored %d words, keeping %d", len(ranked), min(top_n, len(ranked)))
    return ranked[:top_n]
