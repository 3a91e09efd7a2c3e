"""
One round of hints: filter -> rank answers -> rank exploration guesses.

Everything is recomputed from the Dictionary and a freshly built
ConstraintModel each round; nothing is carried over between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from packages.rankers import (EXPLORATION_TOP_N, RankedList, rank_answers,
                              rank_exploration_guesses)

from .constraints import ConstraintModel, filter_candidates
from .words import Dictionary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hints:
    candidates: Tuple[str, ...]   # dictionary order
    best: RankedList              # candidates, best next guess first
    exploration: RankedList       # any dictionary word, best probe first

    @property
    def solved(self) -> bool:
        return len(self.candidates) == 1


def compute_hints(dictionary: Dictionary, constraints: ConstraintModel, *,
                  top_n: int = EXPLORATION_TOP_N, strict_counts: bool = False) -> Hints:
    candidates = filter_candidates(dictionary, constraints, strict_counts=strict_counts)
    hints = Hints(
        candidates=candidates,
        best=rank_answers(candidates),
        exploration=rank_exploration_guesses(dictionary, candidates, constraints, top_n),
    )
    logger.debug("hints: %d of %d words possible", len(candidates), len(dictionary))
    return hints
