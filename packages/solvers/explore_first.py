"""
Explore-first solver.

While many candidates remain, play the top exploration guess (any dictionary
word testing the most unresolved letters). Once the set is small, or on the
last turns, switch to the best answer-ranked candidate.
"""

from __future__ import annotations

from packages.rankers import rank_answers, rank_exploration_guesses
from .base import BaseSolver, register


@register
class ExploreFirstSolver(BaseSolver):
    id = "explore_first"
    name = "Explore, then answer"
    version = "1.0.0"

    # Explore only while more candidates than this remain.
    EXPLORE_ABOVE = 8
    # Never explore on the last N turns; those must be possible answers.
    ANSWER_TURNS = 2

    def next_guess(self, state: dict) -> str:
        candidates = state["candidates"]
        late = state["turn"] > state["max_turns"] - self.ANSWER_TURNS

        if len(candidates) > self.EXPLORE_ABOVE and not late:
            probes = rank_exploration_guesses(self.dictionary, candidates,
                                              state["constraints"], top_n=1)
            # A probe that scores nothing tells us nothing; guess an answer instead.
            if probes and probes[0].score > 0:
                return probes[0].word

        ranked = rank_answers(candidates)
        return ranked[0].word if ranked else self._fallback()
