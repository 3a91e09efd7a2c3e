"""
Best-answer solver: always guess the top answer-ranked candidate.

Every guess could be the answer, so this never "wastes" a turn, but with many
look-alike candidates (_ight, _atch) it can burn turns one letter at a time.
"""

from __future__ import annotations

from packages.rankers import rank_answers
from .base import BaseSolver, register


@register
class BestAnswerSolver(BaseSolver):
    id = "best_answer"
    name = "Best Answer (distinct-letter coverage)"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        ranked = rank_answers(state["candidates"])
        return ranked[0].word if ranked else self._fallback()
