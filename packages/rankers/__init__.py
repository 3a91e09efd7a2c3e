from .base import Ranked, RankedList, letter_coverage
from .answers import rank_answers
from .exploration import rank_exploration_guesses, EXPLORATION_TOP_N, ABSENT_PENALTY

__all__ = ["Ranked", "RankedList", "letter_coverage", "rank_answers",
           "rank_exploration_guesses", "EXPLORATION_TOP_N", "ABSENT_PENALTY"]
