from __future__ import annotations
from typing import Dict, Type

from packages.engine import Dictionary

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver turns one round's state into a guess. State keys:
      turn        : 1-based turn number
      candidates  : words still consistent with the feedback (dictionary order)
      constraints : the ConstraintModel those candidates were filtered with
      history     : list of (guess, pattern) so far
      max_turns   : turn budget for the game
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.dictionary: Dictionary | None = None

    def reset(self, *, dictionary: Dictionary) -> None:
        self.dictionary = dictionary

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")

    def _fallback(self) -> str:
        # Contradictory feedback leaves no candidates; any word keeps the game going.
        return self.dictionary[0]
