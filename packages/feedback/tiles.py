"""
Turn per-tile feedback into a ConstraintModel.

A board is a sequence of rows; a row is a sequence of (letter, state) tiles,
index = slot. States:
  correct  -> letter fixed at this slot
  present  -> letter somewhere else (not this slot)
  absent   -> letter reported absent (reconciled later by the filter)
  empty/tbd, or a tile without a letter -> ignored (row still being typed)

The model is always rebuilt from the whole board, never patched, so a
re-read after any change cannot leave stale constraints behind.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from packages.engine import WORD_LENGTH, ConstraintModel, PresentConstraint
from packages.engine.scoring import PATTERN_ABSENT, PATTERN_CORRECT, PATTERN_PRESENT


class TileState(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    EMPTY = "empty"
    TBD = "tbd"


Tile = Tuple[str, TileState]

_PATTERN_STATES = {
    PATTERN_CORRECT: TileState.CORRECT,
    PATTERN_PRESENT: TileState.PRESENT,
    PATTERN_ABSENT: TileState.ABSENT,
}


def constraints_from_rows(rows: Iterable[Sequence[Tile]]) -> ConstraintModel:
    correct: List[Optional[str]] = [None] * WORD_LENGTH
    present = set()
    absent = set()
    min_counts: Dict[str, int] = {}

    for row in rows:
        if len(row) > WORD_LENGTH:
            raise ValueError(f"row has {len(row)} tiles, expected at most {WORD_LENGTH}")
        confirmed = Counter()
        for i, (letter, state) in enumerate(row):
            letter = (letter or "").strip().lower()
            state = TileState(state)
            if not letter or state in (TileState.EMPTY, TileState.TBD):
                continue
            if state is TileState.CORRECT:
                correct[i] = letter
                confirmed[letter] += 1
            elif state is TileState.PRESENT:
                present.add(PresentConstraint(letter, i))
                confirmed[letter] += 1
            else:
                absent.add(letter)
        # A row with two confirmed 'e' tiles proves at least two e's.
        for letter, n in confirmed.items():
            min_counts[letter] = max(min_counts.get(letter, 0), n)

    return ConstraintModel(correct=tuple(correct), present=frozenset(present),
                           absent=frozenset(absent), min_counts=min_counts)


def row_from_pattern(guess: str, pattern: str) -> List[Tile]:
    """('crane', '-GY--') -> tiles, using the engine's G/Y/- alphabet."""
    guess = guess.strip().lower()
    pattern = pattern.strip().upper()
    if len(guess) != len(pattern):
        raise ValueError(f"guess {guess!r} and pattern {pattern!r} differ in length")
    try:
        return [(ch, _PATTERN_STATES[p]) for ch, p in zip(guess, pattern)]
    except KeyError as e:
        raise ValueError(f"pattern {pattern!r} may only contain {PATTERN_CORRECT}, "
                         f"{PATTERN_PRESENT} or {PATTERN_ABSENT}") from e


def constraints_from_history(history: Iterable[Tuple[str, str]]) -> ConstraintModel:
    """Build the model from (guess, pattern) pairs, e.g. a harness game log."""
    return constraints_from_rows(row_from_pattern(g, p) for g, p in history)
