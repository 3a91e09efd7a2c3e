"""
Constraint model and candidate filtering.

Given:
  - a Dictionary (the word universe)
  - a ConstraintModel (all feedback seen so far, normalized)

Return:
  - the dictionary words consistent with ALL feedback, in dictionary order.

Reconciliation rule: a letter reported absent on one tile can be confirmed
correct/present on another (duplicate-letter guesses). Such a letter is removed
from the absent set before any exclusion test, otherwise the true answer would
be filtered out.

Presence is checked by containment only. A word holding a required letter once
passes even when feedback implied the letter appears twice. `strict_counts`
turns on multiplicity checks against `min_counts` for callers that want them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Mapping, NamedTuple, Optional, Tuple

from .words import WORD_LENGTH, Dictionary

logger = logging.getLogger(__name__)


class PresentConstraint(NamedTuple):
    """Letter must appear somewhere, but not at `excluded_position`."""
    char: str
    excluded_position: int


def _letter(value, what: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single letter, got {value!r}")
    ch = value.lower()
    if not ("a" <= ch <= "z"):
        raise ValueError(f"{what} must be a letter a-z, got {value!r}")
    return ch


@dataclass(frozen=True)
class ConstraintModel:
    """
    Accumulated feedback for one puzzle.

    correct    : WORD_LENGTH slots, each None or the letter fixed at that slot
    present    : (char, excluded_position) pairs
    absent     : letters reported absent, NOT yet reconciled with known letters
    min_counts : minimum multiplicity per letter (only used by strict filtering)

    Inputs are normalized (lowercased, tuples/frozensets) and validated here, so
    the filter never has to guard against out-of-range positions.
    """
    correct: Tuple[Optional[str], ...] = (None,) * WORD_LENGTH
    present: FrozenSet[PresentConstraint] = frozenset()
    absent: FrozenSet[str] = frozenset()
    min_counts: Mapping[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        correct = tuple(self.correct)
        if len(correct) != WORD_LENGTH:
            raise ValueError(f"correct must have {WORD_LENGTH} slots, got {len(correct)}")
        correct = tuple(None if c is None else _letter(c, "correct slot") for c in correct)

        present = set()
        for item in self.present:
            ch, pos = item
            if not isinstance(pos, int) or isinstance(pos, bool) or not 0 <= pos < WORD_LENGTH:
                raise ValueError(f"present position out of range 0..{WORD_LENGTH - 1}: {pos!r}")
            present.add(PresentConstraint(_letter(ch, "present letter"), pos))

        absent = frozenset(_letter(ch, "absent letter") for ch in self.absent)

        counts = {}
        for ch, n in dict(self.min_counts).items():
            if not isinstance(n, int) or n < 1:
                raise ValueError(f"min count for {ch!r} must be a positive int, got {n!r}")
            counts[_letter(ch, "min_counts key")] = n

        object.__setattr__(self, "correct", correct)
        object.__setattr__(self, "present", frozenset(present))
        object.__setattr__(self, "absent", absent)
        object.__setattr__(self, "min_counts", counts)

    def known_letters(self) -> FrozenSet[str]:
        """Letters confirmed in the word (correct slots + present pairs)."""
        return frozenset(c for c in self.correct if c) | {p.char for p in self.present}

    def effective_absent(self) -> FrozenSet[str]:
        """Absent letters minus known letters."""
        return self.absent - self.known_letters()

    def is_empty(self) -> bool:
        return not any(self.correct) and not self.present and not self.absent


def satisfies(word: str, constraints: ConstraintModel, *, strict_counts: bool = False) -> bool:
    """Check one word against the model (reconciles absent letters itself)."""
    return _matches(word, constraints, constraints.effective_absent(), strict_counts)


def _matches(word: str, c: ConstraintModel, banned: FrozenSet[str], strict_counts: bool) -> bool:
    for i, ch in enumerate(c.correct):
        if ch and word[i] != ch:
            return False

    for ch, pos in c.present:
        if ch not in word or word[pos] == ch:
            return False

    if any(ch in banned for ch in word):
        return False

    if strict_counts:
        for ch, n in c.min_counts.items():
            if word.count(ch) < n:
                return False

    return True


def filter_candidates(dictionary: Dictionary | Iterable[str], constraints: ConstraintModel,
                      *, strict_counts: bool = False) -> Tuple[str, ...]:
    """
    Keep the words consistent with `constraints`, preserving input order.

    Args:
      dictionary    : Dictionary (or any iterable of clean words, e.g. a
                      previously filtered tuple)
      constraints   : the normalized feedback model
      strict_counts : also require word.count(ch) >= min_counts[ch]

    Returns:
      tuple of surviving words; empty when the constraints are contradictory
      or exhausted. Never raises.
    """
    # Reconcile once, before any exclusion test.
    banned = constraints.effective_absent()
    out = tuple(w for w in dictionary if _matches(w, constraints, banned, strict_counts))
    logger.debug("filter: %d candidates remain (banned=%s)", len(out), "".join(sorted(banned)))
    return out
