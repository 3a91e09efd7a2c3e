"""
Offline evaluation harness.

- run_case:  play one puzzle (one hidden answer) with a given solver.
- run_batch: play many puzzles in sequence.

Each turn mirrors the live loop: the ConstraintModel is rebuilt from the full
(guess, pattern) history, the dictionary is re-filtered from scratch, and the
solver picks from that fresh state.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Tuple

from packages.engine import Dictionary, filter_candidates, is_solved, is_word, score
from packages.feedback import constraints_from_history

WORDLE_MAX_TURNS = 6


def run_case(solver, answer: str, *, dictionary: Dictionary,
             max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Returns:
        dict with keys:
            answer, success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]),
            remaining (list[int]): candidates left before each guess
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1, got {max_turns}")
    if not is_word(answer):
        raise ValueError(f"answer is not a valid word: {answer!r}")

    solver.reset(dictionary=dictionary)
    history: List[Tuple[str, str]] = []
    remaining: List[int] = []
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        constraints = constraints_from_history(history)
        candidates = filter_candidates(dictionary, constraints)
        remaining.append(len(candidates))

        guess = solver.next_guess({
            "turn": turn,
            "candidates": candidates,
            "constraints": constraints,
            "history": list(history),
            "max_turns": max_turns,
        })
        patt = score(guess, answer)
        history.append((guess, patt))

        if is_solved(patt):
            success = True
            break

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "remaining": remaining,
    }


def run_batch(solver, answers: Iterable[str], *, dictionary: Dictionary,
              max_turns: int = WORDLE_MAX_TURNS) -> List[Dict]:
    """
    Run one case per answer, stamping each result with the solver id.
    `answers` may be any iterable, e.g. a tqdm-wrapped list for progress output.
    """
    out: List[Dict] = []
    for ans in answers:
        r = run_case(solver, ans, dictionary=dictionary, max_turns=max_turns)
        r["solver_id"] = solver.id
        out.append(r)
    return out
