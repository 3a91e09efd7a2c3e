"""
Feedback pattern for a single (guess, answer) pair.

Pattern alphabet:
  'G' : correct letter, correct slot
  'Y' : letter in the answer, different slot
  '-' : letter absent (or already used up by other G/Y tiles)

Used by the evaluation harness to play simulated games, and by the feedback
parser to validate typed-in patterns. Duplicate letters follow the game's rule:
greens are assigned first, then yellows while unmatched copies remain.
"""

from collections import Counter

PATTERN_CORRECT = "G"
PATTERN_PRESENT = "Y"
PATTERN_ABSENT = "-"
PATTERN_CHARS = PATTERN_CORRECT + PATTERN_PRESENT + PATTERN_ABSENT


def score(guess: str, answer: str) -> str:
    """
    Examples:
      score("belle", "level") -> "-GYYY"
      score("speed", "abide") -> "--Y-Y"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise ValueError(f"guess and answer lengths differ: {guess!r} vs {answer!r}")

    pattern = [PATTERN_ABSENT] * len(guess)
    unmatched = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = PATTERN_CORRECT
        else:
            unmatched[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == PATTERN_CORRECT:
            continue
        if unmatched[g] > 0:
            pattern[i] = PATTERN_PRESENT
            unmatched[g] -= 1

    return "".join(pattern)


def is_solved(pattern: str) -> bool:
    return bool(pattern) and all(ch == PATTERN_CORRECT for ch in pattern)
