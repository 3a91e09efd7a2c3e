"""
Plain-text feedback format, one guessed row per line:

    # guess  pattern
    crane  -GY--
    sloth:--Y-G
    adieu=Y---G

Separator is whitespace, ':' or '='. Pattern letters are G (correct),
Y (present) and - (absent), case-insensitive. Blank lines and '#' comments
are skipped.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Tuple

from packages.datasets import read_lines
from packages.engine import WORD_LENGTH, is_word, normalize_word

from .tiles import row_from_pattern

_LINE_RE = re.compile(r"^\s*([A-Za-z]+)\s*[:=\s]\s*(\S+)\s*$")


def parse_feedback_line(line: str) -> Optional[Tuple[str, str]]:
    """Return (guess, PATTERN), or None for blank/comment lines."""
    body = line.split("#", 1)[0]
    if not body.strip():
        return None
    m = _LINE_RE.match(body)
    if not m:
        raise ValueError(f"expected 'guess PATTERN', got {line.strip()!r}")
    guess, pattern = normalize_word(m.group(1)), m.group(2).upper()
    if not is_word(guess):
        raise ValueError(f"guess must be {WORD_LENGTH} letters a-z: {m.group(1)!r}")
    row_from_pattern(guess, pattern)  # validates the pattern
    return guess, pattern


def read_feedback_file(path: Path | str) -> List[Tuple[str, str]]:
    out = []
    for n, line in enumerate(read_lines(path), start=1):
        try:
            parsed = parse_feedback_line(line)
        except ValueError as e:
            raise ValueError(f"{path}:{n}: {e}") from e
        if parsed:
            out.append(parsed)
    return out
