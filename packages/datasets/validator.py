"""
Word-list validator.

What this module does:
- Read a word list (JSON array or one-per-line text) the same way the CLIs do.
- Count entries that survive dictionary sanitizing vs. entries that get dropped.
- Detect duplicates; compute SHA-256 of the raw file for manifests.
- Return a machine-readable dict and a one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/words.json")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List

from packages.engine import WORD_LENGTH, is_word, normalize_word

from .source import SourceParseError, read_word_file


@dataclass
class WordListReport:
    path: str
    exists: bool
    word_length: int
    entries: int         # raw entries read (blank lines excluded)
    valid: int           # entries that survive sanitizing (with repeats)
    unique: int          # distinct valid words = resulting Dictionary size
    invalid: int         # entries dropped by sanitizing
    sha256: str          # of the raw bytes ("" if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_wordlist(path: str) -> Dict:
    """
    Validate one word list against the dictionary sanitizing rules.

    `passed` is strict: the file exists, parses, yields at least one word and
    has neither invalid nor duplicate entries. A list that fails may still be
    loadable (load_dictionary drops what it can't use).
    """
    p = Path(path)
    issues: List[str] = []

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(WordListReport(path, False, WORD_LENGTH, 0, 0, 0, 0, "", False, issues))

    sha = _sha256_file(p)
    try:
        raw = read_word_file(p)
    except SourceParseError as e:
        issues.append(str(e))
        return asdict(WordListReport(str(p), True, WORD_LENGTH, 0, 0, 0, 0, sha, False, issues))

    valid = [w for w in (normalize_word(r) for r in raw) if is_word(w)]
    invalid = len(raw) - len(valid)
    unique = len(set(valid))

    if not valid:
        issues.append(f"word list contains 0 valid {WORD_LENGTH}-letter words")
    if invalid:
        issues.append(f"{invalid} invalid entr{'y' if invalid == 1 else 'ies'}")
    if unique != len(valid):
        issues.append(f"{len(valid) - unique} duplicate entr{'y' if len(valid) - unique == 1 else 'ies'}")

    rep = WordListReport(
        path=str(p),
        exists=True,
        word_length=WORD_LENGTH,
        entries=len(raw),
        valid=len(valid),
        unique=unique,
        invalid=invalid,
        sha256=sha,
        passed=bool(valid) and invalid == 0 and unique == len(valid),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        words.json | words=2309 (uniq=2309, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | words={report['valid']} "
        f"(uniq={report['unique']}, invalid={report['invalid']}, sha={sha}) | {status}"
    )
