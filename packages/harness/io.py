"""
Result files for evaluation runs.

- write_csv:      one row per game, with per-turn guess/pattern/remaining columns.
- write_manifest: JSON dump of the run configuration and word-list report.
- timestamp_id:   UTC run id for file names.

Patterns get a leading apostrophe so spreadsheet apps don't read "-GY--"
as a formula.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
from pathlib import Path
from typing import Dict, List


def _text_cell(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    Columns:
      solver, answer, success, guesses, time_ms,
      guess_1, patt_1, left_1, ..., guess_<max_turns>, patt_<max_turns>, left_<max_turns>

    left_i is the number of possible answers before guess i.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["solver", "answer", "success", "guesses", "time_ms"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            hist = r.get("history", [])
            left = r.get("remaining", [])
            for i in range(max_turns):
                g, patt = hist[i] if i < len(hist) else ("", "")
                row[f"guess_{i + 1}"] = g
                row[f"patt_{i + 1}"] = _text_cell(patt)
                row[f"left_{i + 1}"] = left[i] if i < len(left) else ""
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """e.g. 20250820T024121Z"""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
