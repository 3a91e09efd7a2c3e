# apps/cli/hint.py
"""
CLI: print hints for the current puzzle.

This script:
  1) Loads the word list (local file via --words, else the URL).
  2) Rebuilds the constraints from every guessed row (--guess and/or --feedback).
  3) Prints the possible answers (best-first or A-Z) and strategic guesses.
  4) With --watch, repeats step 2-3 whenever the feedback file changes.

Examples:
  python -m apps.cli.hint --words words.json --guess crane:-GY-- --guess sloth:--Y-G
  python -m apps.cli.hint --words words.json --feedback board.txt --watch
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from packages.datasets import (DEFAULT_WORD_LIST_URL, DictionaryStore, fetch_word_list,
                               read_word_file)
from packages.engine import Dictionary, HintError
from packages.engine.hints import Hints, compute_hints
from packages.feedback import (DEBOUNCE_SECONDS, POLL_SECONDS, Debouncer,
                               constraints_from_history, parse_feedback_line,
                               read_feedback_file, watch)
from packages.rankers import EXPLORATION_TOP_N

DISPLAY_LIMIT = 100


def render(hints: Hints, *, sort: str = "best", limit: int = DISPLAY_LIMIT) -> str:
    lines = [f"Found: {len(hints.candidates)} possible"]

    lines.append("")
    lines.append("POSSIBLE ANSWERS")
    words = [r.word for r in hints.best] if sort == "best" else sorted(hints.candidates)
    for i, w in enumerate(words[:limit], start=1):
        lines.append(f"{i:>3}. {w}")
    if len(words) > limit:
        lines.append(f"...and {len(words) - limit} more")

    lines.append("")
    lines.append("STRATEGIC GUESSES (eliminate common letters)")
    for i, r in enumerate(hints.exploration, start=1):
        lines.append(f"{i:>3}. {r.word}  ({r.score})")

    return "\n".join(lines)


def _history(args) -> List[Tuple[str, str]]:
    history = []
    if args.feedback:
        history.extend(read_feedback_file(args.feedback))
    for g in args.guess:
        parsed = parse_feedback_line(g)
        if parsed:
            history.append(parsed)
    return history


def _load(args, store: DictionaryStore) -> Dictionary:
    if args.words:
        return store.reload(lambda: read_word_file(args.words))
    return store.reload(lambda: fetch_word_list(args.url, timeout=args.timeout))


def _show(dictionary: Dictionary, args) -> None:
    constraints = constraints_from_history(_history(args))
    hints = compute_hints(dictionary, constraints, top_n=args.top_n,
                          strict_counts=args.strict_counts)
    print(render(hints, sort=args.sort, limit=args.limit))


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Word-guess hints from tile feedback")
    ap.add_argument("--words", help="local word list (.json array or one word per line)")
    ap.add_argument("--url", default=DEFAULT_WORD_LIST_URL,
                    help="word list URL (JSON array), used when --words is not given")
    ap.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    ap.add_argument("--guess", action="append", default=[], metavar="WORD:PATTERN",
                    help="a guessed row, e.g. crane:-GY-- (G=correct, Y=present, -=absent)")
    ap.add_argument("--feedback", help="file with one 'guess PATTERN' row per line")
    ap.add_argument("--sort", choices=["best", "az"], default="best",
                    help="order of possible answers")
    ap.add_argument("--limit", type=int, default=DISPLAY_LIMIT,
                    help="max possible answers to print")
    ap.add_argument("--top-n", type=int, default=EXPLORATION_TOP_N,
                    help="number of strategic guesses")
    ap.add_argument("--strict-counts", action="store_true",
                    help="require repeated letters as often as the feedback proves")
    ap.add_argument("--watch", action="store_true",
                    help="re-run whenever --feedback changes")
    ap.add_argument("--debounce", type=float, default=DEBOUNCE_SECONDS,
                    help="quiet period before re-running in --watch mode")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.watch and not args.feedback:
        ap.error("--watch requires --feedback")

    store = DictionaryStore()
    try:
        dictionary = _load(args, store)
    except (HintError, FileNotFoundError) as e:
        print(f"Cannot operate: {e}", file=sys.stderr)
        return 1

    try:
        _show(dictionary, args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Bad feedback: {e}", file=sys.stderr)
        return 2

    if args.watch:
        def _on_change() -> None:
            try:
                print()
                _show(dictionary, args)
            except (ValueError, FileNotFoundError) as e:
                # The file may be mid-edit; report and wait for the next change.
                print(f"Bad feedback: {e}", file=sys.stderr)

        try:
            watch(args.feedback, _on_change, debouncer=Debouncer(args.debounce),
                  poll_seconds=POLL_SECONDS)
        except KeyboardInterrupt:
            pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
