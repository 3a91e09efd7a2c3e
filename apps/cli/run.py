# apps/cli/run.py
"""
CLI entry point for offline solver evaluation.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads it into a Dictionary and instantiates the requested solver.
  3) Plays one simulated game per (sampled) answer with a progress bar, and writes:
       - CSV:  per-game results + guess/pattern/remaining columns
       - JSON: manifest with config and word-list report
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from packages.datasets import DictionaryStore, pretty_summary, read_word_file, validate_wordlist
from packages.engine import HintError
from packages.harness import WORDLE_MAX_TURNS, run_batch, timestamp_id, write_csv, write_manifest
from packages.solvers import create_solver, get_solver_ids


def main(argv=None) -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="Evaluate a solver over a word list")
    ap.add_argument("--solver", default="best_answer",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", required=True,
                    help="word list (.json array or one word per line)")
    ap.add_argument("--answers",
                    help="optional answers list to play against (default: every word)")
    ap.add_argument("--sample", type=int, help="play only K answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--max-turns", type=int, default=WORDLE_MAX_TURNS)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar (auto = only when stderr is a terminal)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate and summarize the word list
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    # 2) Load the dictionary and answers
    store = DictionaryStore()
    try:
        dictionary = store.reload(lambda: read_word_file(args.words))
        answers = list(dictionary)
        if args.answers:
            answers = list(DictionaryStore().reload(lambda: read_word_file(args.answers)))
    except (HintError, FileNotFoundError) as e:
        print(f"Cannot operate: {e}", file=sys.stderr)
        return 1

    solver = create_solver(args.solver)

    # 3) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = answers

    disable = args.progress == "off" or (args.progress == "auto" and not sys.stderr.isatty())
    results = run_batch(solver, tqdm(cases, ncols=80, desc="Running", unit="game", disable=disable),
                        dictionary=dictionary, max_turns=args.max_turns)

    # 4) Write outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns)
    wins = sum(1 for r in results if r["success"])
    write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "wins": wins,
        "solver_id": solver.id,
    }, str(manifest_path))

    if results:
        avg = sum(r["guesses"] for r in results if r["success"]) / max(1, wins)
        print(f"{solver.id}: solved {wins}/{len(results)} (avg {avg:.2f} guesses when solved)")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
