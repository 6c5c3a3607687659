# apps/cli/solve.py
"""
CLI entry point for the single-board solver.

Two modes:
  1) Interactive (default): print a recommended guess, read the feedback the
     game gave (a/p/c string), repeat until it's all 'c'.
  2) --solve-all: solve every answer with both strategies on worker threads,
     print the guess-count histograms, and write:
       - CSV:  per-game results + guess/feedback history columns
       - JSON: manifest with config, wordlist hashes, git commit, totals
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Optional rich progress bar
try:
    from tqdm import tqdm  # pip install tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from wordle_solver.datasets import (WordListError, load_word_list, pretty_summary,
                                    validate_wordlists)
from wordle_solver.engine import (NoPossibilitiesError, Strategy, get_strategy_names,
                                  is_win)
from wordle_solver.harness import histogram, read_feedback, write_csv, write_manifest
from wordle_solver.harness.histogram import DEFAULT_WORKERS
from wordle_solver.harness.io import git_commit_or_unknown, timestamp_id
from wordle_solver.solvers import Solver


def _load_lists(args):
    try:
        return load_word_list(args.guessable), load_word_list(args.solutions)
    except (OSError, WordListError) as e:
        raise SystemExit(f"Could not load word lists: {e}")


def _play_interactive(solver: Solver) -> None:
    while True:
        guess = solver.next_guess()
        print(f"Guess: {guess}")

        code = read_feedback(sys.stdin, sys.stdout)
        if is_win(code):
            print("Win!")
            return

        try:
            solver.respond(guess, code)
        except NoPossibilitiesError as e:
            raise SystemExit(f"Error: {e}. Was the feedback entered correctly?")


def _progress_mode(requested: str) -> str:
    if requested == "auto":
        return "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "off"
    if requested == "bar" and not _HAS_TQDM:
        print("tqdm is not installed; running without a progress bar", file=sys.stderr)
        return "off"
    return requested


def _solve_all(args, guessable, solutions) -> None:
    rep = validate_wordlists(args.guessable, args.solutions)
    print(pretty_summary(rep))

    mode = _progress_mode(args.progress)
    bar = tqdm(total=len(solutions), ncols=80, desc="Solving", unit="word") if mode == "bar" else None

    try:
        res = histogram(guessable, solutions, hard_mode=args.hard_mode,
                        workers=args.workers, progress=bar)
    finally:
        if bar is not None:
            bar.close()

    print(f"GROUPCOUNT: {res.groupcount.tolist()}")
    print(f"GROUPSIZE:  {res.groupsize.tolist()}")
    print(f"RECORD (count wins - size wins - tie): {res.record.tolist()}")
    if res.failed.any():
        print(f"FAILED (groupcount - groupsize): {res.failed.tolist()}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"solve_all_{run_id}.csv"
    manifest_path = outdir / f"solve_all_{run_id}_manifest.json"

    write_csv(res.games, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(solutions),
        "histogram": {
            "groupcount": res.groupcount.tolist(),
            "groupsize": res.groupsize.tolist(),
            "record": res.record.tolist(),
            "failed": res.failed.tolist(),
        },
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Recommend Wordle guesses")
    ap.add_argument("guessable", help="path to words that may be guessed but are never answers")
    ap.add_argument("solutions", help="path to words that may be the answer")
    ap.add_argument("--strategy", default=Strategy.GROUP_SIZE.value,
                    help=f"solving strategy (one of: {', '.join(get_strategy_names())})")
    ap.add_argument("--hard-mode", action="store_true",
                    help="guesses must use all previously gained information")
    ap.add_argument("--solve-all", action="store_true",
                    help="solve every answer with both strategies and report guess counts")
    ap.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                    help="worker threads for --solve-all")
    ap.add_argument("--outdir", default="reports", help="directory for --solve-all output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar for --solve-all (auto=bar if tqdm available and a tty)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(format="%(message)s")
    logging.getLogger("wordle_solver").setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        strategy = Strategy.from_name(args.strategy)
    except ValueError as e:
        ap.error(str(e))

    guessable, solutions = _load_lists(args)

    if args.solve_all:
        # Per-answer lines would drown the bar; keep them for --verbose.
        if not args.verbose:
            logging.getLogger("wordle_solver").setLevel(logging.WARNING)
        _solve_all(args, guessable, solutions)
        return

    solver = Solver(guessable, solutions, hard_mode=args.hard_mode, strategy=strategy)
    _play_interactive(solver)


if __name__ == "__main__":
    main()
