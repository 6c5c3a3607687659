# apps/cli/absurdle.py
"""
Find a guess sequence that beats Absurdle's challenge mode for a target word.
"""

from __future__ import annotations

import argparse
import logging

from wordle_solver.datasets import WordListError, load_word_list
from wordle_solver.engine import encode, score
from wordle_solver.solvers import ChallengeSolver


def main(argv=None):
    ap = argparse.ArgumentParser(description="Solve Absurdle challenge mode")
    ap.add_argument("guessable", help="path to words that may be guessed but are never answers")
    ap.add_argument("solutions", help="path to words that may be the answer")
    ap.add_argument("target", help="the target word")
    ap.add_argument("--hard-mode", action="store_true",
                    help="guesses must use all previously gained information")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log every path the search tries")
    args = ap.parse_args(argv)

    logging.basicConfig(format="%(message)s")
    logging.getLogger("wordle_solver").setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        guessable = load_word_list(args.guessable)
        solutions = load_word_list(args.solutions)
    except (OSError, WordListError) as e:
        raise SystemExit(f"Could not load word lists: {e}")

    try:
        solver = ChallengeSolver(args.target, guessable, solutions, hard_mode=args.hard_mode)
    except ValueError as e:
        ap.error(str(e))

    res = solver.solve()
    if not res.solved:
        print(f"Total failure! ({res.backtracks} backtracks)")
        raise SystemExit(1)

    for g in res.guesses:
        print(f"{g} {encode(score(g, args.target))}")
    print(f"{len(res.guesses)} guesses, {res.backtracks} backtracks")


if __name__ == "__main__":
    main()
