# apps/cli/multi.py
"""
Solve several boards at once (https://quordle.com, https://duotrigordle.com).

Each round prints one guess for all boards, then asks for the feedback of
every board that isn't solved yet.
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordle_solver.datasets import WordListError, load_word_list
from wordle_solver.engine import NoPossibilitiesError, Strategy, get_strategy_names
from wordle_solver.harness import read_feedback, read_guess
from wordle_solver.solvers import MultiSolver


def main(argv=None):
    ap = argparse.ArgumentParser(description="Recommend guesses for multi-board Wordle")
    ap.add_argument("guessable", help="path to words that may be guessed but are never answers")
    ap.add_argument("solutions", help="path to words that may be the answer")
    ap.add_argument("count", type=int, help="how many boards to solve")
    ap.add_argument("--strategy", default=Strategy.GROUP_SIZE.value,
                    help=f"solving strategy (one of: {', '.join(get_strategy_names())})")
    ap.add_argument("--enter-guesses", action="store_true",
                    help="manually enter guesses instead of automatically using generated ones")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(format="%(message)s")
    logging.getLogger("wordle_solver").setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        strategy = Strategy.from_name(args.strategy)
    except ValueError as e:
        ap.error(str(e))

    try:
        guessable = load_word_list(args.guessable)
        solutions = load_word_list(args.solutions)
    except (OSError, WordListError) as e:
        raise SystemExit(f"Could not load word lists: {e}")

    try:
        solver = MultiSolver(args.count, guessable, solutions, strategy=strategy)
    except ValueError as e:
        ap.error(str(e))
    allowed = set(guessable) | set(solutions)

    while True:
        print("==============================")

        if args.enter_guesses:
            print(f"Recommended: {solver.next_guess()}")
            guess = read_guess(sys.stdin, sys.stdout, allowed)
        else:
            guess = solver.next_guess()
            print(f"Guess: {guess}")
        solver.next_round()

        index = solver.index_needing_response()
        while index is not None:
            print(f"Need feedback for board {index}")
            code = read_feedback(sys.stdin, sys.stdout)
            try:
                solver.respond(index, guess, code)
            except NoPossibilitiesError as e:
                raise SystemExit(f"Error on board {index}: {e}")
            index = solver.index_needing_response()

        if solver.all_done():
            print("Win!")
            break


if __name__ == "__main__":
    main()
