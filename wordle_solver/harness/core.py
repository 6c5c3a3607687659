"""
Experiment harness core primitives.

- run_case:  play a single game (one hidden answer) with a given solver.
- run_batch: play many games, each with a freshly built solver.

The harness plays the role of the game: it scores each guess against the
hidden answer and feeds the result back to the solver. These functions are
intentionally UI-agnostic so they can be reused by a CLI app, a notebook,
or the parallel histogram runner.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, Iterable, List, Optional

from wordle_solver.engine import encode, is_win, score

# Safety net for runaway games; real solves finish well under this.
MAX_GUESSES = 20


def run_case(solver, answer: str, *, max_guesses: int = MAX_GUESSES) -> Dict:
    """
    Execute one game until the solver wins or `max_guesses` is exhausted.

    Args:
        solver:      an object with next_guess() and respond(guess, code)
        answer:      the hidden word for this case
        max_guesses: give up (success=False) after this many guesses

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, 'apc' feedback)])
    """
    history = []
    success = False

    t0 = time.perf_counter()
    for _ in range(max_guesses):
        guess = solver.next_guess()
        code = score(guess, answer)
        history.append((guess, encode(code)))

        if is_win(code):
            success = True
            break

        solver.respond(guess, code)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        make_solver: Callable[[], object],
        answers: Iterable[str],
        *,
        max_guesses: int = MAX_GUESSES,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. A new solver is built for every case since
    solvers are single-game objects. If 'sample' is provided, only the first
    K answers are used to speed up quick experiments.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    return [run_case(make_solver(), ans, max_guesses=max_guesses) for ans in pool]
