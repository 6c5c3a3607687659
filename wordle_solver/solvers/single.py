"""
Single-board solver.

Turn loop (driven by the caller):
  1) next_guess()       -> word to play
  2) respond(guess, code) with the feedback the game gave back
  3) repeat until state is WON

States:
  SEARCHING : more than one possibility; pick the best-scoring guess
  GUESSING  : exactly one possibility; it is returned unconditionally
  WON       : the last response was all-correct

respond() doesn't assume the guess came from next_guess(); any word works,
which is what interactive play needs.
"""

from __future__ import annotations

import enum
from typing import Iterable, List, Tuple

from wordle_solver.engine import (Strategy, best_guesses, is_win, narrow,
                                  pick_guess)
from .base import BaseSolver, log_possibilities


class SolverState(enum.Enum):
    SEARCHING = "searching"
    GUESSING = "guessing"
    WON = "won"


class Solver(BaseSolver):
    def __init__(self, guessable: Iterable[str], solutions: Iterable[str], *,
                 hard_mode: bool = False, strategy: Strategy = Strategy.GROUP_SIZE):
        super().__init__(guessable, solutions)
        self.hard_mode = bool(hard_mode)
        self.strategy = strategy
        self._possibilities: List[str] = list(self.solutions)
        # Only filled in hard mode; never used to shrink possibilities.
        self._history: List[Tuple[str, int]] = []
        self._won = False

    @property
    def possibilities(self) -> List[str]:
        return list(self._possibilities)

    @property
    def history(self) -> List[Tuple[str, int]]:
        return list(self._history)

    @property
    def state(self) -> SolverState:
        if self._won:
            return SolverState.WON
        if len(self._possibilities) == 1:
            return SolverState.GUESSING
        return SolverState.SEARCHING

    def next_guess(self) -> str:
        """Return the next word to guess."""
        if len(self._possibilities) == 1:
            return self._possibilities[0]

        _, tied = best_guesses(self.pool, self._possibilities, self.strategy,
                               hard_history=self._history)
        if not tied:
            # Hard mode always admits the possibilities themselves, so this
            # means the pool doesn't contain the solutions.
            raise RuntimeError("no guess satisfies the hard-mode constraints")
        return pick_guess(tied, set(self._possibilities))

    def respond(self, guess: str, code: int) -> None:
        """
        Whittle down the possibility set given the actual feedback for a guess.

        Raises NoPossibilitiesError if nothing is left; state is unchanged in
        that case.
        """
        self._possibilities = narrow(self._possibilities, guess, code)
        if self.hard_mode:
            self._history.append((guess, code))
        if is_win(code):
            self._won = True
        log_possibilities(self._possibilities)

    # Name used by the external request/response boundary.
    respond_to_feedback = respond
