"""
Solve several boards at once from one guess stream (Dordle, Quordle,
Duotrigordle, ...).

Each board is a plain single-board Solver. Every round one guess is played on
all unfinished boards; the caller then reports one feedback per unfinished
board before asking for the next guess:

    guess = ms.next_guess()
    ms.next_round()
    while (i := ms.index_needing_response()) is not None:
        ms.respond(i, guess, feedback_for_board_i)
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional

from wordle_solver.engine import (Key, Strategy, evaluate, evaluate_capped, is_win, pick_guess,
                                  rank, reduce_evals)
from .base import BaseSolver
from .single import Solver

log = logging.getLogger(__name__)


class Board(NamedTuple):
    possibilities: List[str]
    done: bool


class MultiSolver(BaseSolver):
    def __init__(self, count: int, guessable: Iterable[str], solutions: Iterable[str], *,
                 strategy: Strategy = Strategy.GROUP_SIZE):
        super().__init__(guessable, solutions)
        if count < 1:
            raise ValueError(f"board count must be at least 1; got {count}")
        self.strategy = strategy
        self._solvers = [Solver(self.guessable, self.solutions, strategy=strategy)
                         for _ in range(count)]
        self._responded = [False] * count
        self._done = [False] * count

    @property
    def boards(self) -> List[Board]:
        return [Board(s.possibilities, d) for s, d in zip(self._solvers, self._done)]

    def _active(self) -> List[Solver]:
        return [s for s, d in zip(self._solvers, self._done) if not d]

    def all_done(self) -> bool:
        return all(self._done)

    def index_needing_response(self) -> Optional[int]:
        for i, (r, d) in enumerate(zip(self._responded, self._done)):
            if not r and not d:
                return i
        return None

    def next_round(self) -> None:
        self._responded = [False] * len(self._responded)

    def next_guess(self) -> str:
        active = self._active()
        if not active:
            raise RuntimeError("all boards are already solved")

        # A board with one word left is a free win this round.
        for s in active:
            if len(s.possibilities) == 1:
                return s.possibilities[0]

        possibility_sets = [s.possibilities for s in active]

        def key_of(g: str, best: Optional[Key]) -> Optional[Key]:
            # Under GroupSize one board with a bucket past the best joint
            # worst case already loses.
            limit = None
            if best is not None and self.strategy is Strategy.GROUP_SIZE:
                limit = -best[0]
            evals = []
            for p in possibility_sets:
                ev = evaluate(g, p) if limit is None else evaluate_capped(g, p, limit)
                if ev is None:
                    return None
                evals.append(ev)
            return self.strategy.key(reduce_evals(evals))

        best_key, tied = rank(self.pool, key_of)
        log.debug("best joint key %s shared by %d guess(es)", best_key, len(tied))

        preferred = set()
        for p in possibility_sets:
            preferred.update(p)
        return pick_guess(tied, preferred)

    def respond(self, index: int, guess: str, code: int) -> None:
        """
        Apply feedback to one board. Each unfinished board takes exactly one
        response per round.
        """
        if self._done[index]:
            raise ValueError(f"board {index} is already solved")
        if self._responded[index]:
            raise ValueError(f"board {index} already has feedback this round")
        self._solvers[index].respond(guess, code)
        self._responded[index] = True
        if is_win(code):
            self._done[index] = True
