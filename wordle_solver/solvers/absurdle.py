"""
Solver for Absurdle's challenge mode.

Absurdle never commits to an answer. For each guess it returns whichever
truthful feedback eliminates the FEWEST remaining possibilities, breaking ties
toward the feedback that gives away the least (entropy_tiebreak). In challenge
mode the player is handed a target word and must force the judge down to it.

So a guess is only usable if the judge's feedback for it is the same feedback
the target would produce; otherwise the target gets eliminated. Among usable
guesses we prefer the ones whose judged feedback eliminates the most.

Search:
  Keep a stack of levels, one per turn. Each level holds the usable guesses
  found at that depth, ordered worst-to-best, and the path being tried is the
  last guess of every level. A level with nothing usable is a dead end: drop
  the last guess of the previous level (dropping whole levels as they empty)
  and try again. After every push/pop the game state is rebuilt by replaying
  the path from the full solutions list.

Every usable guess removes at least one possibility, so depth is bounded by
the size of the solutions list and the search always terminates.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from wordle_solver.engine import (all_possible_feedbacks, entropy_tiebreak,
                                  is_consistent, narrow, score)
from .base import merge_pools

log = logging.getLogger(__name__)


class ChallengeResult(NamedTuple):
    solved: bool
    guesses: List[str]   # winning path, ending with the target; empty on failure
    backtracks: int


def judge(guess: str, possibilities: Sequence[str],
          feedbacks: Sequence[int]) -> Tuple[int, int]:
    """
    Absurdle's response to `guess`: (code, number_of_possibilities_eliminated).
    """
    buckets = {}
    for sol in possibilities:
        code = score(guess, sol)
        buckets[code] = buckets.get(code, 0) + 1

    n = len(possibilities)
    best_code = None
    best_elim = n + 1
    for code in feedbacks:
        elim = n - buckets.get(code, 0)
        if elim < best_elim or (
                elim == best_elim and entropy_tiebreak(code) < entropy_tiebreak(best_code)):
            best_code, best_elim = code, elim
    return best_code, best_elim


class ChallengeSolver:
    def __init__(self, target: str, guessable: Iterable[str], solutions: Iterable[str], *,
                 hard_mode: bool = False, feedbacks: Optional[Sequence[int]] = None):
        self.guessable: List[str] = list(guessable)
        self.solutions: List[str] = list(solutions)
        if target not in self.solutions:
            raise ValueError(f"target word {target!r} is not in the solutions list")
        self.target = target
        self.hard_mode = bool(hard_mode)
        self.feedbacks = all_possible_feedbacks() if feedbacks is None else feedbacks
        # The target itself is only ever played once it's the last word left.
        self.pool: List[str] = [w for w in merge_pools(self.guessable, self.solutions)
                                if w != target]

        self.possibilities: List[str] = list(self.solutions)
        self.history: List[Tuple[str, int]] = []

    def viable_guesses(self) -> List[str]:
        """
        Guesses that keep the target alive, ordered worst-to-best by how many
        possibilities the judge's feedback eliminates.
        """
        if len(self.possibilities) == 1:
            return list(self.possibilities)

        guesses: List[str] = []
        best_elim = 1  # a guess that eliminates nothing makes no progress

        for g in self.pool:
            if self.hard_mode and not is_consistent(g, self.history):
                continue

            code, elim = judge(g, self.possibilities, self.feedbacks)
            if elim < best_elim:
                continue
            if score(g, self.target) != code:
                # Absurdle would knock the target out with this one.
                continue

            best_elim = elim
            guesses.append(g)

        return guesses

    def _replay(self, stack: List[List[str]]) -> None:
        """Rebuild possibilities/history from scratch for the current path."""
        self.possibilities = list(self.solutions)
        self.history = []
        for level in stack:
            g = level[-1]
            code = score(g, self.target)
            self.possibilities = narrow(self.possibilities, g, code)
            self.history.append((g, code))

    def solve(self) -> ChallengeResult:
        stack: List[List[str]] = []
        backtracks = 0
        self._replay(stack)

        while True:
            nxt = self.viable_guesses()

            if not nxt:
                # Dead end. Drop the last guess; an emptied level means the
                # guess before it is a dead end too.
                log.debug("dead end after %s", [lvl[-1] for lvl in stack])
                if not stack:
                    log.info("Total failure: no usable first guess for %s", self.target)
                    return ChallengeResult(False, [], backtracks)
                backtracks += 1
                stack[-1].pop()
                while not stack[-1]:
                    stack.pop()
                    if not stack:
                        log.info("Total failure: search exhausted for %s", self.target)
                        return ChallengeResult(False, [], backtracks)
                    stack[-1].pop()
            elif nxt == [self.target]:
                path = [lvl[-1] for lvl in stack] + [self.target]
                log.info("Solved %s: %s", self.target, " ".join(path))
                return ChallengeResult(True, path, backtracks)
            else:
                stack.append(nxt)

            self._replay(stack)
            log.debug("trying %s (%d left)", " ".join(lvl[-1] for lvl in stack),
                      len(self.possibilities))
