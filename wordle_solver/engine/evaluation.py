"""
Guess evaluation by feedback partitioning.

For a guess g, every remaining possibility falls into exactly one feedback
bucket. Two numbers summarise the partition:
  - count : how many DISTINCT buckets there are (more = more informative)
  - worst : size of the LARGEST bucket (smaller = better worst case)

A Strategy turns that pair into a tuple key; higher keys are better and are
compared lexicographically:
  - GROUP_SIZE  -> (-worst, count)   minimax first, spread as tie-break
  - GROUP_COUNT -> (count, -worst)   spread first, minimax as tie-break
"""

from __future__ import annotations

import enum
import logging
from collections import defaultdict
from typing import (Callable, Collection, Dict, Iterable, List, NamedTuple,
                    Optional, Sequence, Tuple)

from .constraints import History, is_consistent
from .scoring import score as score_fn

log = logging.getLogger(__name__)

Key = Tuple[int, int]


class Eval(NamedTuple):
    count: int
    worst: int


class Strategy(enum.Enum):
    GROUP_SIZE = "groupsize"
    GROUP_COUNT = "groupcount"

    def key(self, ev: Eval) -> Key:
        if self is Strategy.GROUP_COUNT:
            return ev.count, -ev.worst
        return -ev.worst, ev.count

    @classmethod
    def from_name(cls, name: str) -> "Strategy":
        """Look a strategy up by its CLI name (e.g. 'groupsize')."""
        try:
            return cls(name)
        except ValueError as e:
            raise ValueError(
                f"Unknown strategy: {name}. Available: {get_strategy_names()}") from e


def get_strategy_names() -> List[str]:
    return sorted(s.value for s in Strategy)


def _buckets(guess: str, possibilities: Iterable[str]) -> Dict[int, int]:
    buckets: Dict[int, int] = defaultdict(int)
    _score = score_fn
    for sol in possibilities:
        buckets[_score(guess, sol)] += 1
    return buckets


def evaluate(guess: str, possibilities: Sequence[str]) -> Eval:
    """Partition `possibilities` by feedback; return (count, worst)."""
    buckets = _buckets(guess, possibilities)
    if not buckets:
        return Eval(0, 0)
    return Eval(len(buckets), max(buckets.values()))


def reduce_evals(evals: Iterable[Eval]) -> Eval:
    """
    Combine per-board evaluations of one guess.

    Distinct outcomes add up across boards; the joint worst case is the worst
    of the individual boards.
    """
    count = 0
    worst = 0
    for ev in evals:
        count += ev.count
        worst = max(worst, ev.worst)
    return Eval(count, worst)


def evaluate_capped(guess: str, possibilities: Sequence[str], limit: int) -> Optional[Eval]:
    """evaluate(), or None as soon as some bucket grows past `limit`."""
    buckets: Dict[int, int] = defaultdict(int)
    _score = score_fn
    for sol in possibilities:
        code = _score(guess, sol)
        buckets[code] += 1
        if buckets[code] > limit:
            return None
    if not buckets:
        return Eval(0, 0)
    return Eval(len(buckets), max(buckets.values()))


def evaluate_bounded(guess: str, possibilities: Sequence[str], strategy: Strategy,
                     best_key: Optional[Key]) -> Optional[Key]:
    """
    Like strategy.key(evaluate(...)) but gives up (returns None) as soon as
    the guess can only score strictly below `best_key`.

      - GROUP_SIZE : the running largest bucket only grows
      - GROUP_COUNT: distinct buckets can grow by at most one per word left
    """
    if best_key is None:
        return strategy.key(evaluate(guess, possibilities))

    if strategy is Strategy.GROUP_SIZE:
        ev = evaluate_capped(guess, possibilities, -best_key[0])
        return None if ev is None else strategy.key(ev)

    buckets: Dict[int, int] = defaultdict(int)
    _score = score_fn
    n = len(possibilities)
    target = best_key[0]
    for i, sol in enumerate(possibilities, 1):
        buckets[_score(guess, sol)] += 1
        if len(buckets) + (n - i) < target:
            return None

    if not buckets:
        return strategy.key(Eval(0, 0))
    return strategy.key(Eval(len(buckets), max(buckets.values())))


def rank(pool: Iterable[str],
         key_of: Callable[[str, Optional[Key]], Optional[Key]]) -> Tuple[Optional[Key], List[str]]:
    """
    Scan `pool` and return (best_key, tied_best_guesses) in pool order.

    `key_of(guess, best_key_so_far)` may return None to signal that the guess
    was pruned (it is strictly worse than the current best).
    """
    best_key: Optional[Key] = None
    best: List[str] = []
    for g in pool:
        k = key_of(g, best_key)
        if k is None:
            continue
        if best_key is None or k > best_key:
            best_key, best = k, [g]
        elif k == best_key:
            best.append(g)
    return best_key, best


def best_guesses(pool: Iterable[str], possibilities: Sequence[str], strategy: Strategy,
                 hard_history: History = ()) -> Tuple[Optional[Key], List[str]]:
    """
    All guesses from `pool` tied for the best key against `possibilities`.

    With a non-empty `hard_history`, guesses inconsistent with it are skipped
    before evaluation (hard mode).
    """
    def key_of(g: str, best_key: Optional[Key]) -> Optional[Key]:
        if hard_history and not is_consistent(g, hard_history):
            return None
        return evaluate_bounded(g, possibilities, strategy, best_key)

    return rank(pool, key_of)


def pick_guess(tied: Sequence[str], preferred: Collection[str]) -> str:
    """
    Of the tied best guesses, prefer one that could still be the answer. If
    there isn't one we won't win this turn, but the info gain is the same.
    """
    for g in tied:
        if g in preferred:
            return g
    log.debug("Guessing a word that is not a possible solution: %s", tied[0])
    return tied[0]
