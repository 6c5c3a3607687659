"""
Solve every answer with both strategies and histogram the guess counts.

The solutions list is cut into contiguous shards and each shard is solved on
its own worker thread with its own solver instances; nothing mutable is
shared. Per-worker count arrays are summed elementwise once all workers are
done. Any worker exception (e.g. NoPossibilitiesError from a corrupt catalog)
propagates to the caller.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, NamedTuple, Sequence, Tuple

import numpy as np

from wordle_solver.engine import Strategy
from wordle_solver.solvers import Solver
from .core import MAX_GUESSES, run_case

log = logging.getLogger(__name__)

DEFAULT_WORKERS = 8
# Index i counts answers solved in i guesses; grown on demand.
HISTOGRAM_BINS = 10


class HistogramResult(NamedTuple):
    groupcount: np.ndarray
    groupsize: np.ndarray
    record: np.ndarray  # [groupcount wins, groupsize wins, ties]
    failed: np.ndarray  # [groupcount, groupsize] games that hit max_guesses
    games: List[Dict]   # run_case results stamped with "strategy"


def shard_bounds(n: int, workers: int) -> List[Tuple[int, int]]:
    """
    Contiguous [start, end) slices; the last shard takes the remainder.
    """
    workers = max(1, min(workers, n)) if n else 1
    per = n // workers
    bounds = []
    start = 0
    for i in range(workers):
        end = n if i == workers - 1 else start + per
        bounds.append((start, end))
        start = end
    return bounds


def _counts(guess_counts: Sequence[int]) -> np.ndarray:
    return np.bincount(np.asarray(guess_counts, dtype=np.int64), minlength=HISTOGRAM_BINS)


def _add(arrays: Sequence[np.ndarray]) -> np.ndarray:
    size = max(len(a) for a in arrays)
    total = np.zeros(size, dtype=np.int64)
    for a in arrays:
        total[: len(a)] += a
    return total


def _solve_shard(guessable: Sequence[str], solutions: Sequence[str], answers: Sequence[str],
                 hard_mode: bool, max_guesses: int, progress) -> HistogramResult:
    size_results: List[int] = []
    count_results: List[int] = []
    record = np.zeros(3, dtype=np.int64)
    failed = np.zeros(2, dtype=np.int64)
    games: List[Dict] = []

    for answer in answers:
        by_size = run_case(Solver(guessable, solutions, hard_mode=hard_mode,
                                  strategy=Strategy.GROUP_SIZE), answer,
                           max_guesses=max_guesses)
        by_count = run_case(Solver(guessable, solutions, hard_mode=hard_mode,
                                   strategy=Strategy.GROUP_COUNT), answer,
                            max_guesses=max_guesses)
        by_size["strategy"] = Strategy.GROUP_SIZE.value
        by_count["strategy"] = Strategy.GROUP_COUNT.value
        games += [by_count, by_size]

        # A game that ran out of guesses is never binned; for the record it
        # loses to any solve.
        size_n = count_n = max_guesses + 1
        if by_size["success"]:
            size_n = by_size["guesses"]
            size_results.append(size_n)
        else:
            failed[1] += 1
        if by_count["success"]:
            count_n = by_count["guesses"]
            count_results.append(count_n)
        else:
            failed[0] += 1

        log.info("%d %d %s", count_n, size_n, answer)
        if count_n < size_n:
            record[0] += 1
        elif size_n < count_n:
            record[1] += 1
        else:
            record[2] += 1

        if progress is not None:
            progress.update(1)

    return HistogramResult(_counts(count_results), _counts(size_results), record, failed, games)


def histogram(guessable: Sequence[str], solutions: Sequence[str], *, hard_mode: bool = False,
              workers: int = DEFAULT_WORKERS, max_guesses: int = MAX_GUESSES,
              progress=None) -> HistogramResult:
    """
    Solve every word in `solutions` with a GroupSize and a GroupCount solver.

    Args:
        max_guesses: games still unsolved after this many guesses count as
                     failed and stay out of the histograms.
        progress: optional object with update(n) (e.g. a tqdm bar), called
                  once per answer from the worker threads.

    Returns:
        HistogramResult; `games` is in solutions order, GroupCount first.
    """
    guessable = list(guessable)
    solutions = list(solutions)
    bounds = shard_bounds(len(solutions), workers)

    with ThreadPoolExecutor(max_workers=len(bounds)) as ex:
        futures = [
            ex.submit(_solve_shard, guessable, solutions, solutions[a:b], hard_mode,
                      max_guesses, progress)
            for a, b in bounds
        ]
        parts = [f.result() for f in futures]

    games: List[Dict] = []
    for p in parts:
        games.extend(p.games)

    return HistogramResult(
        groupcount=_add([p.groupcount for p in parts]),
        groupsize=_add([p.groupsize for p in parts]),
        record=_add([p.record for p in parts]),
        failed=_add([p.failed for p in parts]),
        games=games,
    )
