from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

log = logging.getLogger(__name__)


def merge_pools(*lists: Iterable[str]) -> List[str]:
    """Stable union of word lists (first occurrence wins)."""
    seen = set()
    out: List[str] = []
    for words in lists:
        for w in words:
            if w not in seen:
                seen.add(w)
                out.append(w)
    return out


def log_possibilities(possibilities: Sequence[str]) -> None:
    if len(possibilities) <= 10:
        log.info("Possibilities left: %s", ", ".join(possibilities))
    else:
        log.info("%d possibilities left", len(possibilities))


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    Holds the two catalogs for one solve. Both are copied so the caller's
    lists can't change under a running game.

    guessable : words that may be guessed but are never answers
    solutions : words that may be the answer
    """

    def __init__(self, guessable: Iterable[str], solutions: Iterable[str]):
        self.guessable: List[str] = list(guessable)
        self.solutions: List[str] = list(solutions)
        if not self.solutions:
            raise ValueError("solutions list is empty")
        # Answers first: on ties, earlier words are the ones that can win.
        self.pool: List[str] = merge_pools(self.solutions, self.guessable)

    def next_guess(self) -> str:
        raise NotImplementedError("Override in subclass")
