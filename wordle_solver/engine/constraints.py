"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the solutions list)
  - a history of (guess, code) pairs

Return:
  - words that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking possibility set.
The same consistency check doubles as the hard-mode guess filter: in hard
mode a guess is only allowed if it could itself be the answer.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .scoring import encode, score

# History is a sequence of (guess, code) tuples produced by the engine.
History = Sequence[Tuple[str, int]]


class SolverError(Exception):
    """Base class for errors raised while solving."""


class NoPossibilitiesError(SolverError):
    """
    Feedback eliminated every remaining word.

    Only happens if the feedback stream is inconsistent with the catalog
    (mistyped feedback, or the answer isn't in the solutions list). The
    current solve can't continue.
    """

    def __init__(self, guess: str, code: int):
        self.guess = guess
        self.code = code
        super().__init__(
            f"no possibilities left after {guess!r} scored {encode(code)!r}")


def is_consistent(word: str, history: History) -> bool:
    """
    True if `word` would reproduce every recorded code when it is the
    solution. Used both for possibility filtering and for hard mode.
    """
    for g, code in history:
        if score(g, word) != code:
            return False
    return True


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded codes for every
    (guess, code) in `history`. Order is preserved as in `words`.
    """
    return [w for w in words if is_consistent(w, history)]


def narrow(possibilities: Sequence[str], guess: str, code: int) -> List[str]:
    """
    Apply a single (guess, code) observation.

    Raises NoPossibilitiesError instead of returning an empty list.
    """
    out = [w for w in possibilities if score(guess, w) == code]
    if not out:
        raise NoPossibilitiesError(guess, code)
    return out
