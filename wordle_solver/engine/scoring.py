"""
Wordle-style scoring (feedback) for a single (guess, solution) pair.

Feedback is packed into a small integer so it can be used directly as a
bucket index or dict key:
  - each position is one of Absent (0), Present (1), Correct (2)
  - positions are packed base-3, first letter most significant
  - so there are exactly 3**5 == 243 distinct codes, 242 meaning "all correct"

Text form is one character per position:
  - 'a' : absent  = letter not present (or present fewer times than guessed)
  - 'p' : present = correct letter in the wrong position
  - 'c' : correct = correct letter in the correct position

Algorithm (two-pass, canonical for Wordle):
  1) Count every letter of the solution, then mark all exact matches Correct
     and consume one count for each, so they can't also satisfy a Present.
  2) Remaining positions become Present only if the letter still has count.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Tuple

WORD_LENGTH = 5

ABSENT, PRESENT, CORRECT = 0, 1, 2
LETTERS = "apc"

NUM_FEEDBACKS = 3 ** WORD_LENGTH
WIN = NUM_FEEDBACKS - 1

# Every packed code, built once at import and never mutated.
_ALL_FEEDBACKS: Tuple[int, ...] = tuple(range(NUM_FEEDBACKS))


def _pack(marks) -> int:
    code = 0
    for m in marks:
        code = code * 3 + m
    return code


def _unpack(code: int) -> Tuple[int, ...]:
    marks = []
    for _ in range(WORD_LENGTH):
        code, m = divmod(code, 3)
        marks.append(m)
    return tuple(reversed(marks))


def score(guess: str, solution: str) -> int:
    """
    Compute the packed feedback code for `guess` against `solution`.

    Preconditions:
      - both words are lowercase and WORD_LENGTH long

    Examples:
      encode(score("squid", "maker")) -> "aaaaa"
      encode(score("espoo", "glorp")) -> "aappa"
    """
    marks = [ABSENT] * WORD_LENGTH
    remaining = Counter(solution)

    # Pass 1: exact positions reserve their letter.
    for i, (g, s) in enumerate(zip(guess, solution)):
        if g == s:
            marks[i] = CORRECT
            remaining[g] -= 1

    # Pass 2: displaced letters, capped by what's left in the solution.
    for i, g in enumerate(guess):
        if marks[i] == CORRECT:
            continue
        if remaining[g] > 0:
            marks[i] = PRESENT
            remaining[g] -= 1

    return _pack(marks)


def encode(code: int) -> str:
    """Packed code -> 5-char 'a'/'p'/'c' string."""
    return "".join(LETTERS[m] for m in _unpack(code))


def decode(text: str) -> Optional[int]:
    """
    Parse a 5-char 'a'/'p'/'c' string. Returns None on any length mismatch or
    unknown character; input is never coerced (no case folding, no trimming).
    """
    if len(text) != WORD_LENGTH:
        return None
    marks = []
    for ch in text:
        m = LETTERS.find(ch)
        if m < 0:
            return None
        marks.append(m)
    return _pack(marks)


def pattern(guess: str, solution: str) -> str:
    """Text feedback for a (guess, solution) pair."""
    return encode(score(guess, solution))


def is_win(code: int) -> bool:
    return code == WIN


def all_possible_feedbacks() -> Tuple[int, ...]:
    """
    All 243 codes. Some are unreachable for any real pair (e.g. four Correct
    and one Present); they simply never match during a search.
    """
    return _ALL_FEEDBACKS


def entropy_tiebreak(code: int) -> Tuple[int, ...]:
    """
    Integer ordering key used to break ties between feedbacks that eliminate
    the same number of possibilities. Lexicographic on
    (#correct, #present, #absent, per-position marks), with
    Correct > Present > Absent at each position. Smaller means less
    information was given away.
    """
    marks = _unpack(code)
    return (
        marks.count(CORRECT),
        marks.count(PRESENT),
        marks.count(ABSENT),
    ) + marks
