from __future__ import annotations
from pathlib import Path
from typing import List

from wordle_solver.engine.validation import is_word_shape


class WordListError(ValueError):
    """A word list contains a line that isn't a valid word."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_word_list(p: Path | str) -> List[str]:
    """
    Load a word list: one word per line, each exactly five lowercase letters.

    Trailing whitespace is ignored; anything else that isn't a word (blank
    lines included) raises WordListError naming the line.
    """
    words: List[str] = []
    for lineno, ln in enumerate(read_lines(p), 1):
        w = ln.rstrip()
        if not is_word_shape(w):
            raise WordListError(
                f"{p}:{lineno}: invalid word {w!r} (must be 5 lowercase letters)")
        words.append(w)
    return words
