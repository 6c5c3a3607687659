"""
Prompt helpers for playing along with a real game.

Streams are passed in (rather than using input()) so tests can drive them with
io.StringIO.
"""

from __future__ import annotations

from typing import Collection, TextIO

from wordle_solver.engine import decode, validate_guess

FEEDBACK_HELP = ("Feedback must be 5 characters, all either 'a' (absent), "
                 "'c' (correct), or 'p' (present).")


def _prompt(stdin: TextIO, stdout: TextIO, label: str, quiet: bool) -> str:
    if not quiet:
        stdout.write(label)
        stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("input closed")
    return line.rstrip("\r\n")


def read_feedback(stdin: TextIO, stdout: TextIO, *, quiet: bool = False) -> int:
    """Keep asking until a valid a/p/c string is entered; return its code."""
    while True:
        code = decode(_prompt(stdin, stdout, "Feedback: ", quiet))
        if code is not None:
            return code
        stdout.write(FEEDBACK_HELP + "\n")


def read_guess(stdin: TextIO, stdout: TextIO, allowed: Collection[str]) -> str:
    """Keep asking until a word from `allowed` is entered."""
    while True:
        word = _prompt(stdin, stdout, "Guess: ", False)
        if validate_guess(word, allowed):
            return word
        stdout.write("Not a valid guess\n")
