"""
Lightweight guess validation.

This module answers the question: "Is this word acceptable as a guess?"
A guess is valid iff:
  - it is a string
  - it is lowercase a–z only
  - it has exact length WORD_LENGTH
  - it exists in the provided `allowed` collection

Unlike the word-list loader, nothing is normalized here: "CRANE" is rejected
so that interactive entry matches exactly what the catalogs contain.
"""

from typing import Collection

from .scoring import WORD_LENGTH


def is_word_shape(word: str) -> bool:
    """Exactly WORD_LENGTH lowercase ASCII letters."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and word.isascii()
        and word.isalpha()
        and word.islower()
    )


def validate_guess(word: str, allowed: Collection[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - Pass a set for `allowed` when calling in a loop; membership on a list
        is linear.
    """
    return is_word_shape(word) and word in allowed
