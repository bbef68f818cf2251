"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only (after case normalization)
  - it has exactly WORD_SIZE letters
  - it exists in the provided `allowed` collection

The session calls this against its current guess pool, which in hard mode is
the shrinking candidate set rather than the full allowed list.
"""

from typing import AbstractSet, Iterable, Optional
from .scoring import WORD_SIZE


def normalize_word(word) -> Optional[str]:
    """Lowercase/strip `word`; None if it can't be a WORD_SIZE-letter word."""
    if not isinstance(word, str):
        return None
    w = word.strip().lower()
    if len(w) != WORD_SIZE or not (w.isascii() and w.isalpha()):
        return None
    return w


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess
      allowed : allowed words; a set/frozenset is used as-is, any other
                iterable is normalized into a local set first.
    """
    w = normalize_word(word)
    if w is None:
        return False

    if isinstance(allowed, AbstractSet):
        return w in allowed
    return w in {a.strip().lower() for a in allowed}
