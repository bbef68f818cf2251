"""
Candidate filtering given game feedback.

Given:
  - a pool of words (e.g., the answers list)
  - one (guess, pattern) pair, or a whole history of them

Return:
  - words that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
The session uses it both for the remaining answers and, in hard mode, for the
words the player is still allowed to guess.
"""

from typing import Iterable, List, Tuple
from .scoring import score, WORD_SIZE

# History is a sequence of (guess, pattern) tuples produced by the engine.
History = Iterable[Tuple[str, str]]  # (guess, pattern)


def prune(candidates: Iterable[str], guess: str, pattern: str) -> List[str]:
    """
    Keep only the candidates that would produce `pattern` if `guess` were
    scored against them. Order is preserved; the input is left untouched.
    """
    return [w for w in candidates if score(guess, w) == pattern]


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded patterns for
    every (guess, pattern) in `history`.

    Args:
      words   : iterable of candidate words (often the answers pool)
      history : iterable of (guess, pattern) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: skip anything that isn't a clean 5-letter alpha token
        if len(w) != WORD_SIZE or not w.isalpha():
            continue

        # A candidate that fails to reproduce any past pattern is invalid.
        if all(score(g, w) == patt for g, patt in history):
            out.append(w)

    return out
