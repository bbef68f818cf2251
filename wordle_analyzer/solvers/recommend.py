"""
Best-guess selection.

A linear scan of the guess pool, scoring each word against the current
candidates with one metric. Only a strict improvement replaces the current
best, so ties go to the word that comes first in pool order. Callers that
need reproducible picks must keep their word lists in a fixed order.
"""

from __future__ import annotations
from typing import Callable, Sequence, Tuple


def best_guess(
        pool: Sequence[str],
        candidates: Sequence[str],
        metric: Callable[[str, Sequence[str]], float],
        *,
        minimize: bool = True,
) -> Tuple[str, float]:
    """
    Return (word, metric value) of the best word in `pool`.

    Raises ValueError when the pool or the candidate set is empty.
    """
    if not pool:
        raise ValueError("guess pool is empty")
    if not candidates:
        raise ValueError("candidate set is empty")

    best_word = None
    best_value = 0.0
    for g in pool:
        v = metric(g, candidates)
        if best_word is None or (v < best_value if minimize else v > best_value):
            best_word, best_value = g, v
    return best_word, best_value
