"""
Guess evaluation metrics over a candidate set.

Expected remaining (ERC):
  For guess g, CURRENT candidates partition into buckets by feedback pattern.
  If the true answer is uniform over candidates, the expected leftover after
  seeing the pattern is
      E[left | g] = sum_i ( (c_i / n) * c_i )
  except that the all-MATCH bucket counts as 0: a win leaves nothing to guess.
  Lower is better.

Expected matches:
  Average over candidates of (#MATCH + partial_weight * #CLOSE) in the
  resulting pattern. Higher is better.

Both cost O(len(candidates)) scoring calls and reject an empty candidate set.
"""

from __future__ import annotations
import heapq
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from .scoring import score, MATCH, CLOSE, WINNING_PATTERN

# Weight given to a CLOSE mark when blending it with exact matches
MATCHING_WEIGHT = 0.8


def _require_candidates(candidates: Sequence[str]) -> int:
    n = len(candidates)
    if n == 0:
        raise ValueError("cannot evaluate a guess against an empty candidate set")
    return n


def partition(guess: str, candidates: Iterable[str]) -> Counter:
    """Bucket sizes of `candidates` keyed by the pattern `guess` produces."""
    _score = score
    return Counter(_score(guess, ans) for ans in candidates)


def expected_remaining(guess: str, candidates: Sequence[str]) -> float:
    n = _require_candidates(candidates)
    buckets = partition(guess, candidates)
    if WINNING_PATTERN in buckets:
        buckets[WINNING_PATTERN] = 0
    return sum((b / n) * b for b in buckets.values())


def expected_matches(guess: str, candidates: Sequence[str],
                     partial_weight: float = MATCHING_WEIGHT) -> float:
    """
    Mean weighted letter matches of `guess` over `candidates`.

    partial_weight=1 counts a CLOSE as a full match, 0 counts exact
    positions only.
    """
    n = _require_candidates(candidates)
    total = 0.0
    for patt, b in partition(guess, candidates).items():
        total += b * (patt.count(MATCH) + partial_weight * patt.count(CLOSE))
    return total / n


def top_n(scores: Mapping[str, float], n: int, *, largest: bool) -> List[Tuple[str, float]]:
    """
    The `n` best (word, value) pairs of `scores`.

    Ties keep the mapping's insertion order.
    """
    pick = heapq.nlargest if largest else heapq.nsmallest
    return pick(n, scores.items(), key=lambda kv: kv[1])


def score_all(words: Iterable[str], candidates: Sequence[str],
              partial_weight: float = MATCHING_WEIGHT) -> Tuple[Dict[str, float], Dict[str, float]]:
    """
    Both metrics for every word in `words`.

    Returns (expected_remaining_by_word, expected_matches_by_word), each in
    the order of `words`.
    """
    _require_candidates(candidates)
    remaining: Dict[str, float] = {}
    matches: Dict[str, float] = {}
    for w in words:
        remaining[w] = expected_remaining(w, candidates)
        matches[w] = expected_matches(w, candidates, partial_weight)
    return remaining, matches
