"""
Expected Letter Matches.

Idea:
  Score each guess by the average number of letters it would light up over
  the CURRENT candidates, an exact match counting 1 and a right-letter /
  wrong-position hit counting `partial_weight`. Pick the max.

partial_weight=1.0 treats CLOSE as a full match, 0.0 rewards exact positions
only; the default 0.8 blends the two.
"""

from __future__ import annotations
from typing import Optional, Sequence
from .base import BaseSolver, register
from wordle_analyzer.engine import expected_matches, MATCHING_WEIGHT


@register
class ExpectedMatchesSolver(BaseSolver):
    id = "expected_matches"
    name = "Expected Weighted Letter Matches"
    version = "1.0.0"
    minimize = False

    def __init__(self, opening: Optional[str] = None, partial_weight: float = MATCHING_WEIGHT):
        super().__init__(opening=opening)
        self.partial_weight = float(partial_weight)

    def metric(self, guess: str, candidates: Sequence[str]) -> float:
        return expected_matches(guess, candidates, self.partial_weight)
