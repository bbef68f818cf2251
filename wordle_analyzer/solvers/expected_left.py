"""
Expected Remaining Candidates (ERC).

Idea:
  For guess g, if CURRENT candidates partition into buckets of sizes {c_i},
  the expected leftover after seeing the pattern is
      E[left | g] = sum_i ( (c_i / n) * c_i )
  with the winning bucket counted as empty. Pick the g that minimizes it.

Tracks entropy closely but simpler to compute/compare.
"""

from __future__ import annotations
from typing import Sequence
from .base import BaseSolver, register
from wordle_analyzer.engine import expected_remaining


@register
class ExpectedLeftSolver(BaseSolver):
    id = "expected_left"
    name = "Expected Remaining Candidates"
    version = "2.0.0"
    minimize = True

    def metric(self, guess: str, candidates: Sequence[str]) -> float:
        return expected_remaining(guess, candidates)
