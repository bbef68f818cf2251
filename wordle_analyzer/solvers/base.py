from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple, Type

from .recommend import best_guess

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver picks the best word of the session's guess pool under one metric.

    Subclasses set `minimize` and implement `metric(guess, candidates)`.
    `opening` fixes the turn-1 guess; without it the turn-1 scan is run once
    and remembered for later games over the same pool and candidates.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"
    minimize = True

    def __init__(self, opening: Optional[str] = None):
        self.opening = opening.strip().lower() if opening else None
        self.last_value: Optional[float] = None
        self._opening_cache: Dict[Tuple[Tuple[str, ...], Tuple[str, ...]], Tuple[str, float]] = {}

    def metric(self, guess: str, candidates: Sequence[str]) -> float:
        raise NotImplementedError("Override in subclass")

    def choose(self, pool: Sequence[str], candidates: Sequence[str]) -> Tuple[str, float]:
        return best_guess(pool, candidates, self.metric, minimize=self.minimize)

    def _opening_for(self, pool: Sequence[str], candidates: Sequence[str]) -> Tuple[str, float]:
        key = (tuple(pool), tuple(candidates))
        if key not in self._opening_cache:
            self._opening_cache[key] = self.choose(pool, candidates)
        return self._opening_cache[key]

    def next_guess(self, state: dict) -> str:
        """
        Decide the next guess.

        Args:
            state: dict from Session.state() with keys
                "turn", "history", "candidates", "pool", "hard_mode".
        """
        candidates: List[str] = state["candidates"]
        pool: Sequence[str] = state["pool"]

        if state["turn"] == 1:
            if self.opening:
                self.last_value = self.metric(self.opening, candidates)
                return self.opening
            guess, self.last_value = self._opening_for(pool, candidates)
            return guess

        guess, self.last_value = self.choose(pool, candidates)
        return guess
