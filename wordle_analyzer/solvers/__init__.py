from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register
from .recommend import best_guess

from . import expected_left  # noqa: F401
from . import expected_matches  # noqa: F401


def create_solver(solver_id: str, **kwargs) -> BaseSolver:
    """
    Factory: instantiate a registered solver by id.
    Keyword arguments (e.g. opening, partial_weight) go to the constructor.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseSolver", "REGISTRY", "register", "best_guess", "create_solver", "get_solver_ids"]
