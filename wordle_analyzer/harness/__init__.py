from .core import run_case, run_batch, summarize, guess_pool_for, SOLVER_TURN_LIMIT, GUESS_POOLS
from .io import write_csv, write_manifest

__all__ = ["run_case", "run_batch", "summarize", "guess_pool_for", "SOLVER_TURN_LIMIT",
           "GUESS_POOLS", "write_csv", "write_manifest"]
