"""
Experiment harness core primitives.

- run_case:  the solver plays one game against a known answer.
- run_batch: one independent game per answer, optionally on a process pool.
- summarize: aggregate a batch (average guesses, failures, hardest words).

Games normally stop at Wordle's 6-turn limit. With play_out=True a game
continues past it so the true number of steps is measured; a game that still
isn't solved after SOLVER_TURN_LIMIT turns points at a corpus or solver
defect and raises SolverNonconvergence.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Executor, Future, ProcessPoolExecutor, as_completed
from typing import Callable, Dict, Iterator, List, Optional, Sequence

import numpy as np

from wordle_analyzer.datasets.corpus import WordCorpus
from wordle_analyzer.game import Session, SecretAnswer, Status, SolverNonconvergence, WORDLE_MAX_TURNS
from wordle_analyzer.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

# Upper bound on self-play turns when a game is played out past the Wordle limit
SOLVER_TURN_LIMIT = 20

GUESS_POOLS = ("answers", "allowed")


def guess_pool_for(corpus: WordCorpus, guess_pool: str) -> Sequence[str]:
    """Words the solver may guess: only plausible answers, or every allowed word."""
    if guess_pool == "answers":
        return corpus.answers
    if guess_pool == "allowed":
        return corpus.allowed
    raise ValueError(f"guess_pool must be one of {GUESS_POOLS}; got {guess_pool!r}")


def run_case(
        solver: BaseSolver,
        answer: str,
        *,
        corpus: WordCorpus,
        hard_mode: bool = False,
        guess_pool: str = "answers",
        play_out: bool = False,
) -> Dict:
    """
    Execute one game until the solver wins or the turn budget is exhausted.

    Returns:
        dict with keys:
            answer (str), success (bool, won within 6 turns), guesses (int),
            time_ms (float), history (list[(guess, pattern)]),
            values (list[float], the solver's metric for each guess),
            remaining (list[int], candidates left after each guess)
    """
    limit = SOLVER_TURN_LIMIT if play_out else WORDLE_MAX_TURNS
    session = Session(corpus, SecretAnswer(answer), hard_mode=hard_mode,
                      guess_pool=guess_pool_for(corpus, guess_pool), max_turns=limit)

    values: List[float] = []
    remaining: List[int] = []
    t0 = time.perf_counter()
    while not session.is_over:
        guess = solver.next_guess(session.state())
        values.append(solver.last_value)
        remaining.append(session.submit(guess).remaining)
    dt = (time.perf_counter() - t0) * 1000.0

    if play_out and session.status is Status.LOST:
        log.error("solver %s did not converge on %r within %d turns: %s",
                  solver.id, answer, limit, session.history)
        raise SolverNonconvergence(answer, limit, session.history)

    guesses = len(session.history)
    return {
        "answer": session.source.answer,
        "success": session.status is Status.WON and guesses <= WORDLE_MAX_TURNS,
        "guesses": guesses,
        "time_ms": dt,
        "history": session.history,
        "values": values,
        "remaining": remaining,
    }


# ---- process-pool plumbing (one solver + corpus per worker process) ----

_worker: Dict = {}


def _init_worker(corpus: WordCorpus, solver_id: str, solver_kwargs: Dict, options: Dict) -> None:
    _worker["corpus"] = corpus
    _worker["solver"] = create_solver(solver_id, **solver_kwargs)
    _worker["options"] = options


def _play_in_worker(answer: str) -> Dict:
    return run_case(_worker["solver"], answer, corpus=_worker["corpus"], **_worker["options"])


def _collect(executor: Executor, futs: Sequence[Future]) -> Iterator[Dict]:
    """
    Yield results as games finish. The first failure cancels every game that
    has not started yet, then propagates.
    """
    try:
        for fut in as_completed(futs):
            yield fut.result()
    except BaseException:
        executor.shutdown(wait=False, cancel_futures=True)
        raise


def run_batch(
        solver_id: str,
        cases: Sequence[str],
        *,
        corpus: WordCorpus,
        solver_kwargs: Optional[Dict] = None,
        hard_mode: bool = False,
        guess_pool: str = "answers",
        play_out: bool = False,
        workers: int = 1,
        on_result: Optional[Callable[[Dict], None]] = None,
) -> List[Dict]:
    """
    Run one independent game per answer in `cases`.

    With workers > 1 the games are spread over a process pool. The turn-1
    guess is resolved once up front so every worker starts from it instead
    of re-scanning the whole pool. Results come back in `cases` order;
    `on_result` is called as each game finishes (e.g. to tick a progress bar).
    """
    solver_kwargs = dict(solver_kwargs or {})
    options = {"hard_mode": hard_mode, "guess_pool": guess_pool, "play_out": play_out}
    solver = create_solver(solver_id, **solver_kwargs)

    if not solver.opening:
        pool = guess_pool_for(corpus, guess_pool)
        solver_kwargs["opening"], _ = solver.choose(pool, corpus.answers)
        solver = create_solver(solver_id, **solver_kwargs)
        log.info("opening guess for %s: %s", solver_id, solver_kwargs["opening"])

    out: List[Dict] = []
    if workers <= 1:
        for ans in cases:
            r = run_case(solver, ans, corpus=corpus, **options)
            r["solver_id"] = solver_id
            out.append(r)
            if on_result:
                on_result(r)
        return out

    with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                             initargs=(corpus, solver_id, solver_kwargs, options)) as executor:
        futs = [executor.submit(_play_in_worker, ans) for ans in cases]
        for r in _collect(executor, futs):
            r["solver_id"] = solver_id
            out.append(r)
            if on_result:
                on_result(r)

    order = {ans.strip().lower(): i for i, ans in enumerate(cases)}
    out.sort(key=lambda r: order[r["answer"]])
    return out


def summarize(results: Sequence[Dict]) -> Dict:
    """
    Aggregate a batch. Every statistic is order-independent, so results from
    a process pool can arrive in any order.
    """
    if not results:
        raise ValueError("no results to summarize")

    guesses = np.array([r["guesses"] for r in results], dtype=int)
    success = np.array([r["success"] for r in results], dtype=bool)
    max_guesses = int(guesses.max())
    counts = np.bincount(guesses)

    return {
        "games": len(results),
        "average_guesses": float(guesses.mean()),
        "failures": int((~success).sum()),
        "max_guesses": max_guesses,
        "hardest": sorted(r["answer"] for r in results if r["guesses"] == max_guesses),
        "distribution": {int(k): int(v) for k, v in enumerate(counts) if v},
    }
