# apps/cli/run.py
"""
Batch analyzer: let a solver play every answer (or a sample) and report.

This script:
  1) Validates the wordlists (prints counts + SHA, answers ⊆ allowed).
  2) Loads the corpus and runs one self-play game per answer, optionally on
     several worker processes, with a live progress indicator.
  3) Prints the summary (average steps, failures, hardest words) and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, wordlist hashes, git commit, summary
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np
from tqdm import tqdm

from wordle_analyzer.datasets import (WordCorpus, validate_wordlists, pretty_summary,
                                      DEFAULT_ANSWERS, DEFAULT_ALLOWED)
from wordle_analyzer.engine import MATCHING_WEIGHT
from wordle_analyzer.game import WORDLE_MAX_TURNS
from wordle_analyzer.harness import run_batch, summarize, GUESS_POOLS
from wordle_analyzer.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_analyzer.solvers import get_solver_ids

DEFAULT_OPENING = "raise"


def _solver_kwargs(args) -> dict:
    kwargs = {"opening": args.opening or None}
    if args.solver == "expected_matches":
        kwargs["partial_weight"] = args.partial_weight
    return kwargs


class _PlainProgress:
    """One-line progress on stderr, refreshed at most once a second."""

    def __init__(self, total: int):
        self.total = total
        self.done = 0
        self.start = time.time()
        self.last_print = 0.0

    def __call__(self, _result) -> None:
        self.done += 1
        now = time.time()
        if (now - self.last_print >= 1.0) or (self.done == self.total):
            elapsed = now - self.start
            rate = (self.done / elapsed) if elapsed > 0 else 0.0
            remaining = (self.total - self.done) / rate if rate > 0 else 0.0
            pct = 100.0 * self.done / max(1, self.total)
            sys.stderr.write(
                f"\r[{self.done}/{self.total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            self.last_print = now

    def close(self) -> None:
        sys.stderr.write("\n")
        sys.stderr.flush()


def main():
    ap = argparse.ArgumentParser(description="wordle-analyzer: run the solver over the answer list")
    ap.add_argument("--solver", default="expected_left",
                    help=f"solver id (one of: {', '.join(get_solver_ids())})")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS),
                    help="path to answers list (one word per line)")
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED),
                    help="path to allowed guesses (superset of answers)")
    ap.add_argument("--opening", default=DEFAULT_OPENING,
                    help="fixed first guess ('' to let the solver pick it)")
    ap.add_argument("--partial-weight", type=float, default=MATCHING_WEIGHT,
                    help="CLOSE weight for the expected_matches solver")
    ap.add_argument("--hard", action="store_true",
                    help="hard mode: after turn 1 only guess remaining possible answers")
    ap.add_argument("--guess-pool", choices=GUESS_POOLS, default="answers",
                    help="words the solver may guess outside hard mode")
    ap.add_argument("--play-out", action="store_true",
                    help="keep playing past 6 turns to measure the true number of steps")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="seed for --sample")
    ap.add_argument("--workers", type=int, default=1, help="worker processes")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate wordlists and print a one-liner summary
    rep = validate_wordlists(args.answers, args.allowed)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    # 2) Load the corpus once; it is shared read-only by every game
    corpus = WordCorpus.from_files(args.answers, args.allowed)

    # 3) Choose cases (deterministic sample by seed)
    answers = list(corpus.answers)
    if args.sample and args.sample < len(answers):
        rng = np.random.default_rng(args.seed)
        cases = [str(w) for w in rng.choice(answers, size=args.sample, replace=False)]
    else:
        cases = answers
    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    bar = None
    on_result = None
    if mode == "bar":
        bar = tqdm(total=total, ncols=80, desc="Running", unit="game")
        on_result = lambda _r: bar.update(1)  # noqa: E731
    elif mode == "plain":
        on_result = _PlainProgress(total)

    # 5) Run the batch
    results = run_batch(
        args.solver, cases, corpus=corpus, solver_kwargs=_solver_kwargs(args),
        hard_mode=args.hard, guess_pool=args.guess_pool, play_out=args.play_out,
        workers=args.workers, on_result=on_result,
    )
    if bar is not None:
        bar.close()
    elif mode == "plain":
        on_result.close()

    summary = summarize(results)
    print(f"Avg steps to solve: {summary['average_guesses']:.4f}")
    print(f"Number of failures (>{WORDLE_MAX_TURNS} steps): {summary['failures']} out of {summary['games']}")
    print(f"The hardest words took {summary['max_guesses']} steps: {summary['hardest']}")

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "solver_id": args.solver,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
