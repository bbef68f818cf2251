# apps/cli/analyze.py
"""
Single-game and opening-word analysis.

Commands:
  play [WORD]            the solver plays WORD (or a random answer), traced
  starters [--word W]    best starting words over the whole answer list
  starter WORD           expected remaining / matches for one starting word

Usage:
    python -m apps.cli.analyze --hard play crane
    python -m apps.cli.analyze starters --top 15 --word adieu
"""

from __future__ import annotations

import argparse
import logging
import random

from wordle_analyzer.datasets import WordCorpus, DEFAULT_ANSWERS, DEFAULT_ALLOWED
from wordle_analyzer.engine import MATCHING_WEIGHT, is_winning, normalize_word
from wordle_analyzer.game import SolverNonconvergence, opening_report, starter_scores
from wordle_analyzer.game.hints import format_opening_report, OPENING_TOP
from wordle_analyzer.harness import run_case, GUESS_POOLS
from wordle_analyzer.solvers import create_solver, get_solver_ids


def _require_answer(corpus: WordCorpus, word: str) -> str:
    w = normalize_word(word)
    if w is None or w not in corpus.answer_set:
        raise SystemExit(f"{word} is not a valid Wordle answer")
    return w


def cmd_play(args, corpus: WordCorpus) -> None:
    answer = _require_answer(corpus, args.word) if args.word else corpus.pick_random(random.Random(args.seed))
    kwargs = {"opening": args.opening or None}
    if args.solver == "expected_matches":
        kwargs["partial_weight"] = args.partial_weight
    solver = create_solver(args.solver, **kwargs)

    try:
        r = run_case(solver, answer, corpus=corpus, hard_mode=args.hard,
                     guess_pool=args.guess_pool, play_out=True)
    except SolverNonconvergence as e:
        raise SystemExit(str(e))

    label = "Expected remaining words" if solver.minimize else "Expected matched letters"
    for turn, ((guess, patt), value, left) in enumerate(
            zip(r["history"], r["values"], r["remaining"]), start=1):
        print(f"Guess #{turn}: {guess}")
        print(f"\t{label}: {value:.4f}")
        print(f"\tPattern: {patt}")
        if not is_winning(patt):
            print(f"\tActual remaining words: {left}")
    print(f"Solved {answer} in {r['guesses']} guesses" + ("" if r["success"] else " (a loss in Wordle)"))


def cmd_starters(args, corpus: WordCorpus) -> None:
    print(format_opening_report(opening_report(corpus, args.word, top=args.top)))


def cmd_starter(args, corpus: WordCorpus) -> None:
    word = _require_answer(corpus, args.word)
    remaining, matches = starter_scores(corpus, word)
    print(f"Average remaining words after that guess: {remaining:.4f}")
    print(f"Average letter matches for that guess ({MATCHING_WEIGHT} for wrong position): {matches:.4f}")


def main():
    ap = argparse.ArgumentParser(description="wordle-analyzer: analyze games and opening words")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS))
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED))
    ap.add_argument("--solver", default="expected_left", choices=get_solver_ids())
    ap.add_argument("--opening", default="raise", help="fixed first guess ('' to compute it)")
    ap.add_argument("--partial-weight", type=float, default=MATCHING_WEIGHT)
    ap.add_argument("--hard", action="store_true", help="hard mode")
    ap.add_argument("--guess-pool", choices=GUESS_POOLS, default="answers")
    ap.add_argument("--seed", type=int, help="seed for picking a random answer")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("play", help="have the solver play one game")
    p.add_argument("word", nargs="?", help="answer to solve (default: random)")
    p.set_defaults(func=cmd_play)

    p = sub.add_parser("starters", help="rank starting words")
    p.add_argument("--word", help="also score this starting word")
    p.add_argument("--top", type=int, default=OPENING_TOP)
    p.set_defaults(func=cmd_starters)

    p = sub.add_parser("starter", help="score one starting word")
    p.add_argument("word")
    p.set_defaults(func=cmd_starter)

    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    corpus = WordCorpus.from_files(args.answers, args.allowed)
    args.func(args, corpus)


if __name__ == "__main__":
    main()
