# apps/cli/play.py
"""
Play in the terminal.

Normal mode: guess a random secret; each guess is answered with a pattern
of G (right letter, right spot), Y (right letter, wrong spot), R (miss).

Cheat mode (--cheat): mirror a game played elsewhere. Enter each guess and
the pattern that game showed, e.g. `crane rrygr`; the session keeps track of
which answers are still possible.

Type `?` for a hint (repeat for more detail), `? WORD` to compare a word of
your own, `stats` for your record, `q` to quit.
"""

from __future__ import annotations

import argparse
import logging
import random

from wordle_analyzer.datasets import WordCorpus, DEFAULT_ANSWERS, DEFAULT_ALLOWED
from wordle_analyzer.game import (Status, new_game, cheat_game, format_hint,
                                  WORDLE_MAX_TURNS)
from wordle_analyzer.stats import StatsTracker, format_summary

DEFAULT_STATS = "reports/stats.json"


def _finish(session, stats: StatsTracker | None, stats_path: str) -> None:
    if session.status is Status.WON:
        print(f"You won in {session.won_on}!")
    else:
        print(f"You lost! The answer was {session.revealed_answer}")
    if stats is not None:
        stats.record_session(session)
        stats.save(stats_path)


def play(session, stats: StatsTracker | None, stats_path: str) -> None:
    while not session.is_over:
        try:
            line = input(f"[{session.turn}/{WORDLE_MAX_TURNS}] > ").strip()
        except EOFError:
            print()
            return
        if not line:
            continue
        if line == "q":
            return
        if line == "stats":
            print(format_summary((stats or StatsTracker()).summary()))
            continue
        if line.startswith("?"):
            word = line[1:].strip() or None
            print(format_hint(session.hint(word)))
            continue

        parts = line.split()
        guess = parts[0]
        pattern = parts[1] if len(parts) > 1 else None
        try:
            result = session.submit(guess, pattern)
        except ValueError as e:
            # SessionError, or a malformed/missing pattern in cheat mode
            print(f"Invalid: {e}")
            continue

        print(f"{result.guess.upper()}  {result.pattern}  ({result.remaining} possible)")

    if session.cheat_mode:
        if session.status is Status.WON:
            print(f"Solved in {session.won_on}.")
        else:
            print(f"Out of turns; {len(session.candidates)} answer(s) were still possible.")
        return
    _finish(session, stats, stats_path)


def main():
    ap = argparse.ArgumentParser(description="wordle-analyzer: play in the terminal")
    ap.add_argument("--answers", default=str(DEFAULT_ANSWERS))
    ap.add_argument("--allowed", default=str(DEFAULT_ALLOWED))
    ap.add_argument("--hard", action="store_true", help="hard mode")
    ap.add_argument("--cheat", action="store_true",
                    help="enter guesses and patterns from a game played elsewhere")
    ap.add_argument("--seed", type=int, help="seed for picking the secret")
    ap.add_argument("--stats", default=DEFAULT_STATS, help="stats file ('' to disable)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    corpus = WordCorpus.from_files(args.answers, args.allowed)
    if args.cheat:
        session = cheat_game(corpus, hard_mode=args.hard)
        print("Cheat mode: enter `<guess> <pattern>`, e.g. `crane rrygr`.")
    else:
        session = new_game(corpus, random.Random(args.seed), hard_mode=args.hard)

    stats = StatsTracker.load(args.stats) if (args.stats and not args.cheat) else None
    play(session, stats, args.stats)


if __name__ == "__main__":
    main()
