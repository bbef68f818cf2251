"""
Hints and opening-word analysis.

Hints escalate with each request on the same turn:
  level 0 : how many answers are still possible
  level 1 : + the first few of them
  level 2+: + the recommended guess among them (lowest expected remaining),
            and the same numbers for a word the player is considering

Before the first guess there is nothing to narrow down, so a hint is an
opening analysis instead: the best starting words over the whole answer list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from wordle_analyzer.datasets.corpus import WordCorpus
from wordle_analyzer.engine import (expected_remaining, expected_matches, normalize_word,
                                    top_n, MATCHING_WEIGHT)
from wordle_analyzer.engine.evaluation import score_all
from wordle_analyzer.solvers.recommend import best_guess

# How many remaining answers a level-1 hint lists
SAMPLE_SIZE = 11
# Level at which a hint recommends a guess (the last level)
RECOMMEND_LEVEL = 2
OPENING_TOP = 15


@dataclass(frozen=True)
class GuessStats:
    word: str
    expected_remaining: float
    expected_matches: float     # CLOSE counted as a full match
    expected_exact: float       # exact positions only
    is_candidate: bool


@dataclass(frozen=True)
class OpeningReport:
    lowest_remaining: List[Tuple[str, float]]
    most_matches: List[Tuple[str, float]]
    word: Optional[str] = None
    word_remaining: Optional[float] = None
    word_matches: Optional[float] = None


@dataclass(frozen=True)
class Hint:
    remaining: int
    sample: Tuple[str, ...] = ()
    truncated: bool = False
    recommended: Optional[GuessStats] = None
    compared: Optional[GuessStats] = None
    opening: Optional[OpeningReport] = None
    more_available: bool = True


def guess_stats(word: str, candidates: Sequence[str]) -> GuessStats:
    return GuessStats(
        word=word,
        expected_remaining=expected_remaining(word, candidates),
        expected_matches=expected_matches(word, candidates, 1.0),
        expected_exact=expected_matches(word, candidates, 0.0),
        is_candidate=word in candidates,
    )


def starter_scores(corpus: WordCorpus, word: str) -> Tuple[float, float]:
    """(expected remaining, expected matches at weight 0.8) of one opening word."""
    answers = corpus.answers
    return expected_remaining(word, answers), expected_matches(word, answers, MATCHING_WEIGHT)


def opening_report(corpus: WordCorpus, word: Optional[str] = None,
                   top: int = OPENING_TOP) -> OpeningReport:
    """
    Rank every answer word as a starter against the full answer list.

    This scores len(answers)^2 pairs twice, so it is slow on a real corpus.
    """
    remaining, matches = score_all(corpus.answers, corpus.answers, MATCHING_WEIGHT)
    w = normalize_word(word) if word else None
    word_remaining = word_matches = None
    if w is not None:
        word_remaining, word_matches = starter_scores(corpus, w)
    return OpeningReport(
        lowest_remaining=top_n(remaining, top, largest=False),
        most_matches=top_n(matches, top, largest=True),
        word=w,
        word_remaining=word_remaining,
        word_matches=word_matches,
    )


def build_hint(corpus: WordCorpus, candidates: Sequence[str], turn: int, level: int,
               word: Optional[str] = None) -> Hint:
    if turn == 1:
        return Hint(remaining=len(candidates), opening=opening_report(corpus, word),
                    more_available=False)

    sample: Tuple[str, ...] = ()
    truncated = False
    if level >= 1:
        sample = tuple(candidates[:SAMPLE_SIZE])
        truncated = len(candidates) > SAMPLE_SIZE

    recommended = compared = None
    if level >= RECOMMEND_LEVEL:
        best, _ = best_guess(candidates, candidates, expected_remaining)
        recommended = guess_stats(best, candidates)
        w = normalize_word(word) if word else None
        if w is not None and w != best:
            compared = guess_stats(w, candidates)

    return Hint(
        remaining=len(candidates),
        sample=sample,
        truncated=truncated,
        recommended=recommended,
        compared=compared,
        more_available=level < RECOMMEND_LEVEL,
    )


# ---- plain-text rendering for front-ends ----

def _format_stats(label: str, s: GuessStats) -> str:
    return (
        f"{label}: {s.word}. Over all possible answers, it averages:\n"
        f"\t{s.expected_remaining:.2f} remaining words\n"
        f"\t{s.expected_matches:.2f} matched letters, of which {s.expected_exact:.2f} "
        f"are exact matches (right letter and position)\n"
    )


def format_opening_report(report: OpeningReport) -> str:
    out = ""
    if report.word is not None:
        out += f"For your starting word {report.word}\n"
        out += f"Average remaining answers: {report.word_remaining:.2f}\n"
        out += f"Average matched letters: {report.word_matches:.2f}\n"
    out += (f"\n{len(report.lowest_remaining)} starting words that lead to "
            f"(on average) the smallest set of remaining answers\n")
    out += "".join(f"{w}\t{v:.2f}\n" for w, v in report.lowest_remaining)
    out += (f"\n{len(report.most_matches)} starting words that lead to (on average) "
            f"the most matched letters (counting 'right letter/wrong spot' as "
            f"{MATCHING_WEIGHT} of a match)\n")
    out += "".join(f"{w}\t{v:.2f}\n" for w, v in report.most_matches)
    return out


def format_hint(hint: Hint) -> str:
    if hint.opening is not None:
        return format_opening_report(hint.opening)

    out = f"There are {hint.remaining} remaining answers left.\n"
    if hint.sample:
        out += " ".join(hint.sample) + (" ..." if hint.truncated else "") + "\n"
    if hint.recommended is not None:
        out += _format_stats("Recommend guess", hint.recommended)
    if hint.compared is not None:
        out += _format_stats("Your guess", hint.compared)
        verb = "is" if hint.compared.is_candidate else "is not"
        out += f"\tYour guess {verb} one of the remaining possible answers\n"
    if hint.more_available:
        out += "The next hint will provide more information\n"
    return out
