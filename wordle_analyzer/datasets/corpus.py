"""
Word corpora for a process: the answers pool and the allowed-guess universe.

A WordCorpus is built once (from files or in-memory lists) and then passed by
reference into sessions, solvers and the harness. It is immutable: tuples for
the ordered views, frozensets for membership checks.

Invariant: every answer is also an allowed guess. Answers missing from the
allowed list are appended to it at construction time.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

from wordle_analyzer.engine.validation import normalize_word
from .io import read_lines


def _clean(words: Iterable[str]) -> List[str]:
    """Normalize, drop anything that isn't a 5-letter word, dedupe in order."""
    seen = set()
    out: List[str] = []
    for raw in words:
        w = normalize_word(raw)
        if w is None or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


@dataclass(frozen=True)
class WordCorpus:
    answers: Tuple[str, ...]
    allowed: Tuple[str, ...]
    answer_set: FrozenSet[str] = field(init=False, repr=False, compare=False)
    allowed_set: FrozenSet[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        answers = tuple(_clean(self.answers))
        allowed = _clean(self.allowed)
        known = set(allowed)
        allowed += [w for w in answers if w not in known]

        if not answers:
            raise ValueError("answer list contains no valid 5-letter words")

        # frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "answers", answers)
        object.__setattr__(self, "allowed", tuple(allowed))
        object.__setattr__(self, "answer_set", frozenset(answers))
        object.__setattr__(self, "allowed_set", frozenset(allowed))

    @classmethod
    def from_words(cls, answers: Iterable[str], allowed: Iterable[str] = ()) -> "WordCorpus":
        return cls(tuple(answers), tuple(allowed))

    @classmethod
    def from_files(cls, answers_path: Path | str, allowed_path: Path | str) -> "WordCorpus":
        """Load newline-separated word lists (FileNotFoundError if missing)."""
        return cls(tuple(read_lines(answers_path)), tuple(read_lines(allowed_path)))

    def pick_random(self, rng: random.Random) -> str:
        """Secret answer for a new game, drawn with the caller's RNG."""
        return rng.choice(self.answers)
