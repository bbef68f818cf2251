"""
Game session state machine.

One Session covers every way a game is played here:
  - a human (or a front-end) guessing a hidden secret,
  - the solver playing itself against a known answer,
  - cheat mode, where guesses and their feedback come from a game played
    elsewhere and the session only tracks what is still possible.

The modes differ only in where a turn's feedback pattern comes from, so the
session is handed a *pattern source*:
  - SecretAnswer     computes the pattern from the secret,
  - ObservedFeedback takes the pattern the caller supplies.

States: ACTIVE (turn 1..max_turns) -> WON | LOST. A rejected submission
(InvalidGuess, InconsistentFeedback, GameOver) leaves the session untouched.
"""

from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from wordle_analyzer.datasets.corpus import WordCorpus
from wordle_analyzer.engine import (score, prune, is_winning, normalize_pattern, normalize_word,
                                    validate_guess)
from .errors import InvalidGuess, InconsistentFeedback, GameOver
from .hints import Hint, build_hint

log = logging.getLogger(__name__)

# Wordle turn budget
WORDLE_MAX_TURNS = 6


class Status(enum.Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"


class SecretAnswer:
    """Feedback computed from a known secret word."""

    def __init__(self, answer: str):
        self.answer = answer.strip().lower()

    def feedback(self, guess: str, pattern: Optional[str] = None) -> str:
        return score(guess, self.answer)


class ObservedFeedback:
    """Feedback typed in by the caller (cheat mode); the secret is unknown."""

    answer = None

    def feedback(self, guess: str, pattern: Optional[str] = None) -> str:
        if pattern is None:
            raise ValueError("cheat mode needs the observed pattern for every guess")
        return normalize_pattern(pattern)


@dataclass(frozen=True)
class TurnResult:
    guess: str
    pattern: str
    turn: int           # turn on which the guess was made
    status: Status      # status after the guess
    remaining: int      # candidate answers left


class Session:
    def __init__(
            self,
            corpus: WordCorpus,
            source,
            *,
            hard_mode: bool = False,
            guess_pool: Optional[Sequence[str]] = None,
            max_turns: int = WORDLE_MAX_TURNS,
    ):
        if source.answer is not None and source.answer not in corpus.answer_set:
            raise ValueError(f"secret {source.answer!r} is not in the answer list")
        if max_turns < 1:
            raise ValueError(f"max_turns must be positive; got {max_turns}")

        self.corpus = corpus
        self.source = source
        self.hard_mode = hard_mode
        self.max_turns = max_turns

        self.turn = 1
        self.status = Status.ACTIVE
        self.won_on: Optional[int] = None
        self.history: List[Tuple[str, str]] = []
        self.hint_level = 0

        self.candidates: List[str] = list(corpus.answers)
        self._set_pool(corpus.allowed if guess_pool is None else guess_pool)

    # ---- queries ----

    @property
    def cheat_mode(self) -> bool:
        return self.source.answer is None

    @property
    def is_over(self) -> bool:
        return self.status is not Status.ACTIVE

    @property
    def pool(self) -> Tuple[str, ...]:
        return self._pool

    @property
    def revealed_answer(self) -> Optional[str]:
        """The secret, once the game is finished (never in cheat mode)."""
        return self.source.answer if self.is_over else None

    def is_valid_guess(self, word: str) -> bool:
        return validate_guess(word, self._pool_set)

    def state(self) -> dict:
        """Snapshot handed to a solver's next_guess()."""
        return {
            "turn": self.turn,
            "history": list(self.history),
            "candidates": self.candidates,
            "pool": self._pool,
            "hard_mode": self.hard_mode,
        }

    # ---- transitions ----

    def submit(self, guess: str, pattern: Optional[str] = None) -> TurnResult:
        """
        Play one guess. `pattern` is required in cheat mode and ignored
        otherwise.

        Raises GameOver, InvalidGuess or InconsistentFeedback without
        consuming a turn.
        """
        if self.is_over:
            raise GameOver(self.status)

        word = normalize_word(guess)
        if word is None or word not in self._pool_set:
            raise InvalidGuess(guess)

        patt = self.source.feedback(word, pattern)
        remaining = prune(self.candidates, word, patt)
        if not remaining:
            raise InconsistentFeedback(word, patt)

        played_turn = self.turn
        self.candidates = remaining
        if self.hard_mode:
            self._set_pool(remaining)
        self.history.append((word, patt))
        self.hint_level = 0

        if is_winning(patt):
            self.status = Status.WON
            self.won_on = played_turn
        else:
            self.turn += 1
            if self.turn > self.max_turns:
                self.status = Status.LOST

        log.debug("turn %d: %s -> %s (%d left, %s)",
                  played_turn, word, patt, len(remaining), self.status.value)
        return TurnResult(word, patt, played_turn, self.status, len(remaining))

    def hint(self, word: Optional[str] = None) -> Hint:
        """Escalating hint; each call on the same turn reveals more."""
        h = build_hint(self.corpus, self.candidates, self.turn, self.hint_level, word)
        self.hint_level += 1
        return h

    def _set_pool(self, words: Sequence[str]) -> None:
        self._pool = tuple(words)
        self._pool_set = frozenset(self._pool)


def new_game(corpus: WordCorpus, rng: random.Random, *, hard_mode: bool = False) -> Session:
    """Session against a randomly chosen secret."""
    return Session(corpus, SecretAnswer(corpus.pick_random(rng)), hard_mode=hard_mode)


def cheat_game(corpus: WordCorpus, *, hard_mode: bool = False) -> Session:
    """Session fed with feedback observed in an external game."""
    return Session(corpus, ObservedFeedback(), hard_mode=hard_mode)
