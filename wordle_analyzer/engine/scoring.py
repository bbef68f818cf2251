"""
Wordle-style scoring (feedback) for a single (guess, answer) pair.

Conventions:
  - 'G' : MATCH = correct letter in the correct position
  - 'Y' : CLOSE = correct letter in the wrong position
  - 'R' : MISS  = letter not present (or present fewer times than guessed)

Algorithm (three passes, duplicate-safe):
  1) Mark exact matches and count, per letter, how many were matched.
  2) Letters absent from the answer are misses; everything else is pending.
  3) Each pending letter may be marked CLOSE at most
        min(count in answer, count in guess) - exact matches
     times, handed out left to right. The rest become MISS.

So guessing "melee" against "beeps" gives the first 'e' MATCH, the second
CLOSE and the third MISS.
"""

from collections import Counter
from typing import Literal

# Type alias for clarity; each pattern character is one of 'G', 'Y', 'R'
PatternChar = Literal["G", "Y", "R"]

MATCH = "G"
CLOSE = "Y"
MISS = "R"

WORD_SIZE = 5
WINNING_PATTERN = MATCH * WORD_SIZE

_MARKS = frozenset((MATCH, CLOSE, MISS))


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Preconditions:
      - both words are lowercase and exactly WORD_SIZE letters long

    Returns:
      - string of length WORD_SIZE composed only of 'G', 'Y', 'R'

    Examples:
      score("loyal", "album") -> "YRRYR"
      score("melee", "peeps") -> "RGRYR"
    """
    assert len(guess) == WORD_SIZE and len(answer) == WORD_SIZE, \
        f"words must have {WORD_SIZE} letters: {guess!r}, {answer!r}"

    pattern = [""] * WORD_SIZE
    matched: Counter = Counter()

    # Pass 1: exact matches
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = MATCH
            matched[g] += 1

    # Pass 2: outright misses; remember which letters are still undecided
    pending = []
    for i, g in enumerate(guess):
        if pattern[i]:
            continue
        if g not in answer:
            pattern[i] = MISS
        else:
            pending.append(i)

    if pending:
        # Pass 3: budget the CLOSE marks per letter, leftmost first
        available = {}
        for i in pending:
            g = guess[i]
            if g not in available:
                available[g] = min(answer.count(g), guess.count(g)) - matched[g]
        for i in pending:
            g = guess[i]
            if available[g] > 0:
                pattern[i] = CLOSE
                available[g] -= 1
            else:
                pattern[i] = MISS

    return "".join(pattern)


def is_winning(pattern: str) -> bool:
    return pattern == WINNING_PATTERN


def normalize_pattern(text: str) -> str:
    """
    Turn user-typed feedback (e.g. "gyrrg") into a canonical pattern.

    Raises ValueError when the text is not WORD_SIZE marks from G/Y/R.
    """
    if not isinstance(text, str):
        raise ValueError(f"pattern must be a string, got {type(text).__name__}")
    p = text.strip().upper()
    if len(p) != WORD_SIZE or not set(p) <= _MARKS:
        raise ValueError(
            f"pattern must be {WORD_SIZE} characters from "
            f"{MATCH}/{CLOSE}/{MISS}; got {text!r}")
    return p
