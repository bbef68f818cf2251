from .scoring import (score, is_winning, normalize_pattern, MATCH, CLOSE, MISS,
                      WORD_SIZE, WINNING_PATTERN)
from .constraints import prune, filter_candidates
from .validation import validate_guess, normalize_word
from .evaluation import expected_remaining, expected_matches, partition, top_n, MATCHING_WEIGHT

__all__ = [
    "score", "is_winning", "normalize_pattern", "MATCH", "CLOSE", "MISS",
    "WORD_SIZE", "WINNING_PATTERN",
    "prune", "filter_candidates",
    "validate_guess", "normalize_word",
    "expected_remaining", "expected_matches", "partition", "top_n", "MATCHING_WEIGHT",
]
