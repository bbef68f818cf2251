import itertools

import pytest
from wordle_analyzer.engine import (score, prune, filter_candidates, validate_guess,
                                    normalize_pattern, WINNING_PATTERN)

WORDS = ["loyal", "album", "melee", "peeps", "beeps", "crane", "ziggy", "level",
         "belle", "lemon", "cools", "scoop", "geese", "eerie", "speed", "abbey"]


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("loyal", "album", "YRRYR"),
    ("melee", "peeps", "RGRYR"),
    ("melee", "beeps", "RGRYR"),
    ("crane", "ziggy", "RRRRR"),
    ("belle", "level", "RGYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GGRRR"),
    ("cools", "scoop", "YYGRY"),
    ("raise", "crane", "YYRRG"),
    ("stare", "crane", "RRGYG"),
    ("geese", "eerie", "RGYRG"),
])
def test_score_golden(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_rejects_wrong_length():
    with pytest.raises(AssertionError):
        score("cranes", "crane")


@pytest.mark.parametrize("word", WORDS)
def test_score_self_is_winning(word):
    assert score(word, word) == WINNING_PATTERN


def test_score_never_marks_more_than_shared_letters():
    for guess, answer in itertools.product(WORDS, repeat=2):
        patt = score(guess, answer)
        for letter in set(guess):
            marked = sum(1 for g, p in zip(guess, patt) if g == letter and p != "R")
            assert marked <= min(guess.count(letter), answer.count(letter)), (guess, answer)


def test_prune_keeps_order_and_is_idempotent():
    for guess, answer in itertools.product(["crane", "melee", "loyal"], WORDS):
        patt = score(guess, answer)
        once = prune(WORDS, guess, patt)
        assert answer in once
        assert len(once) <= len(WORDS)
        assert once == [w for w in WORDS if w in once]
        assert prune(once, guess, patt) == once


def test_prune_does_not_mutate_input():
    words = list(WORDS)
    prune(words, "crane", "RRRRR")
    assert words == WORDS


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    cand = filter_candidates(words, [("raise", "YYRRG")])
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_skips_malformed_words():
    cand = filter_candidates(["Crane", "cranes", "cr4ne", ""], [])
    assert cand == ["crane"]


def test_validate_guess():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess(" raise ", frozenset(allowed)) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("???", allowed) is False
    assert validate_guess("slate", allowed) is False
    assert validate_guess(None, allowed) is False


def test_normalize_pattern():
    assert normalize_pattern(" gyrrG ") == "GYRRG"
    for bad in ["GGG", "GGGGGG", "GYBRG", ""]:
        with pytest.raises(ValueError):
            normalize_pattern(bad)
