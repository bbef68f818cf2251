import random

import pytest
from wordle_analyzer.game import (Session, SecretAnswer, ObservedFeedback, Status, InvalidGuess,
                                  InconsistentFeedback, GameOver, new_game, cheat_game)
from wordle_analyzer.solvers import create_solver


def test_win_on_second_turn(corpus):
    s = Session(corpus, SecretAnswer("crane"))
    r = s.submit("slate")
    assert (r.pattern, r.turn, r.status, r.remaining) == ("RRGRG", 1, Status.ACTIVE, 1)
    assert s.turn == 2 and s.revealed_answer is None

    r = s.submit("CRANE")
    assert r.pattern == "GGGGG" and r.status is Status.WON
    assert s.won_on == 2 and s.turn == 2
    assert s.revealed_answer == "crane"


def test_invalid_guess_does_not_consume_turn(corpus):
    s = Session(corpus, SecretAnswer("crane"))
    for bad in ["zzzzz", "cranes", "cr4ne"]:
        with pytest.raises(InvalidGuess):
            s.submit(bad)
    assert s.turn == 1 and s.history == [] and len(s.candidates) == len(corpus.answers)
    assert s.is_valid_guess("Adieu") and not s.is_valid_guess("zzzzz")


def test_lost_after_six_misses(corpus):
    s = Session(corpus, SecretAnswer("hatch"))
    for _ in range(6):
        assert s.status is Status.ACTIVE
        s.submit("adieu")
    assert s.status is Status.LOST and s.turn == 7
    assert s.won_on is None
    assert s.revealed_answer == "hatch"
    with pytest.raises(GameOver):
        s.submit("hatch")


def test_secret_must_be_an_answer(corpus):
    with pytest.raises(ValueError):
        Session(corpus, SecretAnswer("adieu"))


def test_cheat_mode_uses_supplied_pattern(corpus):
    s = cheat_game(corpus)
    assert s.cheat_mode
    r = s.submit("slate", "rrgrg")
    assert r.remaining == 1 and s.candidates == ["crane"]

    with pytest.raises(InconsistentFeedback):
        s.submit("slate", "GGGGG")
    with pytest.raises(ValueError):
        s.submit("crane")
    with pytest.raises(ValueError):
        s.submit("crane", "GGG")
    assert s.turn == 2 and len(s.history) == 1

    assert s.submit("crane", "ggggg").status is Status.WON
    assert s.revealed_answer is None


def test_hard_mode_pool_tracks_candidates(corpus):
    s = Session(corpus, SecretAnswer("watch"), hard_mode=True)
    assert s.pool == corpus.allowed
    s.submit("adieu")
    assert list(s.pool) == s.candidates == ["hatch", "catch", "match", "watch"]
    with pytest.raises(InvalidGuess):
        s.submit("adieu")

    solver = create_solver("expected_left")
    previous = list(s.pool)
    while not s.is_over:
        s.submit(solver.next_guess(s.state()))
        assert list(s.pool) == s.candidates
        assert set(s.pool) <= set(previous)
        previous = list(s.pool)
    assert s.status is Status.WON


def test_easy_mode_pool_is_fixed(corpus):
    s = Session(corpus, SecretAnswer("watch"))
    s.submit("adieu")
    assert s.pool == corpus.allowed


def test_pool_is_read_only(corpus):
    s = Session(corpus, SecretAnswer("watch"))
    assert isinstance(s.pool, tuple)
    with pytest.raises(AttributeError):
        s.pool.append("zzzzz")
    assert not s.is_valid_guess("zzzzz")


def test_new_game_picks_from_answers(corpus):
    s = new_game(corpus, random.Random(3))
    assert s.source.answer in corpus.answer_set
    assert not s.cheat_mode


def test_hints_escalate_and_reset(corpus):
    s = Session(corpus, SecretAnswer("watch"))
    s.submit("adieu")

    h = s.hint()
    assert h.remaining == 4 and h.sample == () and h.recommended is None and h.more_available

    h = s.hint()
    assert h.sample == ("hatch", "catch", "match", "watch") and not h.truncated

    h = s.hint("Catch")
    assert h.recommended.word == "hatch"
    assert h.recommended.expected_remaining == pytest.approx(2.25)
    assert h.recommended.expected_matches == pytest.approx(4.25)
    assert h.compared.word == "catch" and h.compared.is_candidate
    assert not h.more_available

    s.submit("hatch")
    assert s.hint_level == 0


def test_first_turn_hint_is_opening_analysis(corpus):
    s = Session(corpus, SecretAnswer("watch"))
    h = s.hint("adieu")
    assert h.opening is not None
    assert len(h.opening.lowest_remaining) == 7
    assert h.opening.word == "adieu" and h.opening.word_remaining is not None
    values = [v for _, v in h.opening.lowest_remaining]
    assert values == sorted(values)
