import pytest
from wordle_analyzer.engine import expected_remaining, expected_matches
from wordle_analyzer.solvers import best_guess, create_solver, get_solver_ids

PAIR = ["crane", "slate"]


def test_best_guess_minimizes():
    word, value = best_guess(["trace", "crane", "slate"], PAIR, expected_remaining)
    assert word == "crane" and value == pytest.approx(0.5)


def test_best_guess_ties_go_to_first_in_pool():
    assert best_guess(["slate", "crane"], PAIR, expected_remaining)[0] == "slate"
    assert best_guess(["crane", "slate"], PAIR, expected_remaining)[0] == "crane"


def test_best_guess_maximizes():
    metric = lambda g, c: expected_matches(g, c, 1.0)  # noqa: E731
    word, value = best_guess(["adieu", "trace"], PAIR, metric, minimize=False)
    assert word == "trace" and value == pytest.approx(3.5)


def test_best_guess_rejects_empty_inputs():
    with pytest.raises(ValueError):
        best_guess([], PAIR, expected_remaining)
    with pytest.raises(ValueError):
        best_guess(["crane"], [], expected_remaining)


def test_registry():
    assert get_solver_ids() == ["expected_left", "expected_matches"]
    with pytest.raises(ValueError):
        create_solver("nope")
    s = create_solver("expected_matches", partial_weight=0.0)
    assert s.partial_weight == 0.0 and s.minimize is False


def _state(turn, pool, candidates):
    return {"turn": turn, "history": [], "candidates": candidates, "pool": pool,
            "hard_mode": False}


def test_fixed_opening_skips_scan():
    solver = create_solver("expected_left", opening="TRACE")
    assert solver.next_guess(_state(1, ["crane", "slate"], PAIR)) == "trace"
    assert solver.last_value == pytest.approx(1.0)


def test_computed_opening_is_cached():
    solver = create_solver("expected_left")
    calls = []
    choose = solver.choose

    def counting(pool, candidates):
        calls.append(1)
        return choose(pool, candidates)

    solver.choose = counting
    pool = ["trace", "crane", "slate"]
    assert solver.next_guess(_state(1, pool, PAIR)) == "crane"
    assert solver.next_guess(_state(1, pool, PAIR)) == "crane"
    assert len(calls) == 1

    # later turns always scan
    solver.next_guess(_state(2, pool, PAIR))
    assert len(calls) == 2


def test_opening_cache_is_keyed_by_words():
    solver = create_solver("expected_left")
    pool = ["trace", "crane", "slate"]
    assert solver.next_guess(_state(1, pool, PAIR)) == "crane"
    assert solver.next_guess(_state(1, pool, ["slate"])) == "slate"
    assert solver.next_guess(_state(1, tuple(pool), tuple(PAIR))) == "crane"
    assert len(solver._opening_cache) == 2
