from pathlib import Path
from wordle_analyzer.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "raise", "stare", "trace", "cared"])

    rep = validate_wordlists(str(ans), str(allw))
    assert rep["passed"] is True
    assert rep["answers_subset_allowed"] is True
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "answers⊆allowed=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    # 'raiser' has the wrong length, '?????' invalid chars, 'Crane' not lowercase
    ans.write_text("crane\nraiser\n?????\nCrane\n\n", encoding="utf-8")
    allw.write_text("crane\ncrane\n", encoding="utf-8")

    rep = validate_wordlists(str(ans), str(allw))
    assert rep["passed"] is False
    assert rep["answers"]["invalid_lines"] == 4
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation_is_reported(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    _write(ans, ["crane", "raise", "stare"])
    _write(allw, ["crane", "stare"])  # missing 'raise'

    rep = validate_wordlists(str(ans), str(allw))
    assert rep["answers_subset_allowed"] is False
    assert rep["passed"] is True
    assert any("raise" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "nope.txt"), str(tmp_path / "nada.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2
