import csv
import json
from pathlib import Path

from wordle_analyzer.harness import write_csv, write_manifest


def test_write_csv_expands_history(tmp_path: Path):
    results = [
        {"solver_id": "expected_left", "answer": "crane", "success": True, "guesses": 2,
         "time_ms": 1.23456, "history": [("slate", "RRGRG"), ("crane", "GGGGG")]},
        {"solver_id": "expected_left", "answer": "watch", "success": False, "guesses": 7,
         "time_ms": 2.0, "history": [("adieu", "YRRRR")] * 7},
    ]
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6)
    rows = list(csv.DictReader(open(path, encoding="utf-8")))
    assert rows[0]["patt_1"] == "'RRGRG" and rows[0]["guess_2"] == "crane"
    assert rows[0]["guess_7"] == ""
    assert rows[1]["guess_7"] == "adieu"
    assert rows[0]["time_ms"] == "1.235"


def test_write_manifest(tmp_path: Path):
    path = write_manifest({"run_id": "x", "summary": {"games": 1}}, str(tmp_path / "m.json"))
    assert json.loads(Path(path).read_text(encoding="utf-8"))["summary"]["games"] == 1
