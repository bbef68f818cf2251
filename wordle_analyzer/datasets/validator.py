"""
Word-list validator.

Checks the two files a WordCorpus is loaded from:
  - answers_5.txt : every word that can be the secret
  - allowed_5.txt : every word a player may submit

Rules: one lowercase a–z word of exactly N letters per line, no duplicates.
Answers missing from the allowed list are reported but do not fail the
check, since WordCorpus adds them to the allowed guesses on load.

The returned dict is JSON-serializable so batch runs can embed it in their
manifest:
    rep = validate_wordlists("data/answers_5.txt", "data/allowed_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_analyzer.engine.scoring import WORD_SIZE


@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str
    exists: bool
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int
    invalid_lines: int


@dataclass
class ValidationReport:
    N: int
    answers: FileReport
    allowed: FileReport
    answers_subset_allowed: bool
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Return (valid_words, invalid_count) for one file.

    Blank lines count as invalid; words must already be lowercase.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


def validate_wordlists(answers_path: str, allowed_path: str, N: int = WORD_SIZE) -> Dict:
    """
    Validate the answers/allowed word lists.

    Returns a dict (see ValidationReport) with counts, hashes, the
    answers ⊆ allowed flag, a strict `passed` flag (both files present and
    non-empty, no invalid lines, no duplicates) and a list of `issues`.
    """
    issues: List[str] = []
    ans_p = Path(answers_path)
    all_p = Path(allowed_path)

    missing = [p for p in (ans_p, all_p) if not p.exists()]
    if missing:
        for p in missing:
            issues.append(f"file not found: {p}")
        rep = ValidationReport(
            N=N,
            answers=FileReport(str(ans_p), ans_p.exists(), 0, "", 0, 0),
            allowed=FileReport(str(all_p), all_p.exists(), 0, "", 0, 0),
            answers_subset_allowed=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    answers, ans_invalid = _load_and_check(ans_p, N)
    allowed, all_invalid = _load_and_check(all_p, N)
    ans_report = _file_report(ans_p, answers, ans_invalid)
    all_report = _file_report(all_p, allowed, all_invalid)

    not_allowed = sorted(set(answers) - set(allowed))
    subset_ok = not not_allowed
    if not subset_ok:
        issues.append(f"{len(not_allowed)} answer(s) missing from allowed "
                      f"(e.g., {not_allowed[:5]}); they will be added as guesses")

    for label, rep in (("answers", ans_report), ("allowed", all_report)):
        if rep.count == 0:
            issues.append(f"{label} file contains 0 valid words")
        if rep.invalid_lines:
            issues.append(f"{label} has {rep.invalid_lines} invalid line(s)")
        if rep.count != rep.unique_count:
            issues.append(f"{label} contains duplicate lines")

    passed = all(
        rep.count > 0 and rep.invalid_lines == 0 and rep.count == rep.unique_count
        for rep in (ans_report, all_report)
    )

    rep = ValidationReport(
        N=N,
        answers=ans_report,
        allowed=all_report,
        answers_subset_allowed=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console output, e.g.

        N=5 | answers=2309 (uniq=2309, sha=abc123...) | allowed=12947 (...) | answers⊆allowed=True | OK
    """
    a = report["answers"]
    b = report["allowed"]
    status = "OK" if report["passed"] else "FAIL"
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a['sha256'][:12]}) "
        f"| allowed={b['count']} (uniq={b['unique_count']}, sha={b['sha256'][:12]}) "
        f"| answers⊆allowed={report['answers_subset_allowed']} | {status}"
    )
