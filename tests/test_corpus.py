import random
from pathlib import Path

import pytest
from wordle_analyzer.datasets import WordCorpus


def test_from_words_normalizes_and_extends_allowed():
    c = WordCorpus.from_words([" Crane", "slate", "crane", "toolong", "sl8te"], ["adieu", "SLATE"])
    assert c.answers == ("crane", "slate")
    assert c.allowed == ("adieu", "slate", "crane")
    assert c.answer_set <= c.allowed_set


def test_corpus_is_immutable(corpus):
    with pytest.raises(AttributeError):
        corpus.answers = ()


def test_empty_answers_rejected():
    with pytest.raises(ValueError):
        WordCorpus.from_words([], ["crane"])


def test_from_files(tmp_path: Path):
    ans = tmp_path / "answers_5.txt"
    allw = tmp_path / "allowed_5.txt"
    ans.write_text("crane\r\nslate\n\n", encoding="utf-8")
    allw.write_text("adieu\ncrane\n", encoding="utf-8")
    c = WordCorpus.from_files(ans, allw)
    assert c.answers == ("crane", "slate")
    assert c.allowed == ("adieu", "crane", "slate")

    with pytest.raises(FileNotFoundError):
        WordCorpus.from_files(tmp_path / "missing.txt", allw)


def test_pick_random_is_seeded(corpus):
    a = corpus.pick_random(random.Random(7))
    assert a in corpus.answer_set
    assert a == corpus.pick_random(random.Random(7))
