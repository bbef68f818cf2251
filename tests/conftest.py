import pytest
from wordle_analyzer.datasets import WordCorpus

ANSWERS = ["crane", "slate", "trace", "hatch", "catch", "match", "watch"]
EXTRA_ALLOWED = ["adieu", "roate"]


@pytest.fixture
def corpus():
    return WordCorpus.from_words(ANSWERS, EXTRA_ALLOWED)
