from pathlib import Path

from .validator import validate_wordlists, pretty_summary
from .io import read_lines
from .corpus import WordCorpus

# Default locations of the word lists (not shipped with the package)
DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_ANSWERS = DATA_DIR / "answers_5.txt"
DEFAULT_ALLOWED = DATA_DIR / "allowed_5.txt"

__all__ = ["validate_wordlists", "pretty_summary", "read_lines", "WordCorpus",
           "DATA_DIR", "DEFAULT_ANSWERS", "DEFAULT_ALLOWED"]
