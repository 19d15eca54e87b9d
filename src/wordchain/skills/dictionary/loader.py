"""Plain-text word list loading.

One word per line. Lines are stripped and lowercased; blank lines are
skipped. No further validation is applied to the words themselves.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path

from wordchain.errors import DictionaryNotFoundError, EmptyDictionaryError
from wordchain.logging import get_logger

logger = get_logger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDLIST = "words.txt"


def default_dictionary_path() -> Path:
    """Location of the bundled word list."""
    return DATA_DIR / DEFAULT_WORDLIST


def read_lines(path: str | Path) -> list[str]:
    """Return the cleaned, non-blank lines of a word list file."""
    filepath = Path(path)
    if not filepath.is_file():
        raise DictionaryNotFoundError(f"Word list file not found: {filepath}")

    words = []
    with open(filepath, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                words.append(word)
    return words


def load_words(path: str | Path | None = None, *, length: int | None = None) -> frozenset[str]:
    """Load a word list into a set, optionally keeping only ``length``-letter words.

    Raises DictionaryNotFoundError for a missing file and
    EmptyDictionaryError when nothing is left after filtering.
    """
    filepath = Path(path) if path is not None else default_dictionary_path()
    lines = read_lines(filepath)

    if length is not None:
        words = frozenset(w for w in lines if len(w) == length)
    else:
        words = frozenset(lines)

    if not words:
        detail = f" of length {length}" if length is not None else ""
        raise EmptyDictionaryError(f"No words{detail} found in {filepath}")

    logger.debug("Loaded %d words from %s", len(words), filepath)
    return words


def length_histogram(words: frozenset[str]) -> dict[int, int]:
    """Count words per length, sorted by length."""
    counts = Counter(len(w) for w in words)
    return {n: counts[n] for n in sorted(counts)}
