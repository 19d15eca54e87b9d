"""Dictionary skill – load and inspect word lists.

Public API
----------
- load_words(path=None, *, length=None) -> frozenset[str]
- default_dictionary_path() -> Path
- info(path=None, *, length=None) -> dict
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from wordchain.skills.dictionary.loader import (
    default_dictionary_path,
    length_histogram,
    load_words,
)


def info(path: str | Path | None = None, *, length: int | None = None) -> dict[str, Any]:
    """Summarise a word list.

    Returns dict with keys: path, word_count, lengths.
    """
    filepath = Path(path) if path is not None else default_dictionary_path()
    words = load_words(filepath, length=length)
    return {
        "path": str(filepath),
        "word_count": len(words),
        "lengths": {str(n): count for n, count in length_histogram(words).items()},
    }
