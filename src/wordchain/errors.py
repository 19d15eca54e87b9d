"""Shared exception classes for wordchain skills."""

from __future__ import annotations


class WordLengthMismatchError(Exception):
    """Raised when source and target words differ in length."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(
            f"Words must have the same length: '{source}' has {len(source)} "
            f"letters, '{target}' has {len(target)}"
        )


class DictionaryNotFoundError(Exception):
    """Raised when the word list file does not exist."""


class EmptyDictionaryError(Exception):
    """Raised when a word list holds no usable words."""
