"""Word ladder search over the implicit one-letter-substitution graph.

Nodes are dictionary words plus the source and target; two words are
adjacent when they differ in exactly one position. The target does not
need to be in the dictionary.

Two strategies share the same move generator:

- ``find_shortest_path`` is a depth-first search that tries moves toward
  the target first and takes the first chain they complete. Detour moves
  are compared against each other and against the best chain so far,
  which also prunes longer branches. The chain is short but not
  guaranteed minimal on every dictionary.
- ``find_bfs_path`` expands chains in non-decreasing length order and
  returns a minimal chain.
"""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass

from wordchain.errors import WordLengthMismatchError

DEFAULT_MAX_LENGTH = 10
DEFAULT_ALPHABET = string.ascii_lowercase


@dataclass
class SearchBudget:
    """Pruning bounds for one search.

    ``best`` is the shortest complete chain seen so far. Only the call
    that completes a chain writes it, through ``record``.
    """

    max_length: int = DEFAULT_MAX_LENGTH
    best: list[str] | None = None

    def exceeded(self, length: int) -> bool:
        """True when a chain of ``length`` words cannot be extended usefully."""
        if length >= self.max_length:
            return True
        return self.best is not None and length >= len(self.best)

    def record(self, path: list[str]) -> list[str]:
        if self.best is None or len(path) < len(self.best):
            self.best = path
        return path


def differing_positions(a: str, b: str) -> list[int]:
    """Indices where two equal-length words differ."""
    return [i for i, (x, y) in enumerate(zip(a, b)) if x != y]


def direct_moves(word: str, target: str) -> Iterator[str]:
    """Yield ``word`` with each differing position set to the target's letter."""
    for i in differing_positions(word, target):
        yield word[:i] + target[i] + word[i + 1:]


def exhaustive_moves(word: str, target: str, alphabet: str) -> Iterator[str]:
    """Yield every other substitution, position by position in alphabet order.

    The target's letter (a direct move) and the word itself are skipped.
    """
    for i, current in enumerate(word):
        for letter in alphabet:
            if letter == target[i] or letter == current:
                continue
            yield word[:i] + letter + word[i + 1:]


def candidate_moves(word: str, target: str, alphabet: str) -> Iterator[str]:
    """Yield one-letter substitutions of ``word`` in search priority order."""
    yield from direct_moves(word, target)
    yield from exhaustive_moves(word, target, alphabet)


def is_ladder(
    path: Sequence[str],
    dictionary: Collection[str] | None = None,
) -> bool:
    """Check that ``path`` is a valid simple word ladder.

    Consecutive words must differ in exactly one position and no word may
    repeat. With a dictionary, every interior word must be a member; the
    endpoints are exempt.
    """
    if not path:
        return False
    length = len(path[0])
    if any(len(word) != length for word in path):
        return False
    if len(set(path)) != len(path):
        return False
    for prev, nxt in zip(path, path[1:]):
        if len(differing_positions(prev, nxt)) != 1:
            return False
    if dictionary is not None:
        return all(word in dictionary for word in path[1:-1])
    return True


def _check_lengths(source: str, target: str) -> None:
    if len(source) != len(target):
        raise WordLengthMismatchError(source, target)


def find_shortest_path(
    source: str,
    target: str,
    dictionary: Collection[str],
    *,
    max_length: int = DEFAULT_MAX_LENGTH,
    alphabet: str = DEFAULT_ALPHABET,
) -> list[str] | None:
    """Prioritised depth-first search for a ladder from source to target.

    Returns the chain (both endpoints included), or None when no chain of
    at most ``max_length`` words is found. Raises WordLengthMismatchError
    if the words differ in length.
    """
    _check_lengths(source, target)
    if source == target:
        return [source]

    budget = SearchBudget(max_length=max_length)
    return _search([source], frozenset([source]), target, dictionary, alphabet, budget)


def _search(
    path: list[str],
    visited: frozenset[str],
    target: str,
    dictionary: Collection[str],
    alphabet: str,
    budget: SearchBudget,
) -> list[str] | None:
    if budget.exceeded(len(path)):
        return None

    current = path[-1]

    # Moves toward the target: the first chain found is taken as is
    for candidate in direct_moves(current, target):
        if candidate in visited:
            continue
        if candidate == target:
            return budget.record(path + [candidate])
        if candidate not in dictionary:
            continue
        found = _descend(path, visited, candidate, target, dictionary, alphabet, budget)
        if found is not None:
            return found

    # Detours: keep looking for a shorter chain under the tightened bound
    best = None
    for candidate in exhaustive_moves(current, target, alphabet):
        if candidate in visited or candidate not in dictionary:
            continue
        found = _descend(path, visited, candidate, target, dictionary, alphabet, budget)
        if found is not None and (best is None or len(found) < len(best)):
            best = budget.record(found)

    return best


def _descend(
    path: list[str],
    visited: frozenset[str],
    candidate: str,
    target: str,
    dictionary: Collection[str],
    alphabet: str,
    budget: SearchBudget,
) -> list[str] | None:
    return _search(
        path + [candidate],
        visited | {candidate},
        target,
        dictionary,
        alphabet,
        budget,
    )


def find_bfs_path(
    source: str,
    target: str,
    dictionary: Collection[str],
    *,
    max_length: int = DEFAULT_MAX_LENGTH,
    alphabet: str = DEFAULT_ALPHABET,
) -> list[str] | None:
    """Breadth-first search for a minimal ladder of at most ``max_length`` words."""
    _check_lengths(source, target)
    if source == target:
        return [source]

    visited = {source}
    queue: deque[list[str]] = deque([[source]])

    while queue:
        path = queue.popleft()
        if len(path) >= max_length:
            continue

        for candidate in candidate_moves(path[-1], target, alphabet):
            if candidate in visited:
                continue
            if candidate == target:
                return path + [candidate]
            if candidate in dictionary:
                visited.add(candidate)
                queue.append(path + [candidate])

    return None
