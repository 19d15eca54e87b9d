"""Ladder skill – find word chains between two words.

Public API
----------
- find(source, target, *, dictionary_path=None, max_length=None,
       strategy=None, alphabet=None) -> dict
- check(path, *, dictionary_path=None) -> dict
- format_path(path) -> str
"""

from __future__ import annotations

from typing import Any

from wordchain.config import SEARCH_CONFIG
from wordchain.errors import WordLengthMismatchError
from wordchain.logging import get_logger
from wordchain.skills.dictionary import load_words
from wordchain.skills.ladder.pathfinder import (
    differing_positions,
    find_bfs_path,
    find_shortest_path,
    is_ladder,
)

logger = get_logger(__name__)

_STRATEGIES = {
    "dfs": find_shortest_path,
    "bfs": find_bfs_path,
}


def find(
    source: str,
    target: str,
    *,
    dictionary_path: str | None = None,
    max_length: int | None = None,
    strategy: str | None = None,
    alphabet: str | None = None,
) -> dict[str, Any]:
    """Find a word ladder from source to target.

    Returns dict with keys: source, target, found, path, length, steps,
    strategy, dictionary_size. A missing ladder is reported with
    ``found=False`` and ``path=None``.
    """
    if len(source) != len(target):
        raise WordLengthMismatchError(source, target)

    config = SEARCH_CONFIG.resolve(
        max_length=max_length, alphabet=alphabet, strategy=strategy
    )
    dictionary = load_words(dictionary_path, length=len(source))

    logger.debug(
        "Searching %s -> %s (strategy=%s, max_length=%d, %d words)",
        source, target, config.strategy, config.max_length, len(dictionary),
    )
    search = _STRATEGIES[config.strategy]
    path = search(
        source,
        target,
        dictionary,
        max_length=config.max_length,
        alphabet=config.alphabet,
    )

    if path is None:
        logger.info("No ladder from '%s' to '%s'", source, target)
    else:
        logger.debug("Found ladder of %d words: %s", len(path), " -> ".join(path))

    return {
        "source": source,
        "target": target,
        "found": path is not None,
        "path": path,
        "length": len(path) if path is not None else 0,
        "steps": _describe_steps(path) if path is not None else [],
        "strategy": config.strategy,
        "dictionary_size": len(dictionary),
    }


def check(path: list[str], *, dictionary_path: str | None = None) -> dict[str, Any]:
    """Validate a chain against the ladder rules and a word list.

    Returns dict with keys: path, valid, length, unknown_words.
    """
    if not path:
        return {"path": [], "valid": False, "length": 0, "unknown_words": []}

    dictionary = load_words(dictionary_path, length=len(path[0]))
    interior = path[1:-1]
    return {
        "path": path,
        "valid": is_ladder(path, dictionary),
        "length": len(path),
        "unknown_words": [w for w in interior if w not in dictionary],
    }


def format_path(path: list[str]) -> str:
    """Render a chain as a bracketed, one-word-per-line list."""
    return "[\n    " + ",\n    ".join(path) + "\n]"


def _describe_steps(path: list[str]) -> list[dict[str, Any]]:
    steps = []
    for prev, nxt in zip(path, path[1:]):
        position = differing_positions(prev, nxt)[0]
        steps.append({
            "from": prev,
            "to": nxt,
            "position": position,
        })
    return steps
