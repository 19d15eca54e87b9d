"""Pygments-based rendering of word ladders.

Each word is emitted as a token stream; the letter that changed since the
previous word is tagged ``Generic.Inserted`` so the formatter colours it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterator

from pygments import format as _pygments_format
from pygments.formatters import HtmlFormatter, TerminalFormatter
from pygments.token import Token

from wordchain.skills.ladder.pathfinder import differing_positions

RESULTS_FORMAT_VERSION = "0.1.0"

FORMATS = ("terminal", "html")


def highlight_ladder(
    path: list[str],
    *,
    fmt: str = "terminal",
    style: str = "monokai",
) -> dict[str, Any]:
    """Render a chain with the changed letter of each step emphasised.

    Returns dict with keys: metadata, steps, rendered.
    """
    formatter = _make_formatter(fmt, style)
    rendered = _pygments_format(_ladder_tokens(path), formatter)

    metadata = {
        "author": "wordchain highlight",
        "timestamp": datetime.now(tz=timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
        "tool": "wordchain",
        "version": RESULTS_FORMAT_VERSION,
        "format": fmt,
    }

    return {
        "metadata": metadata,
        "steps": _build_steps(path),
        "rendered": rendered,
    }


def _make_formatter(fmt: str, style: str):
    if fmt == "terminal":
        return TerminalFormatter()
    if fmt == "html":
        return HtmlFormatter(style=style, nowrap=True)
    raise ValueError(f"Unknown format '{fmt}' (expected one of: {', '.join(FORMATS)})")


def _ladder_tokens(path: list[str]) -> Iterator[tuple[Any, str]]:
    """Token stream for the whole chain, one word per line."""
    previous = None
    for word in path:
        yield from _word_tokens(word, previous)
        yield Token.Text, "\n"
        previous = word


def _word_tokens(word: str, previous: str | None) -> Iterator[tuple[Any, str]]:
    changed = set()
    if previous is not None and len(previous) == len(word):
        changed = set(differing_positions(previous, word))
    for i, letter in enumerate(word):
        if i in changed:
            yield Token.Generic.Inserted, letter
        else:
            yield Token.Text, letter


def _build_steps(path: list[str]) -> list[dict[str, Any]]:
    """Describe every word of the chain and what changed to reach it."""
    steps: list[dict[str, Any]] = []
    for index, word in enumerate(path):
        step: dict[str, Any] = {
            "index": index,
            "word": word,
            "position": None,
            "from_letter": None,
            "to_letter": None,
            "note": _build_step_note(index, path),
        }
        if index > 0:
            positions = differing_positions(path[index - 1], word)
            if len(positions) == 1:
                pos = positions[0]
                step["position"] = pos
                step["from_letter"] = path[index - 1][pos]
                step["to_letter"] = word[pos]
        steps.append(step)
    return steps


def _build_step_note(index: int, path: list[str]) -> str:
    """Build a human-readable note for a word in the chain."""
    if index == 0:
        if len(path) > 1:
            return f"Start: next is {path[1]}"
        return "Start (single-word chain)"
    elif index == len(path) - 1:
        return f"Target: reached from {path[index - 1]}"
    else:
        return f"Intermediate: from {path[index - 1]}, next is {path[index + 1]}"
