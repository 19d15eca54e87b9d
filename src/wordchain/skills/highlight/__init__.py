"""Highlight skill – render word ladders with the changed letters marked.

Public API
----------
- highlight_ladder(path, *, fmt="terminal", style="monokai") -> dict
"""

from wordchain.skills.highlight.renderer import (  # noqa: F401
    highlight_ladder,
)
