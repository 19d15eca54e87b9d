"""Search configuration defaults."""

from __future__ import annotations

import string
from dataclasses import dataclass

STRATEGIES = ("dfs", "bfs")


@dataclass(frozen=True)
class SearchConfig:
    """Defaults for a ladder search; API keyword arguments override them."""

    # Maximum number of words in a chain, endpoints included
    max_length: int = 10

    # Replacement letters tried by exhaustive moves, in order
    alphabet: str = string.ascii_lowercase

    # "dfs" is the prioritised depth-first search, "bfs" the optimal one
    strategy: str = "dfs"

    def resolve(
        self,
        *,
        max_length: int | None = None,
        alphabet: str | None = None,
        strategy: str | None = None,
    ) -> SearchConfig:
        """Return a copy with any non-None overrides applied."""
        resolved = SearchConfig(
            max_length=self.max_length if max_length is None else max_length,
            alphabet=self.alphabet if alphabet is None else alphabet,
            strategy=self.strategy if strategy is None else strategy,
        )
        if resolved.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy '{resolved.strategy}' "
                f"(expected one of: {', '.join(STRATEGIES)})"
            )
        if resolved.max_length < 1:
            raise ValueError(f"max_length must be at least 1, got {resolved.max_length}")
        return resolved


SEARCH_CONFIG = SearchConfig()
