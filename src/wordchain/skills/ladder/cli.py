"""CLI subcommand registration for the /ladder skill."""

from __future__ import annotations

import argparse
from typing import Any

from wordchain.config import STRATEGIES


def add_search_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every command that runs a search."""
    parser.add_argument(
        "--dictionary",
        default=None,
        help="Path to a word list, one word per line (default: bundled list)",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Maximum number of words in a chain (default: 10)",
    )
    parser.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help="dfs: prioritised depth-first (default); bfs: guaranteed shortest",
    )
    parser.add_argument(
        "--alphabet",
        default=None,
        help="Replacement letters to try (default: a-z)",
    )


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``ladder`` subcommand and its sub-actions."""
    lad = subparsers.add_parser("ladder", help="Word ladder operations")
    lad_sub = lad.add_subparsers(dest="action")

    # --- ladder find ---
    fnd = lad_sub.add_parser("find", help="Find a ladder between two words")
    fnd.add_argument("source", help="Start word")
    fnd.add_argument("target", help="End word")
    add_search_arguments(fnd)

    # --- ladder check ---
    chk = lad_sub.add_parser("check", help="Validate a chain of words")
    chk.add_argument("words", nargs="+", help="Words forming the chain")
    chk.add_argument(
        "--dictionary",
        default=None,
        help="Path to a word list, one word per line (default: bundled list)",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate ladder action."""
    from wordchain.skills.ladder import check, find

    if args.action == "find":
        return find(
            args.source,
            args.target,
            dictionary_path=args.dictionary,
            max_length=args.max_length,
            strategy=args.strategy,
            alphabet=args.alphabet,
        )

    if args.action == "check":
        return check(args.words, dictionary_path=args.dictionary)

    return {"error": f"Unknown ladder action: {args.action}"}
