"""CLI subcommand registration for the /dictionary skill."""

from __future__ import annotations

import argparse
from typing import Any


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``dictionary`` subcommand and its sub-actions."""
    dct = subparsers.add_parser("dictionary", help="Word list operations")
    dct_sub = dct.add_subparsers(dest="action")

    # --- dictionary info ---
    inf = dct_sub.add_parser("info", help="Summarise a word list")
    inf.add_argument(
        "--dictionary",
        default=None,
        help="Path to a word list, one word per line (default: bundled list)",
    )
    inf.add_argument(
        "--length",
        type=int,
        default=None,
        help="Only count words of this length",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate dictionary action."""
    from wordchain.skills.dictionary import info

    if args.action == "info":
        return info(args.dictionary, length=args.length)

    return {"error": f"Unknown dictionary action: {args.action}"}
