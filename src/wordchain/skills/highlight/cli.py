"""CLI subcommand registration for the /highlight skill."""

from __future__ import annotations

import argparse
from typing import Any

from wordchain.skills.highlight.renderer import FORMATS


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``highlight`` subcommand and its sub-actions."""
    hl = subparsers.add_parser("highlight", help="Render ladders with changed letters marked")
    hl_sub = hl.add_subparsers(dest="action")

    # --- highlight ladder ---
    hp = hl_sub.add_parser("ladder", help="Render a chain of words")
    hp.add_argument("words", nargs="+", help="Words forming the chain")
    hp.add_argument(
        "--format",
        dest="fmt",
        choices=FORMATS,
        default="terminal",
        help="Output format (default: terminal)",
    )
    hp.add_argument(
        "--style",
        default="monokai",
        help="Pygments style name for html output (default: monokai)",
    )


def run(args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch to the appropriate highlight action."""
    from wordchain.skills.highlight import highlight_ladder

    if args.action == "ladder":
        return highlight_ladder(args.words, fmt=args.fmt, style=args.style)

    return {"error": f"Unknown highlight action: {args.action}"}
