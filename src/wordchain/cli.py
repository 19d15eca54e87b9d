"""CLI entry point for wordchain skills."""

from __future__ import annotations

import argparse
import json
import sys

from wordchain.errors import (
    DictionaryNotFoundError,
    EmptyDictionaryError,
    WordLengthMismatchError,
)
from wordchain.logging import enable_debug_logging

_USER_ERRORS = (
    WordLengthMismatchError,
    DictionaryNotFoundError,
    EmptyDictionaryError,
    ValueError,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wordchain",
        description="Find word ladders between equal-length words",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    sub = parser.add_subparsers(dest="command")

    # --- Register skill subcommands ---
    from wordchain.skills.dictionary.cli import register as register_dictionary
    from wordchain.skills.ladder.cli import register as register_ladder, add_search_arguments
    from wordchain.skills.highlight.cli import register as register_highlight

    register_dictionary(sub)
    register_ladder(sub)
    register_highlight(sub)

    # --- Plain-text chain command ---
    chain = sub.add_parser(
        "chain",
        help="Print a ladder between two words as text",
    )
    chain.add_argument("source", help="Start word")
    chain.add_argument("target", help="End word")
    add_search_arguments(chain)

    args = parser.parse_args(argv)

    if args.verbose:
        enable_debug_logging()

    if args.command is None:
        parser.print_help()
        return 1

    # --- Dispatch ---
    if args.command == "chain":
        return _run_chain(args)

    # Skill subcommands with two-level dispatch
    skill_dispatch = {
        "dictionary": "wordchain.skills.dictionary.cli",
        "ladder": "wordchain.skills.ladder.cli",
        "highlight": "wordchain.skills.highlight.cli",
    }

    if args.command in skill_dispatch:
        if not getattr(args, "action", None):
            # Re-parse to show skill-specific help
            parser.parse_args([args.command, "--help"])
            return 1

        import importlib
        cli_mod = importlib.import_module(skill_dispatch[args.command])
        try:
            result = cli_mod.run(args)
        except _USER_ERRORS as exc:
            json.dump({"error": str(exc)}, sys.stdout, indent=2)
            print()
            return 1
        json.dump(result, sys.stdout, indent=2)
        print()
        return 0

    return 1


def _run_chain(args: argparse.Namespace) -> int:
    from wordchain.skills.ladder import find, format_path

    try:
        result = find(
            args.source,
            args.target,
            dictionary_path=args.dictionary,
            max_length=args.max_length,
            strategy=args.strategy,
            alphabet=args.alphabet,
        )
    except _USER_ERRORS as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if result["found"]:
        print(
            f"Shortest found path from '{args.source}' to '{args.target}': "
            f"{format_path(result['path'])}"
        )
    else:
        print(
            f"No way to traverse from '{args.source}' to '{args.target}', "
            "according to this algorithm.",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
