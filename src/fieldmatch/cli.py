"""Command-line interface for fieldmatch.

This module provides the CLI for evaluating a predicate from the command line.

Usage:
    fieldmatch evaluate --document <json|@file> --kind <kind> --path <path> [options]
    fieldmatch evaluate --document <json|@file> --request <json|file>
    fieldmatch kinds

Commands:
    evaluate    Evaluate one predicate against a JSON document.
    kinds       List predicate kind names and codes.

Exit codes:
    0: The predicate matched
    1: Evaluation failed (error printed to stderr)
    2: Unknown command
    3: The predicate did not match
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .engine import PredicateEngine
from .errors import FieldMatchError
from .kinds import PredicateKind
from .loader import MatchRequest, load_request, parse_kind


def _read_document(value: str) -> bytes:
    if value.startswith("@"):
        return Path(value[1:]).read_bytes()
    return value.encode("utf-8")


def _cmd_evaluate(argv: list[str]) -> int:
    """Execute the 'evaluate' command.

    Args:
        argv: Command-line arguments after 'evaluate'.

    Returns:
        int: Exit code (0 if matched, 3 if not, 1 on error).
    """
    p = argparse.ArgumentParser(prog="fieldmatch evaluate")
    p.add_argument("--document", required=True, help="Inline JSON document, or @path to a file")
    p.add_argument("--request", default=None, help="Request JSON file path or inline JSON")
    p.add_argument("--kind", default=None, help="Predicate kind name or integer code")
    p.add_argument("--path", default=None, help="Dot-separated field path")
    p.add_argument("--arg", action="append", default=[], dest="args", help="Predicate argument (repeatable)")
    p.add_argument("--negate", action="store_true")
    p.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.request is not None:
            request = load_request(args.request)
        else:
            if args.kind is None or args.path is None:
                p.error("either --request or both --kind and --path are required")
            digits = args.kind.lstrip("-")
            kind = int(args.kind) if digits.isascii() and digits.isdigit() else args.kind
            request = MatchRequest(
                kind=parse_kind(kind),
                path=args.path,
                args=tuple(args.args),
                negate=args.negate,
            )
        matched = PredicateEngine().run(request, _read_document(args.document))
    except (FieldMatchError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("match" if matched else "no match")
    return 0 if matched else 3


def _cmd_kinds(argv: list[str]) -> int:
    for kind in PredicateKind:
        print(f"{kind.value}\t{kind.name.lower()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the fieldmatch CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        int: Exit code.
            - 0: Predicate matched (or help/kinds shown)
            - 1: Evaluation error
            - 2: Unknown command
            - 3: Predicate did not match
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in {"-h", "--help"}:
        print("Usage: fieldmatch <command> [args]\n\nCommands:\n  evaluate\n  kinds")
        return 0

    cmd, rest = argv[0], argv[1:]
    if cmd == "evaluate":
        return _cmd_evaluate(rest)
    if cmd == "kinds":
        return _cmd_kinds(rest)

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
