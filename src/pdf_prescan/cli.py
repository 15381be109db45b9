# src/pdf_prescan/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .constants import BUILTIN_CATEGORIES
from .core import scan_pdf
from .errors import EXIT_FAILURE, EXIT_OK, PrescanError
from .io.exports import render_report, report_payload, write_json
from .utils.logging import get_logger

PROG = "pdf-prescan"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Check a PDF for an extractable text layer and count potentially "
            "sensitive terms ahead of redaction review."
        ),
    )
    p.add_argument("input", type=Path, nargs="?", help="PDF file to scan")
    p.add_argument(
        "--add-term",
        "-t",
        dest="add_term",
        action="append",
        default=None,
        metavar="TERM",
        help="Extra case-insensitive term to count (repeatable).",
    )
    p.add_argument(
        "--add-terms-file",
        dest="add_terms_file",
        type=Path,
        default=None,
        metavar="FILE",
        help="File with one extra term per line (blank lines skipped).",
    )
    p.add_argument(
        "--out",
        "-o",
        type=Path,
        default=None,
        help="Also write the report as JSON to this path.",
    )
    p.add_argument(
        "--list-categories",
        action="store_true",
        help="Print the built-in term categories and exit.",
    )
    p.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Verbose extraction/scan logs (use --debug / --no-debug).",
    )
    return p


def _print_categories() -> None:
    print("Built-in categories:")
    for cat in BUILTIN_CATEGORIES:
        print(f"- {cat.name}: {cat.description}")


def main(argv: Sequence[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    # Configure logging level based on --debug
    get_logger().setLevel(logging.DEBUG if args.debug else logging.INFO)

    if args.list_categories:
        _print_categories()
        return EXIT_OK

    if args.input is None:
        p.error("the following arguments are required: input")

    try:
        outcome = scan_pdf(args.input, terms=args.add_term, terms_file=args.add_terms_file)
    except PrescanError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return e.exit_code

    for line in render_report(outcome):
        print(line)

    if args.out is not None:
        try:
            write_json(report_payload(outcome), args.out)
        except OSError as e:
            print(f"{PROG}: cannot write JSON report {args.out}: {e}", file=sys.stderr)
            return EXIT_FAILURE
        print(f"Wrote JSON to {args.out}")

    return outcome.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
