"""Command-line entry point: print the walk trace of a JavaScript file."""

from __future__ import annotations

import argparse
import logging
import sys

from .api import dump_trace
from .syntax_types import WalkerSettings
from . import constants

DEMO_SOURCE = """\
function outer(a, b) {
    const inner = function () {
        return a && b;
    };
    return inner();
}

const area = (r) => 3.14 * r * r;
"""


def _build_settings(args: argparse.Namespace) -> WalkerSettings:
    return WalkerSettings(
        edition=args.edition,
        logicalor=not args.no_logicalor,
        switchcase=not args.no_switchcase,
        forin=args.forin,
        trycatch=args.trycatch,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Walk a JavaScript syntax tree and print every visit"
    )
    parser.add_argument("file", nargs="?", help="Source file to walk")
    parser.add_argument(
        "--edition",
        "-e",
        default=constants.EDITION_ES2015,
        choices=constants.SUPPORTED_EDITIONS,
        help="Language edition recognised by the syntax registry (default: es2015)",
    )
    parser.add_argument("--forin", action="store_true", help="Count for-in as a branch")
    parser.add_argument(
        "--trycatch", action="store_true", help="Count catch clauses as branches"
    )
    parser.add_argument(
        "--no-logicalor", action="store_true", help="Do not count || as a branch"
    )
    parser.add_argument(
        "--no-switchcase", action="store_true", help="Do not count case clauses as branches"
    )
    parser.add_argument("--json", action="store_true", help="Emit the trace as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.file:
        source = DEMO_SOURCE
        print("No file provided. Using built-in demo:\n")
        print(source)
    else:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()

    print(dump_trace(source, _build_settings(args), as_json=args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
