"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

VERSION = "v0.11.0-rc2"
PROGRAM = "bddsuite"


def version_line() -> str:
    """Return the line printed by the version command."""
    return f"{PROGRAM} version is: {VERSION}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Creates and runs test runner for the given feature files.",
    )
    parser.add_argument("--version", action="store_true", help="show current version")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("version", help="Show current version", description="Show current version")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return its exit status."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1

    if args.version or args.command == "version":
        print(version_line())
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())