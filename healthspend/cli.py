"""Command-line interface for the healthcare spending report."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .dataset import DEFAULT_CSV_FILENAME
from .runner import run_pipeline

USAGE_MESSAGE = "Format for the program is: healthspend [File name of CSV file]"


def build_parser() -> argparse.ArgumentParser:
    """
    Build command-line argument parser.

    Returns:
        ArgumentParser accepting an optional CSV path
    """
    parser = argparse.ArgumentParser(
        prog="healthspend",
        allow_abbrev=False,
        description=(
            "Rank U.S. states by total healthcare spending per capita (2000-2009) "
            "and service categories by 2009 spending."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="csv_file",
        help=f"Healthcare spending CSV file (default: {DEFAULT_CSV_FILENAME}).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    CLI entry point for the spending report.

    Can be invoked:
    - Directly: python -m healthspend
    - As console script: healthspend Healthcare_Spending_Per_Capita.csv
    - From code: main(["data.csv"])

    More than one path prints the usage line and still exits 0.

    Args:
        argv: Command-line arguments (None = use sys.argv)

    Returns:
        Process exit status: 0 on success or usage, 1 on I/O failure
    """
    parser = build_parser()
    # Dash-prefixed tokens count as paths; only -h/--help is an option
    args, extra = parser.parse_known_args(list(argv) if argv is not None else None)
    paths = list(args.paths) + extra

    if len(paths) > 1:
        print(USAGE_MESSAGE)
        return 0

    path = paths[0] if paths else DEFAULT_CSV_FILENAME
    try:
        run_pipeline(path)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
