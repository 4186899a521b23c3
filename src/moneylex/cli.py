"""Interactive price normalization shell.

Reads prices from the command line, or from standard input one per line
until the first blank line, then prints them normalized and sorted.

Exit codes:
    0: Success (failures are reported but tolerated)
    1: --strict was given and at least one price failed to parse

Usage:
    moneylex [--localized] [--diagnostics {rust,simple,json}] [--strict]
             [--log-level LEVEL] [PRICE ...]

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from moneylex.diagnostics import DiagnosticFormatter, OutputFormat
from moneylex.normalizer import normalize_and_sort
from moneylex.parsing import MoneyParser

__all__ = ["main", "read_prices"]

_RULE = "-" * 30


def read_prices(stream: TextIO) -> Iterator[str]:
    """Yield lines from stream until the first blank line or end of input."""
    for line in stream:
        if not line.strip():
            return
        yield line.rstrip("\r\n")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="moneylex",
        description="Normalize and sort free-form price strings.",
    )
    parser.add_argument(
        "prices",
        nargs="*",
        help="Prices to normalize. Read from stdin (until a blank line) if omitted.",
    )
    parser.add_argument(
        "--localized",
        action="store_true",
        help="Render amounts in each currency's own locale format.",
    )
    parser.add_argument(
        "--diagnostics",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Print full diagnostics for failures in the given format.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any price fails to parse.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    return parser.parse_args(argv)


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the price normalization shell."""
    args = _parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.prices:
        inputs = list(args.prices)
    else:
        print("Price Normalization System", file=stdout)
        print("Enter prices (one per line, empty line to finish):", file=stdout)
        inputs = list(read_prices(stdin))

    parser = MoneyParser()
    result = normalize_and_sort(inputs, parser=parser)

    if result.failures:
        print("Encountered errors:", file=stderr)
        formatter = (
            DiagnosticFormatter(output_format=OutputFormat(args.diagnostics))
            if args.diagnostics
            else None
        )
        for failure in result.failures:
            if formatter is None:
                print(f"- Failed to parse '{failure.input_value}': {failure.reason}", file=stderr)
                continue
            # Re-parse to recover the structured diagnostic for this input
            _, errors = parser.parse(failure.input_value)
            print(formatter.format_all(error.diagnostic for error in errors), file=stderr)

    print(file=stdout)
    print("Normalized and Sorted Prices:", file=stdout)
    print(_RULE, file=stdout)
    for amount in result.amounts:
        print(amount.format_localized(parser.table) if args.localized else amount, file=stdout)

    return 1 if args.strict and not result.ok else 0


if __name__ == "__main__":
    sys.exit(main())
