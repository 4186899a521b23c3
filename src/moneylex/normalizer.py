"""Batch normalization of price strings.

Parses every input, keeps going past bad ones, and returns the parsed
amounts sorted ascending by value together with one failure entry per
rejected input.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from moneylex.money import MonetaryAmount
from moneylex.parsing import MoneyParser, is_valid_amount, parse_money

__all__ = [
    "BatchResult",
    "ParseFailure",
    "normalize_and_sort",
]

logger = logging.getLogger(__name__)


class ParseFailure(NamedTuple):
    """One rejected input: the original string and a human-readable reason."""

    input_value: str
    reason: str


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Outcome of normalize_and_sort().

    Unpacks as a pair: ``amounts, failures = normalize_and_sort(values)``.

    Attributes:
        amounts: Parsed amounts, ascending by value (ties keep input order)
        failures: Rejected inputs in input order
    """

    amounts: tuple[MonetaryAmount, ...]
    failures: tuple[ParseFailure, ...]

    def __iter__(self) -> Iterator[tuple[MonetaryAmount, ...] | tuple[ParseFailure, ...]]:
        yield self.amounts
        yield self.failures

    @property
    def ok(self) -> bool:
        """True if every input parsed."""
        return not self.failures


def normalize_and_sort(
    values: Iterable[str],
    *,
    parser: MoneyParser | None = None,
) -> BatchResult:
    """Parse a batch of price strings and sort the results by amount.

    Never raises for item-level problems: each bad input becomes a
    ParseFailure and processing continues with the next one.

    Args:
        values: Raw price strings
        parser: Parser to use (default convention table if None)

    Returns:
        BatchResult with sorted amounts and failures

    Example:
        >>> amounts, failures = normalize_and_sort(["$10", "not a number", "€20"])
        >>> [str(a) for a in amounts]
        ['USD 10.00', 'EUR 20.00']
        >>> failures
        (ParseFailure(input_value='not a number', reason='Could not parse amount from: not a number'),)
    """
    amounts: list[MonetaryAmount] = []
    failures: list[ParseFailure] = []
    total = 0

    for value in values:
        total += 1
        result, errors = parse_money(value) if parser is None else parser.parse(value)
        if errors or not is_valid_amount(result):
            reason = errors[0].reason if errors else "No result"
            logger.debug("Failed to parse %r: %s", value, reason)
            failures.append(ParseFailure(value, reason))
            continue
        amounts.append(result)

    # list.sort() is stable: equal amounts keep their input order
    amounts.sort(key=lambda money: money.amount)

    logger.info("Normalized %d of %d price(s), %d failure(s)", len(amounts), total, len(failures))
    return BatchResult(amounts=tuple(amounts), failures=tuple(failures))
