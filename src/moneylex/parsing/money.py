"""Single price string parsing.

API: parse_money() returns tuple[MonetaryAmount | None, tuple[MoneyParseError, ...]].
Functions NEVER raise exceptions for bad input - errors returned in tuple.

Pipeline:
    raw string -> extract_currency() -> parse_all_conventions()
    -> resolve_candidates() -> MonetaryAmount

Currency: an explicitly detected code (prefix or symbol) wins. Otherwise
the currency of the first convention, in table order, that produced the
accepted value is used.

Thread-safe. MoneyParser holds only an immutable LocaleTable.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TypeAlias

from moneylex.constants import MAX_INPUT_LENGTH
from moneylex.conventions import LocaleTable, default_locale_table
from moneylex.diagnostics import (
    EmptyInputError,
    ErrorTemplate,
    MoneyParseError,
    UnparsableAmountError,
    UnsupportedCurrencyError,
)
from moneylex.money import MonetaryAmount

from .currency import extract_currency
from .numbers import parse_all_conventions
from .resolver import resolve_candidates

__all__ = ["MoneyParser", "ParseResult", "parse_money"]

logger = logging.getLogger(__name__)

ParseResult: TypeAlias = tuple[MonetaryAmount | None, tuple[MoneyParseError, ...]]


def _failure(error: MoneyParseError) -> ParseResult:
    return (None, (error,))


class MoneyParser:
    """Parser for free-form price strings over a fixed convention table.

    Attributes:
        table: Conventions tried for every input
        max_input_length: Longer inputs are rejected without parsing

    Example:
        >>> parser = MoneyParser()
        >>> result, errors = parser.parse("EUR 1.234,56")
        >>> result
        MonetaryAmount(amount=Decimal('1234.56'), currency_code='EUR')
        >>> errors
        ()
    """

    __slots__ = ("_max_input_length", "_table")

    def __init__(
        self,
        table: LocaleTable | None = None,
        *,
        max_input_length: int = MAX_INPUT_LENGTH,
    ) -> None:
        """Initialize parser.

        Args:
            table: Convention table (default CLDR-derived table if None)
            max_input_length: Maximum accepted input length after trimming

        Raises:
            ValueError: If max_input_length is not positive
        """
        if max_input_length <= 0:
            msg = f"max_input_length must be positive, got {max_input_length}"
            raise ValueError(msg)
        self._table = table if table is not None else default_locale_table()
        self._max_input_length = max_input_length

    @property
    def table(self) -> LocaleTable:
        """Conventions tried for every input."""
        return self._table

    @property
    def max_input_length(self) -> int:
        """Maximum accepted input length."""
        return self._max_input_length

    def parse(self, value: str) -> ParseResult:
        """Parse one price string into a MonetaryAmount.

        Args:
            value: Raw price string (e.g., "$1,234.56", "EUR 1.234,56", "1234.56")

        Returns:
            Tuple of (result, errors):
            - result: MonetaryAmount, or None if parsing failed
            - errors: Tuple with one MoneyParseError on failure (empty on success)

        Examples:
            >>> MoneyParser().parse("$100")[0]
            MonetaryAmount(amount=Decimal('100'), currency_code='USD')

            >>> result, errors = MoneyParser().parse("1.234")
            >>> type(errors[0]).__name__
            'AmbiguousFormatError'
        """
        # Type check: value must be string (runtime defense for untyped callers)
        if not isinstance(value, str):
            diagnostic = ErrorTemplate.invalid_input_type(value)  # type: ignore[unreachable]
            return _failure(UnparsableAmountError(diagnostic, input_value=repr(value)))

        text = value.strip()
        if not text:
            return _failure(EmptyInputError(ErrorTemplate.empty_input(), input_value=value))

        if len(text) > self._max_input_length:
            diagnostic = ErrorTemplate.input_too_long(text, self._max_input_length)
            return _failure(UnparsableAmountError(diagnostic, input_value=value))

        detected_code, number_str = extract_currency(text, known_codes=self._table)

        candidates = parse_all_conventions(number_str, self._table)
        candidate, resolution_error = resolve_candidates(candidates, text)
        if resolution_error is not None:
            return _failure(resolution_error)
        assert candidate is not None  # Type narrowing: resolution succeeded

        currency_code = detected_code
        if currency_code is None and candidate.currency_codes:
            currency_code = candidate.currency_codes[0]
            logger.debug(
                "No currency in %r; using %s from %s", text, currency_code, candidate.label
            )
        if currency_code is None:
            diagnostic = ErrorTemplate.currency_unresolved(text)
            return _failure(UnparsableAmountError(diagnostic, input_value=value))

        try:
            amount = MonetaryAmount(candidate.value, currency_code)
        except UnsupportedCurrencyError as e:
            e.input_value = value
            return _failure(e)

        return (amount, ())


@functools.cache
def _default_parser() -> MoneyParser:
    return MoneyParser()


def parse_money(value: str, *, table: LocaleTable | None = None) -> ParseResult:
    """Parse one price string with the default (or a given) convention table.

    Convenience wrapper around MoneyParser.parse().

    Args:
        value: Raw price string
        table: Convention table; the default CLDR-derived table if None

    Returns:
        Tuple of (result, errors) as MoneyParser.parse()

    Examples:
        >>> result, errors = parse_money("EUR 1.234,56")
        >>> str(result)
        'EUR 1,234.56'

        >>> result, errors = parse_money("   ")
        >>> result is None, type(errors[0]).__name__
        (True, 'EmptyInputError')
    """
    parser = _default_parser() if table is None else MoneyParser(table)
    return parser.parse(value)
