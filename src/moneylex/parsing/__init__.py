"""Price parsing: free-form price strings to currency-tagged exact amounts.

- Functions NEVER raise exceptions for bad input - errors are returned in tuple
- An input is accepted only if exactly one distinct reading exists across
  all supported locale conventions

Public API:
    Parsing Functions:
        parse_money - Returns tuple[MonetaryAmount | None, tuple[MoneyParseError, ...]]
        MoneyParser - Same, over an injected LocaleTable

    Building Blocks:
        extract_currency - Split a raw string into (currency code, numeric substring)
        parse_all_conventions - Distinct readings of a numeric substring
        parse_with_convention - Reading under one convention
        parse_invariant - Reading as a plain dot-decimal number
        resolve_candidates - Collapse readings to one, or fail

    Type Guards:
        is_valid_amount - TypeIs guard for MonetaryAmount (not None)
        is_valid_decimal - TypeIs guard for finite Decimal

Example:
    >>> from moneylex.parsing import parse_money, is_valid_amount
    >>> result, errors = parse_money("EUR 1.234,56")
    >>> if is_valid_amount(result):
    ...     print(result)
    EUR 1,234.56

Python 3.13+. Uses Babel CLDR data for locale conventions.
"""

from .currency import extract_currency
from .guards import is_valid_amount, is_valid_decimal
from .money import MoneyParser, ParseResult, parse_money
from .numbers import ParseCandidate, parse_all_conventions, parse_invariant, parse_with_convention
from .resolver import resolve_candidates

__all__ = [
    # Type guards
    "is_valid_amount",
    "is_valid_decimal",
    # Parsing
    "MoneyParser",
    "ParseCandidate",
    "ParseResult",
    "extract_currency",
    "parse_all_conventions",
    "parse_invariant",
    "parse_money",
    "parse_with_convention",
    "resolve_candidates",
]
