"""moneylex - Locale-aware price parsing with ambiguity detection.

Parses free-form price strings ("$1,234.56", "EUR 1.234,56", "1234.56")
into currency-tagged exact decimal amounts. A string is accepted only when
every supported locale convention that can read it agrees on one value;
"1.234" (1.234 in en-US, 1234 in de-DE) is rejected as ambiguous.

Public API:
    parse_money - Parse one price string (errors returned, never raised)
    normalize_and_sort - Parse a batch, collect failures, sort by amount
    MoneyParser - Parser over an injected LocaleTable
    MonetaryAmount - Immutable currency-tagged Decimal amount
    LocaleConvention / LocaleTable - Locale numeric conventions (CLDR via Babel)
    BatchResult / ParseFailure - Batch outcome types

Exceptions:
    MoneyError - Base exception class
    MoneyParseError - Base of all parse failures
    EmptyInputError, UnsupportedCurrencyError,
    UnparsableAmountError, AmbiguousFormatError

Submodules:
    moneylex.parsing - Extraction, multi-locale reading, resolution
    moneylex.diagnostics - Error types, codes, templates and formatting
    moneylex.conventions - Locale numeric table
"""

from .conventions import LocaleConvention, LocaleTable, default_locale_table
from .diagnostics import (
    AmbiguousFormatError,
    EmptyInputError,
    MoneyError,
    MoneyParseError,
    UnparsableAmountError,
    UnsupportedCurrencyError,
)
from .money import MonetaryAmount
from .normalizer import BatchResult, ParseFailure, normalize_and_sort
from .parsing import MoneyParser, parse_money

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("moneylex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AmbiguousFormatError",
    "BatchResult",
    "EmptyInputError",
    "LocaleConvention",
    "LocaleTable",
    "MonetaryAmount",
    "MoneyError",
    "MoneyParseError",
    "MoneyParser",
    "ParseFailure",
    "UnparsableAmountError",
    "UnsupportedCurrencyError",
    "__version__",
    "default_locale_table",
    "normalize_and_sort",
    "parse_money",
]
