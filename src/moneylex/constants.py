"""Shared constants for moneylex.

Centralized configuration used by the conventions table, the parsers and
the display layer. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Currencies: Supported ISO 4217 codes and their canonical locales
- Symbols: Currency symbols recognized during extraction
- Display: Rendering precision and locale
- Input limits: Bounds on the size of a single price string

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currencies
    "SUPPORTED_CURRENCY_CODES",
    "DEFAULT_CONVENTION_LOCALES",
    "ISO_CURRENCY_CODE_LENGTH",
    # Symbols
    "CURRENCY_SYMBOLS",
    # Display
    "DISPLAY_DECIMAL_PLACES",
    "DISPLAY_LOCALE",
    "DISPLAY_PATTERN",
    # Parsing
    "INVARIANT_LABEL",
    "MAX_INPUT_LENGTH",
]

# ============================================================================
# CURRENCIES
# ============================================================================

# ISO 4217 currency codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# Canonical locale for each supported currency. Declaration order is the
# enumeration order of the default LocaleTable and therefore the tie-break
# order when a value is reachable through several conventions.
DEFAULT_CONVENTION_LOCALES: dict[str, str] = {
    "USD": "en_US",
    "EUR": "de_DE",
    "GBP": "en_GB",
    "JPY": "ja_JP",
    "PHP": "en_PH",
    "CAD": "en_CA",
    "AUD": "en_AU",
}

SUPPORTED_CURRENCY_CODES: frozenset[str] = frozenset(DEFAULT_CONVENTION_LOCALES)

# ============================================================================
# SYMBOLS
# ============================================================================

# Symbols the extractor recognizes anywhere in the input, checked in order.
CURRENCY_SYMBOLS: dict[str, str] = {
    "$": "USD",
    "€": "EUR",  # Euro sign
    "£": "GBP",  # Pound sign
}

# ============================================================================
# DISPLAY
# ============================================================================

# Uniform two-decimal display for every currency, JPY included.
DISPLAY_DECIMAL_PLACES: int = 2

# Invariant-style rendering: "," grouping, "." decimal.
DISPLAY_LOCALE: str = "en"
DISPLAY_PATTERN: str = "#,##0.00"

# ============================================================================
# PARSING
# ============================================================================

# Label of the locale-independent dot-decimal convention.
INVARIANT_LABEL: str = "Format: invariant"

# Maximum length of a single price string (characters, after trimming).
# Each parse attempt is bounded by the number of conventions times this.
MAX_INPUT_LENGTH: int = 256
