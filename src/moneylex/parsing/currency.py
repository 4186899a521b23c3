"""Currency detection for raw price strings.

Splits a raw price into an optional currency code and the residual numeric
substring. Detection order:
    1. Leading 2-3 uppercase letters that form a known ISO code ("EUR 1.234,56")
    2. A recognized currency symbol anywhere in the string ("$100", "20 €")
    3. Nothing detected: the input is passed through unchanged

Pure and deterministic: no locale access, no side effects.

Python 3.13+.
"""

import re
from collections.abc import Container, Mapping

from moneylex.constants import CURRENCY_SYMBOLS

__all__ = ["extract_currency"]

_CODE_PREFIX_PATTERN = re.compile(r"^([A-Z]{2,3})\s*")


def extract_currency(
    value: str,
    *,
    known_codes: Container[str],
    symbols: Mapping[str, str] = CURRENCY_SYMBOLS,
) -> tuple[str | None, str]:
    """Detect a leading currency code or a currency symbol.

    Args:
        value: Trimmed, non-empty price string
        known_codes: Codes accepted as a prefix (usually a LocaleTable)
        symbols: Symbol -> currency code, checked in insertion order

    Returns:
        Tuple of (currency_code, numeric_substring); currency_code is None
        when nothing was detected.

    Examples:
        >>> extract_currency("EUR 1.234,56", known_codes={"EUR"})
        ('EUR', '1.234,56')
        >>> extract_currency("$1,234.56", known_codes={"USD"})
        ('USD', '1,234.56')
        >>> extract_currency("1234.56", known_codes={"USD"})
        (None, '1234.56')
    """
    match = _CODE_PREFIX_PATTERN.match(value)
    if match is not None and match.group(1) in known_codes:
        return (match.group(1), value[match.end():].strip())

    for symbol, currency_code in symbols.items():
        if symbol in value:
            # Every occurrence goes, not just the first: "$$100" reads as "100"
            return (currency_code, value.replace(symbol, "").strip())

    return (None, value)
