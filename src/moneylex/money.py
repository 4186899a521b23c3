"""MonetaryAmount value type.

Immutable currency-tagged amount with exact decimal arithmetic. Binary
floating point is rejected at construction so equality and ordering of
amounts never suffer from rounding artifacts.

Python 3.13+.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from babel.numbers import format_currency, format_decimal

from moneylex.constants import (
    DISPLAY_DECIMAL_PLACES,
    DISPLAY_LOCALE,
    DISPLAY_PATTERN,
    SUPPORTED_CURRENCY_CODES,
)
from moneylex.conventions import LocaleTable, default_locale_table
from moneylex.diagnostics import ErrorTemplate, UnsupportedCurrencyError

__all__ = ["MonetaryAmount"]

_DISPLAY_QUANTUM = Decimal(1).scaleb(-DISPLAY_DECIMAL_PLACES)


def _working_precision(amount: Decimal) -> int:
    """Digits needed to hold amount with display decimals, never below the context default."""
    integer_digits = max(amount.adjusted() + 1, 1)
    return max(decimal.getcontext().prec, integer_digits + DISPLAY_DECIMAL_PLACES + 1)


@dataclass(frozen=True, slots=True)
class MonetaryAmount:
    """Currency-tagged exact amount.

    Attributes:
        amount: Exact decimal value
        currency_code: Supported ISO 4217 code, stored uppercase

    Raises:
        UnsupportedCurrencyError: If currency_code is not supported
        TypeError: If amount is a float or not numeric
        ValueError: If amount is NaN or infinite

    Example:
        >>> price = MonetaryAmount(Decimal("1234.56"), "usd")
        >>> price.currency_code
        'USD'
        >>> str(price)
        'USD 1,234.56'
    """

    amount: Decimal
    currency_code: str

    def __post_init__(self) -> None:
        amount = self.amount
        if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
            msg = f"amount must be Decimal or int, got {type(amount).__name__}"
            raise TypeError(msg)
        if isinstance(amount, int):
            amount = Decimal(amount)
            object.__setattr__(self, "amount", amount)
        if not amount.is_finite():
            msg = f"amount must be finite, got {amount}"
            raise ValueError(msg)

        code = str(self.currency_code).upper()
        if code not in SUPPORTED_CURRENCY_CODES:
            raise UnsupportedCurrencyError(
                ErrorTemplate.currency_unsupported(code), currency_code=code
            )
        object.__setattr__(self, "currency_code", code)

    def __str__(self) -> str:
        return self.format_display()

    def format_display(self) -> str:
        """Render as ``"{CODE} {amount}"`` with grouping and exactly 2 decimals.

        Rounds half away from zero; the display format is the same for every
        currency and does not depend on the currency's locale.
        Amounts wider than the default 28-digit decimal context render in full.

        Example:
            >>> MonetaryAmount(Decimal("1234.5"), "EUR").format_display()
            'EUR 1,234.50'
        """
        with decimal.localcontext(prec=_working_precision(self.amount)):
            rounded = self.amount.quantize(_DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)
            number = format_decimal(rounded, format=DISPLAY_PATTERN, locale=DISPLAY_LOCALE)
        return f"{self.currency_code} {number}"

    def format_localized(self, table: LocaleTable | None = None) -> str:
        """Render with the currency's own locale conventions via Babel.

        Args:
            table: Convention table to take the locale from (default table if None)

        Example:
            >>> MonetaryAmount(Decimal("1234.56"), "EUR").format_localized()
            '1.234,56\\xa0€'
        """
        if table is None:
            table = default_locale_table()
        convention = table.get(self.currency_code)
        locale_id = convention.locale_id if convention is not None else DISPLAY_LOCALE
        with decimal.localcontext(prec=_working_precision(self.amount)):
            return str(format_currency(self.amount, self.currency_code, locale=locale_id))
