"""Type guard functions for parsing result type narrowing.

parse_money() returns tuple[MonetaryAmount | None, tuple[MoneyParseError, ...]].
Type guards check the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and is_valid_amount(result)` to just `if is_valid_amount(result)`.

Example:
    >>> result, errors = parse_money("$1,234.56")
    >>> if is_valid_amount(result):
    ...     # mypy knows result is MonetaryAmount
    ...     cents = result.amount * 100
"""

from decimal import Decimal
from typing_extensions import TypeIs

from moneylex.money import MonetaryAmount

__all__ = [
    "is_valid_amount",
    "is_valid_decimal",
]


def is_valid_decimal(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: Check if a reading is valid (not None/NaN/Infinity).

    Args:
        value: Decimal from parse_with_convention()/parse_invariant() (may be None)

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return value is not None and value.is_finite()


def is_valid_amount(value: MonetaryAmount | None) -> TypeIs[MonetaryAmount]:
    """Type guard: Check if a parse_money() result is a usable amount.

    Args:
        value: MonetaryAmount from parse_money() result tuple (may be None on error)

    Returns:
        True if value is a MonetaryAmount with a finite amount, False otherwise
    """
    return value is not None and value.amount.is_finite()
