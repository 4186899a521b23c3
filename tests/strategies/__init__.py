"""Hypothesis strategies for moneylex property-based testing.

Usage:
    from tests.strategies import currency_amounts, displayed_prices
"""

from .money import (
    MAX_DISPLAY_DIGITS,
    SUPPORTED_CODES,
    any_price_text,
    currency_amounts,
    displayed_prices,
    garbage_strings,
    monetary_amounts,
    supported_codes,
)

__all__ = [
    "MAX_DISPLAY_DIGITS",
    "SUPPORTED_CODES",
    "any_price_text",
    "currency_amounts",
    "displayed_prices",
    "garbage_strings",
    "monetary_amounts",
    "supported_codes",
]
