"""Tests for the MonetaryAmount value type.

Construction checks, equality, and both display renderings.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from moneylex import LocaleTable, MonetaryAmount, UnsupportedCurrencyError
from moneylex.diagnostics import DiagnosticCode


class TestConstruction:
    """MonetaryAmount.__post_init__ validation."""

    def test_decimal_amount(self) -> None:
        money = MonetaryAmount(Decimal("12.34"), "USD")
        assert money.amount == Decimal("12.34")
        assert money.currency_code == "USD"

    def test_int_converted(self) -> None:
        money = MonetaryAmount(5, "EUR")  # type: ignore[arg-type]
        assert isinstance(money.amount, Decimal)
        assert money.amount == Decimal(5)

    def test_code_uppercased(self) -> None:
        assert MonetaryAmount(Decimal(1), "gbp").currency_code == "GBP"

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError, match="float"):
            MonetaryAmount(1.5, "USD")  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool"):
            MonetaryAmount(True, "USD")  # type: ignore[arg-type]

    def test_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="str"):
            MonetaryAmount("1.5", "USD")  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity", "sNaN"])
    def test_non_finite_rejected(self, value: str) -> None:
        with pytest.raises(ValueError, match="finite"):
            MonetaryAmount(Decimal(value), "USD")

    @pytest.mark.parametrize("code", ["CHF", "XYZ", "usdx", ""])
    def test_unsupported_currency(self, code: str) -> None:
        with pytest.raises(UnsupportedCurrencyError) as exc_info:
            MonetaryAmount(Decimal(1), code)
        assert exc_info.value.currency_code == code.upper()
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNSUPPORTED_CURRENCY
        assert str(exc_info.value) == f"Unsupported currency: {code.upper()}"

    def test_frozen(self) -> None:
        money = MonetaryAmount(Decimal(1), "USD")
        with pytest.raises(AttributeError):
            money.amount = Decimal(2)  # type: ignore[misc]


class TestEquality:
    """Value semantics."""

    def test_equal_values(self) -> None:
        assert MonetaryAmount(Decimal("1.50"), "USD") == MonetaryAmount(Decimal("1.5"), "usd")

    def test_currency_distinguishes(self) -> None:
        assert MonetaryAmount(Decimal(1), "USD") != MonetaryAmount(Decimal(1), "CAD")

    def test_hashable(self) -> None:
        prices = {MonetaryAmount(Decimal(1), "USD"), MonetaryAmount(Decimal("1.0"), "USD")}
        assert len(prices) == 1


class TestFormatDisplay:
    """Uniform "{CODE} {amount}" rendering."""

    @pytest.mark.parametrize(
        ("amount", "code", "expected"),
        [
            ("1234.56", "USD", "USD 1,234.56"),
            ("1234.5", "EUR", "EUR 1,234.50"),
            ("0", "GBP", "GBP 0.00"),
            ("5000", "JPY", "JPY 5,000.00"),
            ("1234567.891", "AUD", "AUD 1,234,567.89"),
            ("-42.1", "CAD", "CAD -42.10"),
        ],
    )
    def test_display(self, amount: str, code: str, expected: str) -> None:
        money = MonetaryAmount(Decimal(amount), code)
        assert money.format_display() == expected
        assert str(money) == expected

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            ("0.005", "USD 0.01"),
            ("0.015", "USD 0.02"),
            ("0.025", "USD 0.03"),
            ("2.675", "USD 2.68"),
            ("0.004", "USD 0.00"),
        ],
    )
    def test_rounds_half_up(self, amount: str, expected: str) -> None:
        assert str(MonetaryAmount(Decimal(amount), "USD")) == expected

    def test_amount_wider_than_default_precision(self) -> None:
        """Rounding and grouping do not overflow the 28-digit default context."""
        money = MonetaryAmount(Decimal("9" * 40 + ".995"), "USD")
        assert str(money) == f"USD {10**40:,}.00"

    def test_display_does_not_change_amount(self) -> None:
        money = MonetaryAmount(Decimal("0.005"), "USD")
        str(money)
        assert money.amount == Decimal("0.005")


class TestFormatLocalized:
    """Per-currency rendering via Babel."""

    def test_euro_german_format(self) -> None:
        money = MonetaryAmount(Decimal("1234.56"), "EUR")
        assert money.format_localized() == "1.234,56\xa0€"

    def test_dollar_us_format(self) -> None:
        money = MonetaryAmount(Decimal("1234.56"), "USD")
        assert money.format_localized() == "$1,234.56"

    def test_pound_gb_format(self) -> None:
        assert MonetaryAmount(Decimal("5.5"), "GBP").format_localized() == "£5.50"

    def test_wide_amount_localized(self) -> None:
        digits = "1" * 30
        money = MonetaryAmount(Decimal(digits), "EUR")
        grouped = f"{int(digits):,}".replace(",", ".")
        assert money.format_localized() == f"{grouped},00\xa0€"

    def test_currency_missing_from_table_uses_display_locale(
        self, two_convention_table: LocaleTable
    ) -> None:
        money = MonetaryAmount(Decimal("10"), "GBP")
        assert money.format_localized(two_convention_table) == "£10.00"
