"""Tests for the locale numeric conventions table.

Validates CLDR-derived separators, case-insensitive lookup, declaration
order and construction-time validation.
"""

from __future__ import annotations

import pytest

from moneylex import LocaleConvention, LocaleTable, default_locale_table
from moneylex.constants import DEFAULT_CONVENTION_LOCALES


class TestLocaleConventionFromCldr:
    """Test LocaleConvention.from_cldr()."""

    def test_german_separators(self) -> None:
        """de_DE uses comma decimal and dot grouping."""
        eur = LocaleConvention.from_cldr("EUR", "de_DE")
        assert eur.decimal_symbol == ","
        assert eur.group_symbol == "."
        assert eur.currency_symbol == "€"

    def test_us_separators(self) -> None:
        """en_US uses dot decimal and comma grouping."""
        usd = LocaleConvention.from_cldr("USD", "en_US")
        assert usd.decimal_symbol == "."
        assert usd.group_symbol == ","
        assert usd.currency_symbol == "$"

    def test_bcp47_locale_accepted(self) -> None:
        """Hyphenated locale codes are normalized to POSIX form."""
        gbp = LocaleConvention.from_cldr("gbp", "en-GB")
        assert gbp.locale_id == "en_GB"
        assert gbp.currency_code == "GBP"

    def test_label_uses_bcp47_and_symbol(self) -> None:
        """Label shows the hyphenated locale and the currency symbol."""
        assert LocaleConvention.from_cldr("EUR", "de_DE").label == "Format: de-DE (€)"
        assert LocaleConvention.from_cldr("USD", "en_US").label == "Format: en-US ($)"


class TestLocaleConventionValidation:
    """Test LocaleConvention construction checks."""

    def test_code_uppercased(self) -> None:
        convention = LocaleConvention("usd", "en_US", ".", ",", "$")
        assert convention.currency_code == "USD"

    def test_same_separators_rejected(self) -> None:
        with pytest.raises(ValueError, match="must differ"):
            LocaleConvention("USD", "en_US", ".", ".", "$")

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            LocaleConvention("USD", "en_US", "", ",", "$")

    @pytest.mark.parametrize("code", ["US", "USDX", "U$D", ""])
    def test_malformed_code_rejected(self, code: str) -> None:
        with pytest.raises(ValueError, match="3 ASCII letters"):
            LocaleConvention(code, "en_US", ".", ",", "$")

    def test_immutable(self) -> None:
        convention = LocaleConvention("USD", "en_US", ".", ",", "$")
        with pytest.raises(AttributeError):
            convention.decimal_symbol = ","  # type: ignore[misc]


class TestLocaleTable:
    """Test LocaleTable lookup and enumeration."""

    def test_default_table_covers_supported_currencies(self) -> None:
        table = default_locale_table()
        assert table.codes == ("USD", "EUR", "GBP", "JPY", "PHP", "CAD", "AUD")
        assert len(table) == len(DEFAULT_CONVENTION_LOCALES)

    def test_default_table_locales(self) -> None:
        table = default_locale_table()
        for code, locale_id in DEFAULT_CONVENTION_LOCALES.items():
            convention = table.get(code)
            assert convention is not None
            assert convention.locale_id == locale_id

    def test_default_table_is_cached(self) -> None:
        assert default_locale_table() is default_locale_table()

    def test_lookup_case_insensitive(self) -> None:
        table = default_locale_table()
        assert table.get("eur") is table.get("EUR")
        assert "jpy" in table
        assert "Php" in table

    def test_unknown_code(self) -> None:
        table = default_locale_table()
        assert table.get("CHF") is None
        assert "CHF" not in table
        assert 42 not in table

    def test_iteration_in_declaration_order(
        self, two_convention_table: LocaleTable
    ) -> None:
        assert [c.currency_code for c in two_convention_table] == ["USD", "EUR"]

    def test_duplicate_code_rejected(self) -> None:
        usd = LocaleConvention("USD", "en_US", ".", ",", "$")
        with pytest.raises(ValueError, match="Duplicate"):
            LocaleTable([usd, LocaleConvention("usd", "en_CA", ".", ",", "$")])

    def test_empty_table_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            LocaleTable([])

    def test_from_cldr_custom_mapping(self) -> None:
        table = LocaleTable.from_cldr({"GBP": "en_GB", "EUR": "de_DE"})
        assert table.codes == ("GBP", "EUR")

    def test_repr_lists_codes(self, two_convention_table: LocaleTable) -> None:
        assert repr(two_convention_table) == "LocaleTable(USD, EUR)"
