"""Locale numeric conventions for the supported currencies.

A LocaleConvention describes how one region writes formatted amounts:
decimal separator, grouping separator and currency symbol. A LocaleTable
is the read-only, ordered set of conventions a parser tries.

All default convention data is sourced from Unicode CLDR via Babel.
The table is an explicitly constructed object passed to MoneyParser,
so tests and callers can inject alternate convention sets. Numbers are
read with Babel for the convention's locale, so hand-built conventions
should carry that locale's CLDR separators (prefer from_cldr()).

Thread-safe. Tables are immutable after construction.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from babel.numbers import get_currency_symbol, get_decimal_symbol, get_group_symbol

from moneylex.constants import DEFAULT_CONVENTION_LOCALES, ISO_CURRENCY_CODE_LENGTH
from moneylex.locale_utils import get_babel_locale, normalize_locale, to_bcp47

__all__ = [
    "LocaleConvention",
    "LocaleTable",
    "default_locale_table",
]


@dataclass(frozen=True, slots=True)
class LocaleConvention:
    """Number-writing convention of one currency's canonical locale.

    Attributes:
        currency_code: ISO 4217 code (stored uppercase)
        locale_id: POSIX locale identifier (e.g., "de_DE")
        decimal_symbol: Decimal separator (e.g., ",")
        group_symbol: Thousands grouping separator (e.g., ".")
        currency_symbol: Local currency symbol (e.g., "€")

    Example:
        >>> eur = LocaleConvention.from_cldr("EUR", "de_DE")
        >>> eur.decimal_symbol, eur.group_symbol
        (',', '.')
        >>> eur.label
        'Format: de-DE (€)'
    """

    currency_code: str
    locale_id: str
    decimal_symbol: str
    group_symbol: str
    currency_symbol: str

    def __post_init__(self) -> None:
        """Validate and normalize convention fields.

        Raises:
            ValueError: If the currency code is not 3 ASCII letters, a
                separator is empty, or both separators are the same.
        """
        code = self.currency_code.upper()
        if len(code) != ISO_CURRENCY_CODE_LENGTH or not (code.isascii() and code.isalpha()):
            msg = f"Currency code must be 3 ASCII letters, got {self.currency_code!r}"
            raise ValueError(msg)
        if not self.decimal_symbol or not self.group_symbol:
            msg = f"Separators for {code} must be non-empty"
            raise ValueError(msg)
        if self.decimal_symbol == self.group_symbol:
            msg = (
                f"Decimal and group separators for {code} must differ, "
                f"both are {self.decimal_symbol!r}"
            )
            raise ValueError(msg)
        object.__setattr__(self, "currency_code", code)
        object.__setattr__(self, "locale_id", normalize_locale(self.locale_id))

    @property
    def label(self) -> str:
        """Human-readable label identifying this convention in diagnostics."""
        return f"Format: {to_bcp47(self.locale_id)} ({self.currency_symbol})"

    @classmethod
    def from_cldr(cls, currency_code: str, locale_id: str) -> LocaleConvention:
        """Build a convention from CLDR data.

        Args:
            currency_code: ISO 4217 code
            locale_id: Locale identifier (BCP-47 or POSIX)

        Returns:
            LocaleConvention with CLDR separators and currency symbol

        Raises:
            babel.core.UnknownLocaleError: If the locale is not in CLDR
        """
        locale = get_babel_locale(locale_id)
        code = currency_code.upper()
        return cls(
            currency_code=code,
            locale_id=str(locale),
            decimal_symbol=get_decimal_symbol(locale),
            group_symbol=get_group_symbol(locale),
            currency_symbol=get_currency_symbol(code, locale=locale),
        )


class LocaleTable:
    """Read-only, ordered mapping of currency code to LocaleConvention.

    Lookup is case-insensitive. Iteration yields conventions in declaration
    order, which is also the order candidates are tried and the tie-break
    order used to recover a currency from an accepted value.

    Example:
        >>> table = default_locale_table()
        >>> table.get("eur").locale_id
        'de_DE'
        >>> table.codes
        ('USD', 'EUR', 'GBP', 'JPY', 'PHP', 'CAD', 'AUD')
    """

    __slots__ = ("_conventions",)

    def __init__(self, conventions: Iterable[LocaleConvention]) -> None:
        """Initialize from conventions in declaration order.

        Raises:
            ValueError: If no conventions are given or a code repeats
        """
        by_code: dict[str, LocaleConvention] = {}
        for convention in conventions:
            if convention.currency_code in by_code:
                msg = f"Duplicate convention for currency {convention.currency_code}"
                raise ValueError(msg)
            by_code[convention.currency_code] = convention
        if not by_code:
            msg = "LocaleTable requires at least one convention"
            raise ValueError(msg)
        self._conventions: Mapping[str, LocaleConvention] = MappingProxyType(by_code)

    @classmethod
    def from_cldr(
        cls, locales: Mapping[str, str] = DEFAULT_CONVENTION_LOCALES
    ) -> LocaleTable:
        """Build a table from a currency code -> locale mapping using CLDR data."""
        return cls(
            LocaleConvention.from_cldr(code, locale_id) for code, locale_id in locales.items()
        )

    @property
    def codes(self) -> tuple[str, ...]:
        """Currency codes in declaration order."""
        return tuple(self._conventions)

    def get(self, currency_code: str) -> LocaleConvention | None:
        """Look up a convention by currency code (case-insensitive)."""
        return self._conventions.get(currency_code.upper())

    def __contains__(self, currency_code: object) -> bool:
        return isinstance(currency_code, str) and currency_code.upper() in self._conventions

    def __iter__(self) -> Iterator[LocaleConvention]:
        return iter(self._conventions.values())

    def __len__(self) -> int:
        return len(self._conventions)

    def __repr__(self) -> str:
        return f"LocaleTable({', '.join(self.codes)})"


@functools.cache
def default_locale_table() -> LocaleTable:
    """Return the process-wide default table (built once from CLDR).

    Thread-safe via functools.cache internal locking.
    """
    return LocaleTable.from_cldr()
