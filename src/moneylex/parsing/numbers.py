"""Multi-locale number parsing.

Reads a numeric substring under every convention of a LocaleTable plus a
locale-independent "simple" convention, and collects the distinct values
obtained. Conventions that agree on a value collapse into one candidate;
only inputs on which conventions disagree ("1.234": 1.234 vs 1234) yield
more than one candidate.

A convention reads a string through Babel's strict parse_decimal() for
its locale: grouping, when present, must match how CLDR formats the value
("1,234.5" yes, "1,23.45" no). Before Babel sees it, the text must consist
of ASCII digits, the convention's two separators and an optional leading
sign, and must start and end with a digit, so exponents, NaN and bare
separators never reach Decimal(). The simple convention accepts
[+-]? d+ ( . d+ )? only.

Thread-safe. No shared mutable state.

Python 3.13+.
"""

from __future__ import annotations

import decimal
import logging
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from babel.numbers import NumberFormatError, parse_decimal

from moneylex.constants import INVARIANT_LABEL
from moneylex.locale_utils import get_babel_locale

from .guards import is_valid_decimal

if TYPE_CHECKING:
    from moneylex.conventions import LocaleConvention, LocaleTable

__all__ = [
    "ParseCandidate",
    "parse_all_conventions",
    "parse_invariant",
    "parse_with_convention",
]

logger = logging.getLogger(__name__)

_INVARIANT_PATTERN = re.compile(r"[+-]?\d+(?:\.\d+)?", re.ASCII)

# Babel's strict check re-formats the value with up to 3 fraction digits.
# Working precision covers every input digit plus those.
_PRECISION_HEADROOM = 4


@dataclass(frozen=True, slots=True)
class ParseCandidate:
    """One distinct reading of a numeric substring.

    Attributes:
        label: Label of the first convention that produced the value
        value: The numeric reading
        currency_codes: Currencies of every convention that produced this
            value, in table order (empty if only the simple convention did)
    """

    label: str
    value: Decimal
    currency_codes: tuple[str, ...] = field(default=())


def _strip_symbol(text: str, symbol: str) -> str:
    """Remove a convention's own currency symbol when it leads or trails."""
    if not symbol:
        return text
    if text.startswith(symbol):
        return text[len(symbol):].lstrip()
    if text.endswith(symbol):
        return text[: -len(symbol)].rstrip()
    return text


def _has_number_shape(text: str, convention: LocaleConvention) -> bool:
    """Optional sign, then ASCII digits and separators, with a digit at both ends."""
    body = text[1:] if text[:1] in ("+", "-") else text
    digits = body.replace(convention.group_symbol, "").replace(convention.decimal_symbol, "")
    return (
        digits.isascii()
        and digits.isdigit()
        and body[0].isdigit()
        and body[-1].isdigit()
    )


def _to_decimal(text: str) -> Decimal | None:
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    return value if is_valid_decimal(value) else None


def parse_with_convention(text: str, convention: LocaleConvention) -> Decimal | None:
    """Read text under one locale convention.

    Args:
        text: Numeric substring (surrounding whitespace allowed)
        convention: Convention whose locale and separators apply

    Returns:
        The value, or None if text is not a valid number for the convention

    Examples:
        >>> eur = LocaleConvention.from_cldr("EUR", "de_DE")
        >>> parse_with_convention("1.234,56", eur)
        Decimal('1234.56')
        >>> parse_with_convention("1,234.56", eur) is None
        True
    """
    candidate = _strip_symbol(text.strip(), convention.currency_symbol)
    if not _has_number_shape(candidate, convention):
        return None
    # Babel never formats a plus sign, so a grouped "+1,234" would fail its check
    candidate = candidate.removeprefix("+")

    precision = max(decimal.getcontext().prec, len(candidate) + _PRECISION_HEADROOM)
    with decimal.localcontext(prec=precision):
        try:
            value = parse_decimal(
                candidate, locale=get_babel_locale(convention.locale_id), strict=True
            )
        except (NumberFormatError, InvalidOperation):
            return None
    return value if is_valid_decimal(value) else None


def parse_invariant(text: str) -> Decimal | None:
    """Read text as a plain dot-decimal number without grouping.

    Examples:
        >>> parse_invariant("1234.56")
        Decimal('1234.56')
        >>> parse_invariant("1,234.56") is None
        True
    """
    candidate = text.strip()
    if _INVARIANT_PATTERN.fullmatch(candidate) is None:
        return None
    return _to_decimal(candidate)


def parse_all_conventions(text: str, table: LocaleTable) -> tuple[ParseCandidate, ...]:
    """Read text under every convention and collect distinct values.

    Conventions are tried in table order, then the simple convention.
    Candidates are deduplicated by numeric value: the first convention to
    produce a value names the candidate, later ones only add their currency.

    Args:
        text: Numeric substring
        table: Conventions to try

    Returns:
        Distinct candidates in discovery order. Empty if no convention
        matched; more than one if the input is ambiguous.

    Example:
        >>> [c.value for c in parse_all_conventions("1.234", default_locale_table())]
        [Decimal('1.234'), Decimal('1234')]
    """
    labels: dict[Decimal, str] = {}
    codes: dict[Decimal, list[str]] = {}

    for convention in table:
        value = parse_with_convention(text, convention)
        logger.debug("Convention %s read %r as %s", convention.label, text, value)
        if value is None:
            continue
        labels.setdefault(value, convention.label)
        codes.setdefault(value, []).append(convention.currency_code)

    value = parse_invariant(text)
    logger.debug("Convention %s read %r as %s", INVARIANT_LABEL, text, value)
    if value is not None:
        labels.setdefault(value, INVARIANT_LABEL)
        codes.setdefault(value, [])

    return tuple(
        ParseCandidate(label=label, value=value, currency_codes=tuple(codes[value]))
        for value, label in labels.items()
    )
