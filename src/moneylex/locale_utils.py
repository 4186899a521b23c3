"""Locale utilities for BCP-47 / POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Babel expects POSIX identifiers (``de_DE``); diagnostics show BCP-47
identifiers (``de-DE``).

Python 3.13+.
"""

from __future__ import annotations

import functools

from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "to_bcp47",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "de-DE")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "de_DE")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def to_bcp47(locale_code: str) -> str:
    """Convert POSIX locale code to BCP-47 for display.

    Example:
        >>> to_bcp47("de_DE")
        'de-DE'
    """
    return locale_code.replace("_", "-")


@functools.lru_cache(maxsize=64)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))
