"""Money exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
The parse functions return these as values instead of raising them;
only MonetaryAmount construction raises (UnsupportedCurrencyError).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "AmbiguousFormatError",
    "EmptyInputError",
    "MoneyError",
    "MoneyParseError",
    "UnparsableAmountError",
    "UnsupportedCurrencyError",
]


class MoneyError(Exception):
    """Base exception for all moneylex errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            diagnostic: Diagnostic built by ErrorTemplate
        """
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def reason(self) -> str:
        """Human-readable reason, without input echo or formatting."""
        return self.diagnostic.message

    def format_error(self) -> str:
        """Format the underlying diagnostic in Rust compiler style."""
        return self.diagnostic.format_error()


class MoneyParseError(MoneyError):
    """Error during price string parsing.

    Attributes:
        input_value: The raw string that failed to parse
    """

    def __init__(self, diagnostic: Diagnostic, *, input_value: str = "") -> None:
        """Initialize MoneyParseError.

        Args:
            diagnostic: Diagnostic built by ErrorTemplate
            input_value: The raw string that failed to parse
        """
        super().__init__(diagnostic)
        self.input_value = input_value


class EmptyInputError(MoneyParseError):
    """Input is empty or whitespace-only.

    Detected before any extraction or parsing attempt.
    """


class UnsupportedCurrencyError(MoneyParseError):
    """Currency code outside the supported set.

    Raised by MonetaryAmount construction; returned by the parse functions
    when a detected code has no supported counterpart.

    Attributes:
        currency_code: The rejected code (uppercased)
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        currency_code: str,
        input_value: str = "",
    ) -> None:
        super().__init__(diagnostic, input_value=input_value)
        self.currency_code = currency_code


class UnparsableAmountError(MoneyParseError):
    """No locale convention could interpret the numeric substring."""


class AmbiguousFormatError(MoneyParseError):
    """Two or more locale conventions produced distinct numeric values.

    Attributes:
        interpretations: Labels of the conflicting conventions, in table order

    Example:
        >>> result, errors = parse_money("1.234")
        >>> errors[0].interpretations
        ('Format: en-US ($)', 'Format: de-DE (€)')
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        interpretations: tuple[str, ...],
        input_value: str = "",
    ) -> None:
        super().__init__(diagnostic, input_value=input_value)
        self.interpretations = interpretations
