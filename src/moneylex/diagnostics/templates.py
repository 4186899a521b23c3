"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistent between the parse functions,
    the batch normalizer and the CLI.
    """

    @staticmethod
    def empty_input() -> Diagnostic:
        """Input is empty or whitespace-only.

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_INPUT,
            message="Input cannot be empty",
            hint="Provide a price such as '$100' or 'EUR 1.234,56'",
            input_value="",
        )

    @staticmethod
    def input_too_long(value: str, limit: int) -> Diagnostic:
        """Input exceeds the maximum accepted length.

        Args:
            value: The oversized input
            limit: Maximum length in characters

        Returns:
            Diagnostic for INPUT_TOO_LONG
        """
        msg = f"Input exceeds maximum length of {limit} characters ({len(value)} given)"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LONG,
            message=msg,
            hint="Pass one price per input string",
            input_value=value,
        )

    @staticmethod
    def invalid_input_type(value: object) -> Diagnostic:
        """Input is not a string.

        Args:
            value: The offending value

        Returns:
            Diagnostic for INVALID_INPUT_TYPE
        """
        msg = f"Expected string, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INPUT_TYPE,
            message=msg,
            input_value=repr(value),
        )

    @staticmethod
    def currency_unsupported(currency_code: str) -> Diagnostic:
        """Currency code outside the supported set.

        Args:
            currency_code: The rejected code

        Returns:
            Diagnostic for UNSUPPORTED_CURRENCY
        """
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_CURRENCY,
            message=f"Unsupported currency: {currency_code}",
            hint="Supported currencies: AUD, CAD, EUR, GBP, JPY, PHP, USD",
        )

    @staticmethod
    def currency_unresolved(value: str) -> Diagnostic:
        """No currency detected and no convention supplied one.

        Args:
            value: The raw input

        Returns:
            Diagnostic for CURRENCY_UNRESOLVED
        """
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNRESOLVED,
            message=f"Could not determine currency for: {value}",
            hint="Prefix the amount with an ISO code (USD, EUR) or a currency symbol",
            input_value=value,
        )

    @staticmethod
    def amount_unparsable(value: str) -> Diagnostic:
        """No convention could read the numeric part.

        Args:
            value: The raw input

        Returns:
            Diagnostic for UNPARSABLE_AMOUNT
        """
        return Diagnostic(
            code=DiagnosticCode.UNPARSABLE_AMOUNT,
            message=f"Could not parse amount from: {value}",
            hint="Use digits with at most one decimal separator and 3-digit groups",
            input_value=value,
        )

    @staticmethod
    def format_ambiguous(value: str, labels: tuple[str, ...]) -> Diagnostic:
        """Several conventions produced different values.

        Args:
            value: The raw input
            labels: Labels of the conflicting conventions

        Returns:
            Diagnostic for AMBIGUOUS_FORMAT
        """
        options = ", ".join(labels)
        msg = f"Ambiguous format - multiple valid interpretations: {options}"
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_FORMAT,
            message=msg,
            hint="Write the amount with both separators (1,234.00) or without grouping",
            input_value=value,
            interpretations=labels,
        )
