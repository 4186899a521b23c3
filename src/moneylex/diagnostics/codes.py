"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for price parsing.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (rejected before any parsing attempt)
        2000-2999: Currency errors (unsupported or unresolvable currency)
        3000-3999: Amount errors (no reading, or more than one reading)
    """

    # Input errors (1000-1999)
    EMPTY_INPUT = 1001
    INPUT_TOO_LONG = 1002
    INVALID_INPUT_TYPE = 1003

    # Currency errors (2000-2999)
    UNSUPPORTED_CURRENCY = 2001
    CURRENCY_UNRESOLVED = 2002

    # Amount errors (3000-3999)
    UNPARSABLE_AMOUNT = 3001
    AMBIGUOUS_FORMAT = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans (CLI output) and tools (JSON output).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the input
        input_value: The raw input that produced the diagnostic
        interpretations: Conflicting readings (ambiguous formats only)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    interpretations: tuple[str, ...] = ()
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[AMBIGUOUS_FORMAT]: Ambiguous format - multiple valid interpretations: ...
              --> input: '1.234'
              = note: Format: en-US ($)
              = note: Format: de-DE (€)
              = help: Write the amount with both separators (1,234.00) or without grouping

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
