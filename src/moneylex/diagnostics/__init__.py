"""Diagnostic system for price parsing errors.

Provides structured error diagnostics with codes, hints, and conflicting
interpretations. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    AmbiguousFormatError,
    EmptyInputError,
    MoneyError,
    MoneyParseError,
    UnparsableAmountError,
    UnsupportedCurrencyError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "AmbiguousFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyInputError",
    "ErrorTemplate",
    "MoneyError",
    "MoneyParseError",
    "OutputFormat",
    "UnparsableAmountError",
    "UnsupportedCurrencyError",
]
