"""
Error handling shared by every BARES stage.

Provides the Diagnostic record used for reporting, the BaresError base
exception with its subclasses, and factories for conversion and reader errors.
Syntax (P0xx) and runtime (E0xx) codes live with ParseResultCode and
RuntimeErrorKind.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single reportable problem (error, warning, info)."""
    message: str
    column: Optional[int]
    severity: str  # "error", "warning", "info"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}"
        if self.column is not None:
            result += f" (column {self.column})"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class BaresError(Exception):
    """
    Base exception for BARES.

    Expected failures (syntax errors, division by zero, ...) are returned as
    values by the parser and the evaluator. Exceptions derived from this class
    signal misuse of an API or an unusable input source.
    """

    def __init__(
        self,
        message: str,
        column: Optional[int] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            column=column,
            severity="error",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class PostfixConversionError(BaresError):
    """Raised when a token sequence is structurally unusable for conversion."""


class ExpressionSourceError(BaresError):
    """Raised when an expression source (file, stream) cannot be read."""


class ConfigError(BaresError):
    """Raised for invalid configuration values."""


def create_unbalanced_scope_error(column: Optional[int] = None) -> PostfixConversionError:
    """Create an error for a closing scope without an opening one (or vice versa)."""
    return PostfixConversionError(
        message="Unbalanced parentheses in token sequence",
        column=column,
        code="C001",
        help_text="Token sequences must come from a successful parse."
    )


def create_unknown_operator_error(value: str, column: Optional[int] = None) -> PostfixConversionError:
    """Create an error for an operator token the converter does not know."""
    return PostfixConversionError(
        message=f"Unknown operator: '{value}'",
        column=column,
        code="C002",
        help_text="Supported operators are + - * / % ^."
    )


def create_source_error(path: str, reason: str) -> ExpressionSourceError:
    """Create an error for an expression file that cannot be read."""
    return ExpressionSourceError(
        message=f"Cannot read expressions from '{path}': {reason}",
        code="R001",
        help_text="Pass the path of a readable text file with one expression per line."
    )
