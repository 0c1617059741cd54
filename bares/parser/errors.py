"""
Syntax outcomes reported by the BARES grammar engine.

A parse never raises for bad input: it returns a ParseResult holding the
outcome code and the 0-based column of the first offending character.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass

from ..errors import Diagnostic


class ParseResultCode(Enum):
    """Possible outcomes of a parse."""
    OK = "OK"
    UNEXPECTED_END_OF_INPUT = "P001"
    ILL_FORMED_INTEGER = "P002"
    MISSING_TERM = "P003"
    EXTRANEOUS_SYMBOL = "P004"
    INTEGER_OUT_OF_RANGE = "P005"
    MISSING_CLOSING_PAREN = "P006"


SYNTAX_MESSAGES = {
    ParseResultCode.OK: "Expression successfully parsed",
    ParseResultCode.UNEXPECTED_END_OF_INPUT: "Unexpected end of input",
    ParseResultCode.ILL_FORMED_INTEGER: "Ill formed integer",
    ParseResultCode.MISSING_TERM: "Missing <term>",
    ParseResultCode.EXTRANEOUS_SYMBOL: "Extraneous symbol after valid expression found",
    ParseResultCode.INTEGER_OUT_OF_RANGE: "Integer constant out of range beginning",
    ParseResultCode.MISSING_CLOSING_PAREN: "Missing closing \")\"",
}

SYNTAX_HELP = {
    ParseResultCode.UNEXPECTED_END_OF_INPUT: "The expression is empty or ends too early.",
    ParseResultCode.ILL_FORMED_INTEGER: "Integers are 0 or an optional '-' followed by digits not starting with 0.",
    ParseResultCode.MISSING_TERM: "Every operator needs a term on its right-hand side.",
    ParseResultCode.EXTRANEOUS_SYMBOL: "Remove the text after the complete expression.",
    ParseResultCode.INTEGER_OUT_OF_RANGE: "Integer literals must fit the configured operand width.",
    ParseResultCode.MISSING_CLOSING_PAREN: "Add a closing parenthesis ')'.",
}


@dataclass(frozen=True)
class ParseResult:
    """Outcome of one parse: a code and, for errors, the column it was found at."""
    code: ParseResultCode = ParseResultCode.OK
    column: int = 0

    @property
    def ok(self) -> bool:
        return self.code == ParseResultCode.OK

    @property
    def message(self) -> str:
        return SYNTAX_MESSAGES[self.code]

    def to_diagnostic(self) -> Diagnostic:
        """Convert an error outcome into a Diagnostic for reporting."""
        return Diagnostic(
            message=self.message,
            column=None if self.ok else self.column,
            severity="info" if self.ok else "error",
            code=None if self.ok else self.code.value,
            help_text=SYNTAX_HELP.get(self.code)
        )

    def __str__(self) -> str:
        if self.ok:
            return self.code.name
        return f"{self.code.name} at column {self.column}"
