"""
Runtime outcomes of the BARES postfix evaluator.

Evaluation never raises for bad input. It returns an EvaluationResult that
is either a success holding the value or a failure holding the error kind.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional

from ..errors import Diagnostic


class RuntimeErrorKind(Enum):
    """Errors detected while reducing a postfix sequence."""
    DIVISION_BY_ZERO = "E001"
    MODULO_BY_ZERO = "E002"
    INTEGER_OVERFLOW = "E003"
    NEGATIVE_EXPONENT = "E004"
    STACK_UNDERFLOW = "E005"
    MALFORMED_POSTFIX = "E006"


RUNTIME_MESSAGES = {
    RuntimeErrorKind.DIVISION_BY_ZERO: "Division by zero",
    RuntimeErrorKind.MODULO_BY_ZERO: "Modulo by zero",
    RuntimeErrorKind.INTEGER_OVERFLOW: "Numeric overflow error",
    RuntimeErrorKind.NEGATIVE_EXPONENT: "Negative exponent in integer power",
    RuntimeErrorKind.STACK_UNDERFLOW: "Stack underflow",
    RuntimeErrorKind.MALFORMED_POSTFIX: "Malformed postfix expression",
}


@dataclass(frozen=True)
class EvaluationResult:
    """Discriminated result: exactly one of `value` / `error` is set."""
    value: Optional[int] = None
    error: Optional[RuntimeErrorKind] = None
    detail: str = ""

    @classmethod
    def success(cls, value: int) -> "EvaluationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: RuntimeErrorKind, detail: str = "") -> "EvaluationResult":
        return cls(error=kind, detail=detail)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.ok:
            return str(self.value)
        if self.detail:
            return f"{RUNTIME_MESSAGES[self.error]}: {self.detail}"
        return RUNTIME_MESSAGES[self.error]

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            message=self.message,
            column=None,
            severity="info" if self.ok else "error",
            code=None if self.ok else self.error.value
        )
