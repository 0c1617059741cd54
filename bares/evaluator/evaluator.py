"""
Stack machine that reduces a postfix sequence to a single integer.

Arithmetic follows fixed-width signed integer rules: division truncates
toward zero, the remainder takes the sign of the dividend, and any result
outside the configured width is reported as an overflow instead of wrapping.

Author: xwest
"""

import logging
import re
from typing import Callable, Dict, Iterable, List

from ..config import DEFAULT_RESULT_BITS, signed_range
from .errors import EvaluationResult, RuntimeErrorKind

logger = logging.getLogger(__name__)

OPERAND_PATTERN = re.compile(r'-?[0-9]+')


class _EvaluationFailure(Exception):
    """Unwinds evaluate() from inside an operation; never leaves this module."""

    def __init__(self, kind: RuntimeErrorKind, detail: str = ""):
        super().__init__(kind.name)
        self.kind = kind
        self.detail = detail


class Evaluator:
    """
    Postfix evaluator.

    Holds only its configuration, so one instance can evaluate any number of
    expressions, from any number of threads.
    """

    def __init__(self, result_bits: int = DEFAULT_RESULT_BITS):
        """
        Args:
            result_bits: Width of the signed integer type results must fit
        """
        self.min_value, self.max_value = signed_range(result_bits)
        self.operations: Dict[str, Callable[[int, int], int]] = {
            "+": self._add,
            "-": self._subtract,
            "*": self._multiply,
            "/": self._divide,
            "%": self._remainder,
            "^": self._power,
        }

    def evaluate(self, postfix: Iterable[str]) -> EvaluationResult:
        """
        Evaluate a postfix sequence.

        Args:
            postfix: Postfix terms, e.g. ["2", "3", "4", "*", "+"]

        Returns:
            EvaluationResult.success(value) or EvaluationResult.failure(kind)
        """
        stack: List[int] = []

        try:
            for term in postfix:
                operation = self.operations.get(term)
                if operation is None:
                    stack.append(self._operand(term))
                    continue

                # Right operand was pushed last
                right = self._pop(stack, term)
                left = self._pop(stack, term)
                stack.append(self._check_range(operation(left, right)))
        except _EvaluationFailure as failure:
            logger.debug("evaluation failed: %s %s", failure.kind.name, failure.detail)
            return EvaluationResult.failure(failure.kind, failure.detail)

        if len(stack) != 1:
            logger.debug("evaluation left %d values on the stack", len(stack))
            return EvaluationResult.failure(
                RuntimeErrorKind.MALFORMED_POSTFIX,
                f"expected 1 value on the stack, found {len(stack)}"
            )

        return EvaluationResult.success(stack[0])

    def _operand(self, term: str) -> int:
        if not OPERAND_PATTERN.fullmatch(term):
            raise _EvaluationFailure(RuntimeErrorKind.MALFORMED_POSTFIX, f"unknown term {term!r}")
        return self._check_range(int(term))

    def _pop(self, stack: List[int], operator: str) -> int:
        if not stack:
            raise _EvaluationFailure(RuntimeErrorKind.STACK_UNDERFLOW, f"missing operand for '{operator}'")
        return stack.pop()

    def _check_range(self, value: int) -> int:
        if not self.min_value <= value <= self.max_value:
            raise _EvaluationFailure(RuntimeErrorKind.INTEGER_OVERFLOW)
        return value

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def _add(self, left: int, right: int) -> int:
        return left + right

    def _subtract(self, left: int, right: int) -> int:
        return left - right

    def _multiply(self, left: int, right: int) -> int:
        return left * right

    def _divide(self, left: int, right: int) -> int:
        if right == 0:
            raise _EvaluationFailure(RuntimeErrorKind.DIVISION_BY_ZERO)
        return truncated_division(left, right)

    def _remainder(self, left: int, right: int) -> int:
        if right == 0:
            raise _EvaluationFailure(RuntimeErrorKind.MODULO_BY_ZERO)
        return left - right * truncated_division(left, right)

    def _power(self, base: int, exponent: int) -> int:
        """Exponentiation by repeated squaring, checking every product."""
        if exponent < 0:
            raise _EvaluationFailure(RuntimeErrorKind.NEGATIVE_EXPONENT, f"{base}^{exponent}")

        result = 1
        while exponent:
            if exponent & 1:
                result = self._check_range(result * base)
            exponent >>= 1
            if exponent:
                base = self._check_range(base * base)
        return result


def truncated_division(left: int, right: int) -> int:
    """Integer quotient rounded toward zero (C semantics), right != 0."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


def evaluate(postfix: Iterable[str], result_bits: int = DEFAULT_RESULT_BITS) -> EvaluationResult:
    """Convenience function: evaluate with a fresh Evaluator."""
    return Evaluator(result_bits).evaluate(postfix)
