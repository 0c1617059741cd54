"""
BARES Evaluator Package

Stack machine for postfix sequences with explicit, value-returned runtime
errors (division by zero, overflow, malformed input).

Author: xwest
"""

from .evaluator import Evaluator, evaluate, truncated_division
from .errors import EvaluationResult, RuntimeErrorKind, RUNTIME_MESSAGES

__all__ = [
    "Evaluator",
    "evaluate",
    "truncated_division",
    "EvaluationResult",
    "RuntimeErrorKind",
    "RUNTIME_MESSAGES",
]
