"""
BARES Postfix Package

Shunting-yard conversion from the parser's infix token sequence to
Reverse Polish order.

Author: xwest
"""

from .converter import (
    PostfixConverter, Precedence, Associativity, OPERATOR_TABLE,
    precedence_of, to_postfix
)

__all__ = [
    "PostfixConverter",
    "Precedence",
    "Associativity",
    "OPERATOR_TABLE",
    "precedence_of",
    "to_postfix",
]
