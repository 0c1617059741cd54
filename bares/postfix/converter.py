"""
Infix to postfix conversion (shunting-yard).

Takes the token sequence of a successful parse and rearranges it into
Reverse Polish order, applying operator precedence and associativity.
Parentheses are structural only and never reach the output.

Author: xwest
"""

import logging
from enum import Enum, IntEnum
from typing import Dict, Iterable, List, Tuple

from ..errors import create_unbalanced_scope_error, create_unknown_operator_error
from ..lexer.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Operator precedence levels."""
    SCOPE = 0       # ( sentinel, only removed by a matching )
    TERM = 1        # + -
    FACTOR = 2      # * / %
    POWER = 3       # ^


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


OPERATOR_TABLE: Dict[str, Tuple[Precedence, Associativity]] = {
    "+": (Precedence.TERM, Associativity.LEFT),
    "-": (Precedence.TERM, Associativity.LEFT),
    "*": (Precedence.FACTOR, Associativity.LEFT),
    "/": (Precedence.FACTOR, Associativity.LEFT),
    "%": (Precedence.FACTOR, Associativity.LEFT),
    "^": (Precedence.POWER, Associativity.RIGHT),
}


def precedence_of(operator: str) -> Precedence:
    return OPERATOR_TABLE[operator][0]


class PostfixConverter:
    """
    Shunting-yard converter.

    Assumes its input came from a successful parse, but still rejects
    unbalanced scopes with a PostfixConversionError instead of producing
    garbage.
    """

    def convert(self, tokens: Iterable[Token]) -> List[str]:
        """
        Convert infix tokens into postfix terms.

        Args:
            tokens: Token sequence from Parser.get_tokens()

        Returns:
            List of postfix terms (operand literals and operator characters)

        Raises:
            PostfixConversionError: On unbalanced scopes or unknown operators
        """
        output: List[str] = []
        stack: List[Token] = []

        for token in tokens:
            if token.kind == TokenKind.OPERAND:
                output.append(token.value)
            elif token.kind == TokenKind.OPEN_SCOPE:
                stack.append(token)
            elif token.kind == TokenKind.CLOSE_SCOPE:
                self._close_scope(token, stack, output)
            elif token.kind == TokenKind.OPERATOR:
                self._push_operator(token, stack, output)

        # Flush pending operators, top of stack first
        while stack:
            pending = stack.pop()
            if pending.kind == TokenKind.OPEN_SCOPE:
                raise create_unbalanced_scope_error(pending.column)
            output.append(pending.value)

        logger.debug("to_postfix -> %s", " ".join(output))
        return output

    def _close_scope(self, token: Token, stack: List[Token], output: List[str]):
        while stack:
            pending = stack.pop()
            if pending.kind == TokenKind.OPEN_SCOPE:
                return
            output.append(pending.value)
        raise create_unbalanced_scope_error(token.column)

    def _push_operator(self, token: Token, stack: List[Token], output: List[str]):
        if token.value not in OPERATOR_TABLE:
            raise create_unknown_operator_error(token.value, token.column)
        current, associativity = OPERATOR_TABLE[token.value]

        while stack and stack[-1].kind == TokenKind.OPERATOR:
            top = precedence_of(stack[-1].value)
            if top > current or (top == current and associativity == Associativity.LEFT):
                output.append(stack.pop().value)
            else:
                break

        stack.append(token)


def to_postfix(tokens: Iterable[Token]) -> List[str]:
    """Convenience function: convert tokens with a fresh PostfixConverter."""
    return PostfixConverter().convert(tokens)
