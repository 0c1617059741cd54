"""
Token definitions for BARES.

The grammar engine emits these tokens as a by-product of validating an
expression; the postfix converter consumes them.

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field


class TokenKind(Enum):
    """Kinds of tokens produced by the grammar engine."""
    OPERAND = auto()        # integer literal, e.g. 12 or -7
    OPERATOR = auto()       # + - * / % ^
    OPEN_SCOPE = auto()     # (
    CLOSE_SCOPE = auto()    # )


@dataclass(frozen=True)
class Token:
    """
    A validated unit of surface text.

    `value` holds the exact text matched in the source. `column` is the
    0-based offset where the token starts; it is informational only and does
    not take part in equality.
    """
    value: str
    kind: TokenKind
    column: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"<{self.value},{self.kind.name}>"

    def __repr__(self) -> str:
        return f"Token({self.value!r}, {self.kind.name}, column={self.column})"

    @property
    def is_operand(self) -> bool:
        return self.kind == TokenKind.OPERAND

    @property
    def is_operator(self) -> bool:
        return self.kind == TokenKind.OPERATOR

    @property
    def is_scope(self) -> bool:
        """Check if this token is a parenthesis."""
        return self.kind in (TokenKind.OPEN_SCOPE, TokenKind.CLOSE_SCOPE)


def format_tokens(tokens) -> str:
    """Render a token list the way the driver prints it: { <1,OPERAND> ... }."""
    return "{ " + " ".join(str(token) for token in tokens) + " }"
