"""
BARES Lexer Package

Character classification and token types shared by the grammar engine and
the postfix converter.

Author: xwest
"""

from .symbols import SymbolCategory, classify
from .tokens import Token, TokenKind, format_tokens

__all__ = [
    "SymbolCategory",
    "classify",
    "Token",
    "TokenKind",
    "format_tokens",
]
