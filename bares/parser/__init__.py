"""
BARES Parser Package

Recursive descent grammar engine that validates arithmetic expressions and
tokenizes them in the same pass.

Key Features:
- EBNF driven, one method per non-terminal
- Exact 0-based column for every syntax error
- Literal range checking against a configurable integer width
- Reusable parser instances with no state leaking between calls

Author: xwest
"""

from .parser import Parser, ParserState, parse
from .errors import ParseResult, ParseResultCode

__all__ = [
    "Parser",
    "ParserState",
    "parse",
    "ParseResult",
    "ParseResultCode",
]
