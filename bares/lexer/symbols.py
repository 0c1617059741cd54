"""
Terminal symbol classification for BARES.

Maps a single input character to the terminal symbol category the grammar
engine works with. The classifier is deliberately context free: it never
decides whether a '-' is a sign or a binary operator, the grammar does.

Author: xwest
"""

from enum import Enum, auto


class SymbolCategory(Enum):
    """Terminal symbols recognised by the grammar engine."""
    MINUS = auto()              # -
    OPERATOR = auto()           # + ^ * % /
    OPEN_SCOPE = auto()         # (
    CLOSE_SCOPE = auto()        # )
    ZERO = auto()               # 0
    NON_ZERO_DIGIT = auto()     # 1..9
    WHITESPACE = auto()         # ' '
    TAB = auto()                # '\t'
    END_OF_INPUT = auto()       # cursor past the last character
    INVALID = auto()            # anything else


# Lookup table for single characters
SYMBOL_TABLE = {
    "-": SymbolCategory.MINUS,
    "+": SymbolCategory.OPERATOR,
    "^": SymbolCategory.OPERATOR,
    "*": SymbolCategory.OPERATOR,
    "%": SymbolCategory.OPERATOR,
    "/": SymbolCategory.OPERATOR,
    "(": SymbolCategory.OPEN_SCOPE,
    ")": SymbolCategory.CLOSE_SCOPE,
    " ": SymbolCategory.WHITESPACE,
    "\t": SymbolCategory.TAB,
    "0": SymbolCategory.ZERO,
}
SYMBOL_TABLE.update({digit: SymbolCategory.NON_ZERO_DIGIT for digit in "123456789"})

BLANK_CATEGORIES = frozenset({SymbolCategory.WHITESPACE, SymbolCategory.TAB})


def classify(char: str) -> SymbolCategory:
    """
    Classify one character.

    Args:
        char: A single character, or "" for the end of the input

    Returns:
        The matching SymbolCategory; INVALID for unknown characters
    """
    if char == "":
        return SymbolCategory.END_OF_INPUT
    return SYMBOL_TABLE.get(char, SymbolCategory.INVALID)
