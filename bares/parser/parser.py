"""
BARES Recursive Descent Parser

Validates an arithmetic expression against the EBNF grammar below and, at the
same time, splits it into tokens:

    expression      := term , { (operator | "-") , term } ;
    term            := "(" , expression , ")" | integer ;
    integer         := "0" | ["-"] , natural_number ;
    natural_number  := digit_excl_zero , { digit } ;
    digit_excl_zero := "1".."9" ;
    digit           := "0" | digit_excl_zero ;

The parser stops at the first syntax error; there is no resynchronization.
Precedence is not handled here, the postfix converter takes care of it.

Author: xwest
"""

import logging
from typing import List, Tuple

from ..config import DEFAULT_OPERAND_BITS, DEFAULT_RESULT_BITS, signed_range
from ..lexer.symbols import SymbolCategory, BLANK_CATEGORIES, classify
from ..lexer.tokens import Token, TokenKind
from .errors import ParseResult, ParseResultCode

logger = logging.getLogger(__name__)

# Literals are first read into a type at least this wide, then range checked
WIDE_INT_BITS = DEFAULT_RESULT_BITS


class ParserState:
    """Input text and cursor for a single parse call."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def current_char(self) -> str:
        """Character under the cursor, or "" past the end."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def slice_from(self, start: int) -> str:
        return self.text[start:self.pos]


class Parser:
    """
    BARES grammar engine.

    One instance may be reused for any number of sequential parse calls;
    every call starts from a fresh state and an empty token list. An instance
    must not be shared between threads without external locking.
    """

    def __init__(self, operand_bits: int = DEFAULT_OPERAND_BITS):
        """
        Initialize the parser.

        Args:
            operand_bits: Width of the signed integer type literals must fit
        """
        self.operand_min, self.operand_max = signed_range(operand_bits)
        self.wide_min, self.wide_max = signed_range(max(WIDE_INT_BITS, operand_bits))
        self._state = ParserState("")
        self.tokens: List[Token] = []

    def parse(self, text: str) -> ParseResult:
        """
        Parse and tokenize an expression.

        Args:
            text: The expression source

        Returns:
            ParseResult with the outcome code and error column. The tokens of
            the validated prefix are available from get_tokens().
        """
        self._state = ParserState(text)
        self.tokens = []

        self._skip_ws()
        if self._end_input():
            result = self._error(ParseResultCode.UNEXPECTED_END_OF_INPUT)
        else:
            result = self._expression()
            if result.ok:
                # Only blanks may follow a complete expression
                self._skip_ws()
                if not self._end_input():
                    result = self._error(ParseResultCode.EXTRANEOUS_SYMBOL)

        logger.debug("parse(%r) -> %s, %d tokens", text, result, len(self.tokens))
        return result

    def get_tokens(self) -> List[Token]:
        """Return the tokens produced by the last parse call."""
        return list(self.tokens)

    # ------------------------------------------------------------------
    # Non-terminal symbols
    # ------------------------------------------------------------------

    def _expression(self) -> ParseResult:
        """
        <expression> := <term>,{ (<operator>|"-"),<term> };
        <term>       := "(",<expression>,")" | <integer>;

        Open scopes are counted in `depth` rather than handled by recursion,
        so nesting is limited by memory only.
        """
        depth = 0
        while True:
            depth += self._open_scopes()
            result = self._term()
            if not result.ok:
                return result

            while True:
                self._skip_ws()
                start = self._state.pos
                if self._accept(SymbolCategory.OPERATOR) or self._accept(SymbolCategory.MINUS):
                    break
                if depth == 0:
                    return result
                if not self._expect(SymbolCategory.CLOSE_SCOPE):
                    return self._error(ParseResultCode.MISSING_CLOSING_PAREN)
                self._emit(TokenKind.CLOSE_SCOPE, self._state.pos - 1)
                depth -= 1

            self._emit(TokenKind.OPERATOR, start)
            if self._end_input():
                return self._error(ParseResultCode.MISSING_TERM)
            # Two operators in a row
            if self._peek(SymbolCategory.OPERATOR):
                return self._error(ParseResultCode.ILL_FORMED_INTEGER)

    def _open_scopes(self) -> int:
        """Consume the "(" that start a term. Returns how many were read."""
        count = 0
        while True:
            self._skip_ws()
            start = self._state.pos
            if not self._accept(SymbolCategory.OPEN_SCOPE):
                return count
            self._emit(TokenKind.OPEN_SCOPE, start)
            count += 1

    def _term(self) -> ParseResult:
        """<integer> alternative of <term>; scopes are consumed by _expression()."""
        self._skip_ws()
        start = self._state.pos

        # A term never starts with an operator
        if self._peek(SymbolCategory.OPERATOR):
            return self._error(ParseResultCode.ILL_FORMED_INTEGER)

        result = self._integer()
        if not result.ok:
            return result

        literal = self._state.slice_from(start)
        try:
            value = int(literal)
        except ValueError:
            return self._error(ParseResultCode.ILL_FORMED_INTEGER, start)

        if not self.wide_min <= value <= self.wide_max:
            return self._error(ParseResultCode.INTEGER_OUT_OF_RANGE, start)
        if not self.operand_min <= value <= self.operand_max:
            return self._error(ParseResultCode.INTEGER_OUT_OF_RANGE, start)

        self.tokens.append(Token(literal, TokenKind.OPERAND, start))
        return result

    def _integer(self) -> ParseResult:
        """<integer> := 0 | ["-"],<natural_number>;"""
        if self._accept(SymbolCategory.ZERO):
            return ParseResult()

        self._accept(SymbolCategory.MINUS)
        return self._natural_number()

    def _natural_number(self) -> ParseResult:
        """<natural_number> := <digit_excl_zero>,{<digit>};"""
        if not self._digit_excl_zero():
            return self._error(ParseResultCode.ILL_FORMED_INTEGER)

        while self._digit():
            pass

        return ParseResult()

    def _digit_excl_zero(self) -> bool:
        return self._accept(SymbolCategory.NON_ZERO_DIGIT)

    def _digit(self) -> bool:
        return self._accept(SymbolCategory.ZERO) or self._digit_excl_zero()

    # ------------------------------------------------------------------
    # Support methods
    # ------------------------------------------------------------------

    def _next_symbol(self):
        self._state.pos += 1

    def _end_input(self) -> bool:
        return self._state.pos >= len(self._state.text)

    def _peek(self, category: SymbolCategory) -> bool:
        """Check the current character's category without consuming it."""
        return classify(self._state.current_char()) == category

    def _accept(self, category: SymbolCategory) -> bool:
        """Consume the current character if it matches `category`."""
        if not self._end_input() and self._peek(category):
            self._next_symbol()
            return True
        return False

    def _expect(self, category: SymbolCategory) -> bool:
        """Skip blanks, then accept()."""
        self._skip_ws()
        return self._accept(category)

    def _skip_ws(self):
        while not self._end_input() and classify(self._state.current_char()) in BLANK_CATEGORIES:
            self._next_symbol()

    def _emit(self, kind: TokenKind, start: int):
        self.tokens.append(Token(self._state.slice_from(start), kind, start))

    def _error(self, code: ParseResultCode, column: int = None) -> ParseResult:
        if column is None:
            column = self._state.pos
        return ParseResult(code, column)


def parse(text: str, operand_bits: int = DEFAULT_OPERAND_BITS) -> Tuple[ParseResult, List[Token]]:
    """
    Convenience function to parse a single expression.

    Returns:
        (ParseResult, tokens) where tokens cover the validated prefix
    """
    parser = Parser(operand_bits)
    result = parser.parse(text)
    return result, parser.get_tokens()
