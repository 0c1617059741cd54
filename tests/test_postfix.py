"""
Tests for the shunting-yard postfix converter.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bares.errors import PostfixConversionError
from bares.lexer import Token, TokenKind
from bares.parser import Parser
from bares.postfix import Precedence, PostfixConverter, precedence_of, to_postfix


class TestPostfixConversion(unittest.TestCase):
    """Conversion of parsed expressions."""

    def setUp(self):
        self.parser = Parser()

    def _postfix(self, text):
        result = self.parser.parse(text)
        self.assertTrue(result.ok, f"{text!r} failed with {result}")
        return " ".join(to_postfix(self.parser.get_tokens()))

    def test_single_operand(self):
        self.assertEqual(self._postfix("42"), "42")

    def test_scopes_are_dropped(self):
        self.assertEqual(self._postfix("(10 + (2+3))"), "10 2 3 + +")

    def test_precedence(self):
        self.assertEqual(self._postfix("2+3*4"), "2 3 4 * +")
        self.assertEqual(self._postfix("2*3+4"), "2 3 * 4 +")
        self.assertEqual(self._postfix("2+3^2*4"), "2 3 2 ^ 4 * +")

    def test_left_associativity(self):
        self.assertEqual(self._postfix("10-4-3"), "10 4 - 3 -")
        self.assertEqual(self._postfix("100/10/5"), "100 10 / 5 /")
        self.assertEqual(self._postfix("7%4*3"), "7 4 % 3 *")

    def test_power_is_right_associative(self):
        self.assertEqual(self._postfix("2^3^2"), "2 3 2 ^ ^")

    def test_scopes_override_precedence(self):
        self.assertEqual(self._postfix("(2+3)*4"), "2 3 + 4 *")
        self.assertEqual(self._postfix("(2^3)^2"), "2 3 ^ 2 ^")

    def test_negative_operands_keep_their_sign(self):
        self.assertEqual(self._postfix("-3 - -5"), "-3 -5 -")

    def test_output_length_excludes_scopes(self):
        self.parser.parse("((1 + 2) * (3 - 4))")
        tokens = self.parser.get_tokens()
        postfix = to_postfix(tokens)
        self.assertEqual(len(postfix), len([t for t in tokens if not t.is_scope]))

    def test_converter_is_reusable(self):
        converter = PostfixConverter()
        self.parser.parse("1+2")
        first = converter.convert(self.parser.get_tokens())
        self.parser.parse("3*4")
        second = converter.convert(self.parser.get_tokens())
        self.assertEqual(first, ["1", "2", "+"])
        self.assertEqual(second, ["3", "4", "*"])


class TestPostfixStructuralErrors(unittest.TestCase):
    """Hand-built token sequences that never come out of a successful parse."""

    def test_unmatched_close_scope(self):
        tokens = [Token("1", TokenKind.OPERAND), Token(")", TokenKind.CLOSE_SCOPE, 1)]
        with self.assertRaises(PostfixConversionError) as ctx:
            to_postfix(tokens)
        self.assertEqual(ctx.exception.diagnostic.code, "C001")
        self.assertEqual(ctx.exception.diagnostic.column, 1)

    def test_unmatched_open_scope(self):
        tokens = [Token("(", TokenKind.OPEN_SCOPE), Token("1", TokenKind.OPERAND)]
        with self.assertRaises(PostfixConversionError):
            to_postfix(tokens)

    def test_unknown_operator(self):
        tokens = [Token("1", TokenKind.OPERAND), Token("&", TokenKind.OPERATOR), Token("2", TokenKind.OPERAND)]
        with self.assertRaises(PostfixConversionError) as ctx:
            to_postfix(tokens)
        self.assertEqual(ctx.exception.diagnostic.code, "C002")


class TestPrecedenceTable(unittest.TestCase):

    def test_levels(self):
        self.assertEqual(precedence_of("^"), Precedence.POWER)
        self.assertEqual(precedence_of("*"), precedence_of("/"))
        self.assertEqual(precedence_of("/"), precedence_of("%"))
        self.assertEqual(precedence_of("+"), precedence_of("-"))
        self.assertLess(Precedence.SCOPE, precedence_of("+"))
        self.assertLess(precedence_of("+"), precedence_of("*"))
        self.assertLess(precedence_of("*"), precedence_of("^"))


if __name__ == '__main__':
    unittest.main()
