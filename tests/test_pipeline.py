"""
Tests for the end-to-end pipeline, expression readers and error rendering.

Author: xwest
"""

import unittest
import sys
import os
import io
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bares.config import Settings
from bares.diagnostics import caret_line, render_diagnostic, render_runtime_error
from bares.errors import ExpressionSourceError
from bares.evaluator import EvaluationResult, RuntimeErrorKind
from bares.parser import ParseResult, ParseResultCode
from bares.pipeline import Pipeline, evaluate_expression
from bares.reader import from_list, read_expressions, read_stream


class TestPipeline(unittest.TestCase):
    """Expressions run through parse, conversion and evaluation."""

    def setUp(self):
        self.pipeline = Pipeline()

    def test_valid_expressions(self):
        expected = {
            "(10 + (2+3))": 15,
            "  123 +  548": 671,
            "2+3*4": 14,
            "2^3^2": 512,
            "(2+3)*4": 20,
            "-5 % 3": -2,
            "10 - -3": 13,
            "\t7\t/\t2\t": 3,
        }
        for text, value in expected.items():
            outcome = self.pipeline.run(text)
            self.assertTrue(outcome.ok, text)
            self.assertEqual(outcome.value, value, text)

    def test_syntax_error_skips_evaluation(self):
        outcome = self.pipeline.run("1+")
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.parse_result, ParseResult(ParseResultCode.MISSING_TERM, 2))
        self.assertEqual(outcome.postfix, [])
        self.assertIsNone(outcome.evaluation)
        self.assertIsNone(outcome.value)
        self.assertEqual([t.value for t in outcome.tokens], ["1", "+"])

    def test_runtime_error(self):
        outcome = self.pipeline.run("5 / (3 - 3)")
        self.assertTrue(outcome.parse_result.ok)
        self.assertFalse(outcome.ok)
        self.assertEqual(outcome.evaluation.error, RuntimeErrorKind.DIVISION_BY_ZERO)
        self.assertEqual(outcome.postfix, ["5", "3", "3", "-", "/"])

    def test_overflow_is_reported(self):
        outcome = self.pipeline.run("32767 ^ 32767")
        self.assertEqual(outcome.evaluation.error, RuntimeErrorKind.INTEGER_OVERFLOW)

    def test_errors_do_not_leak_between_runs(self):
        self.assertFalse(self.pipeline.run("(1 +").ok)
        self.assertFalse(self.pipeline.run("1 % 0").ok)
        self.assertEqual(self.pipeline.run("1 + 1").value, 2)

    def test_custom_widths(self):
        narrow = Pipeline(Settings(operand_bits=8, result_bits=16))
        outcome = narrow.run("200 + 1")
        self.assertEqual(outcome.parse_result, ParseResult(ParseResultCode.INTEGER_OUT_OF_RANGE, 0))
        outcome = narrow.run("127 * 127 * 127")
        self.assertEqual(outcome.evaluation.error, RuntimeErrorKind.INTEGER_OVERFLOW)

        wide = Pipeline(Settings(operand_bits=32))
        self.assertEqual(wide.run("100000 * 3").value, 300000)

    def test_operands_wider_than_64_bits(self):
        huge = Pipeline(Settings(operand_bits=100, result_bits=128))
        self.assertEqual(huge.run(f"{2 ** 69} * 2").value, 2 ** 70)

    def test_deeply_nested_expression(self):
        depth = 2000
        outcome = self.pipeline.run("(" * depth + "2 ^ 3" + ")" * depth)
        self.assertTrue(outcome.ok)
        self.assertEqual(outcome.postfix, ["2", "3", "^"])
        self.assertEqual(outcome.value, 8)

    def test_evaluate_expression(self):
        self.assertEqual(evaluate_expression("2 ^ 10").value, 1024)
        outcome = evaluate_expression("70000", Settings(operand_bits=32))
        self.assertEqual(outcome.value, 70000)


class TestDiagnostics(unittest.TestCase):
    """Rendering of syntax and runtime errors."""

    def test_caret_line(self):
        self.assertEqual(caret_line("1+", 2), "  ^")
        self.assertEqual(caret_line("abc", 0), "^   ")
        self.assertEqual(len(caret_line("1 2 3", 2)), len("1 2 3") + 1)

    def test_render_syntax_error(self):
        rendered = render_diagnostic("1+", ParseResult(ParseResultCode.MISSING_TERM, 2))
        lines = rendered.split("\n")
        self.assertEqual(lines[0], ">>> Missing <term> at column (2)!")
        self.assertEqual(lines[1], '"1+"')
        # The caret lines up with the offending character inside the quotes
        self.assertEqual(lines[2].index("^"), 3)

    def test_render_success(self):
        self.assertEqual(render_diagnostic("1", ParseResult()), ">>> Expression SUCCESSFULLY parsed!")

    def test_render_runtime(self):
        self.assertEqual(render_runtime_error(EvaluationResult.success(15)), ">>> Result: 15")
        failure = EvaluationResult.failure(RuntimeErrorKind.DIVISION_BY_ZERO)
        self.assertEqual(render_runtime_error(failure), ">>> Division by zero!")


class TestReaders(unittest.TestCase):
    """Line-oriented expression sources."""

    def test_read_stream_strips_terminators_only(self):
        stream = io.StringIO("1 + 2\r\n  3 \n4")
        self.assertEqual(list(read_stream(stream)), ["1 + 2", "  3 ", "4"])

    def test_blank_lines_are_kept(self):
        self.assertEqual(list(read_stream(io.StringIO("1\n\n2\n"))), ["1", "", "2"])

    def test_from_list(self):
        self.assertEqual(list(from_list(["1\n", "2"])), ["1", "2"])

    def test_read_expressions(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "expressions.txt")
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write("(10 + (2+3))\r\n2^3^2\n")
            self.assertEqual(list(read_expressions(path)), ["(10 + (2+3))", "2^3^2"])

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = os.path.join(tmp, "nope.txt")
            with self.assertRaises(ExpressionSourceError) as ctx:
                list(read_expressions(missing))
            self.assertEqual(ctx.exception.diagnostic.code, "R001")


if __name__ == '__main__':
    unittest.main()
