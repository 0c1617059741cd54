"""
Human-readable rendering of syntax and runtime errors.

Author: xwest
"""

from .evaluator import EvaluationResult
from .parser import ParseResult


def caret_line(text: str, column: int) -> str:
    """A marker line as long as `text` (plus one for end-of-input) with '^' at `column`."""
    width = max(len(text) + 1, column + 1)
    marker = [" "] * width
    marker[column] = "^"
    return "".join(marker)


def render_diagnostic(text: str, result: ParseResult) -> str:
    """
    Render a syntax error as three lines:

        >>> Missing <term> at column (2)!
        "1+"
          ^

    The caret sits under the offending character of the quoted text.
    """
    if result.ok:
        return ">>> Expression SUCCESSFULLY parsed!"

    lines = [
        f">>> {result.message} at column ({result.column})!",
        f'"{text}"',
        " " + caret_line(text, result.column),
    ]
    return "\n".join(lines)


def render_runtime_error(result: EvaluationResult) -> str:
    """Render an evaluator failure as a single line."""
    if result.ok:
        return f">>> Result: {result.value}"
    return f">>> {result.message}!"
