"""
BARES - Basic ARithmetic Expression evaluator based on Stacks

Validates, tokenizes and evaluates integer arithmetic expressions with
precise syntax diagnostics.

Architecture:
    bares/
    ├── lexer/           # Character classification and token types
    ├── parser/          # Recursive descent validation + tokenization
    ├── postfix/         # Shunting-yard infix -> postfix conversion
    ├── evaluator/       # Postfix stack machine
    ├── pipeline.py      # parse -> postfix -> evaluate
    └── cli.py           # `bares` command

Author: xwest
License: MIT
"""

from .version import __version__

__author__ = "xwest"
__license__ = "MIT"

from .config import Settings, load_settings
from .errors import BaresError, PostfixConversionError, ExpressionSourceError, ConfigError
from .lexer import Token, TokenKind, SymbolCategory, classify
from .parser import Parser, ParseResult, ParseResultCode, parse
from .postfix import PostfixConverter, to_postfix
from .evaluator import Evaluator, EvaluationResult, RuntimeErrorKind, evaluate
from .pipeline import Pipeline, PipelineOutcome, evaluate_expression

__all__ = [
    # Pipeline stages
    "classify",
    "parse",
    "to_postfix",
    "evaluate",
    "evaluate_expression",
    "Parser",
    "PostfixConverter",
    "Evaluator",
    "Pipeline",

    # Data types
    "SymbolCategory",
    "Token",
    "TokenKind",
    "ParseResult",
    "ParseResultCode",
    "EvaluationResult",
    "RuntimeErrorKind",
    "PipelineOutcome",
    "Settings",
    "load_settings",

    # Errors
    "BaresError",
    "PostfixConversionError",
    "ExpressionSourceError",
    "ConfigError",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
