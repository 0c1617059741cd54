#!/usr/bin/env python3
"""
Command line driver for BARES.

Reads expressions (one per line) from files, from -e arguments or from
standard input, and prints the value of each one, or the syntax/runtime
error it produced. Errors in one expression never stop the others.

Author: xwest
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Iterable, List, Optional, TextIO

from . import __version__
from .config import load_settings
from .diagnostics import render_diagnostic, render_runtime_error
from .errors import ConfigError, ExpressionSourceError
from .lexer import format_tokens
from .logging_config import configure_logging
from .pipeline import Pipeline, PipelineOutcome
from .reader import from_list, read_expressions, read_stream

logger = logging.getLogger(__name__)

BANNER_WIDTH = 79


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bares",
        description="Basic ARithmetic Expression evaluator based on Stacks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bares expressions.txt            # One expression per line
  bares -e "(10 + (2+3))" -e "2^3^2"
  echo "5 / 0" | bares --verbose
        """
    )
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help='Files with one expression per line (default: stdin)')
    parser.add_argument('-e', '--expr', action='append', default=[], dest='expressions',
                        metavar='EXPR', help='Evaluate EXPR (may be repeated)')
    parser.add_argument('--tokens', action='store_true',
                        help='Print the token list of each expression')
    parser.add_argument('--postfix', action='store_true',
                        help='Print the postfix form of each valid expression')
    parser.add_argument('--verbose', action='store_true',
                        help='Print a banner and the parse status for each expression')
    parser.add_argument('--operand-bits', type=int, default=None,
                        help='Width in bits of accepted integer literals (default: 16)')
    parser.add_argument('--result-bits', type=int, default=None,
                        help='Width in bits of evaluation results (default: 64)')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default: BARES_LOG_LEVEL or WARNING)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def format_outcome(outcome: PipelineOutcome, show_tokens: bool = False,
                   show_postfix: bool = False, verbose: bool = False) -> str:
    """Render one pipeline outcome as printable text."""
    lines: List[str] = []

    if verbose:
        lines.append("=" * BANNER_WIDTH)
        lines.append(f'>>> Parsing "{outcome.text}"')

    if not outcome.parse_result.ok:
        lines.append(render_diagnostic(outcome.text, outcome.parse_result))
    elif verbose:
        lines.append(render_diagnostic(outcome.text, outcome.parse_result))

    if show_tokens:
        lines.append(f">>> Tokens: {format_tokens(outcome.tokens)}")

    if outcome.parse_result.ok:
        if show_postfix:
            lines.append(">>> Postfix: " + " ".join(outcome.postfix))
        if verbose or not outcome.evaluation.ok:
            lines.append(render_runtime_error(outcome.evaluation))
        else:
            lines.append(str(outcome.evaluation.value))

    return "\n".join(lines)


def process(expressions: Iterable[str], pipeline: Pipeline, args: argparse.Namespace,
            out: TextIO) -> int:
    """Run every expression and print its outcome. Returns the number processed."""
    count = 0
    for text in expressions:
        outcome = pipeline.run(text)
        print(format_outcome(outcome, args.tokens, args.postfix, args.verbose), file=out)
        count += 1
    return count


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        settings = load_settings()
        overrides = {}
        if args.operand_bits is not None:
            overrides["operand_bits"] = args.operand_bits
        if args.result_bits is not None:
            overrides["result_bits"] = args.result_bits
        if args.log_level is not None:
            overrides["log_level"] = args.log_level.upper()
        settings = replace(settings, **overrides)
    except ConfigError as e:
        print(f"bares: {e}", file=sys.stderr)
        return 1

    configure_logging(level=settings.log_level, log_file=settings.log_file)
    pipeline = Pipeline(settings)

    total = 0
    try:
        if args.expressions:
            total += process(from_list(args.expressions), pipeline, args, stdout)
        for path in args.files:
            total += process(read_expressions(path), pipeline, args, stdout)
        if not args.expressions and not args.files:
            total += process(read_stream(stdin), pipeline, args, stdout)
    except ExpressionSourceError as e:
        logger.error("%s", e.diagnostic.message)
        print(f"bares: {e.diagnostic.message}", file=sys.stderr)
        return 1

    logger.debug("Processed %d expressions", total)
    return 0


if __name__ == "__main__":
    sys.exit(main())
