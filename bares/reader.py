"""
Line-oriented expression sources.

Each line is one independent expression; only the line terminator is
removed, so reported columns match the text as written.

Author: xwest
"""

import logging
from typing import Iterable, Iterator, TextIO

from .errors import create_source_error

logger = logging.getLogger(__name__)


def _strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def read_stream(stream: TextIO) -> Iterator[str]:
    """Yield the expressions of an open text stream, one per line."""
    for line in stream:
        yield _strip_terminator(line)


def read_expressions(path: str) -> Iterator[str]:
    """
    Yield the expressions stored in a file, one per line.

    Raises:
        ExpressionSourceError: If the file cannot be opened or decoded
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            lines = list(read_stream(f))
    except (OSError, UnicodeDecodeError) as e:
        raise create_source_error(path, str(e)) from e

    logger.debug("Read %d expressions from %s", len(lines), path)
    yield from lines


def from_list(expressions: Iterable[str]) -> Iterator[str]:
    """Literal list source; terminators are stripped the same way."""
    for expression in expressions:
        yield _strip_terminator(expression)
