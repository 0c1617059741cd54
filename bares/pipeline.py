"""
End-to-end pipeline: parse -> postfix -> evaluate.

Author: xwest
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import Settings
from .evaluator import EvaluationResult, Evaluator
from .lexer import Token
from .parser import ParseResult, Parser
from .postfix import PostfixConverter

logger = logging.getLogger(__name__)


@dataclass
class PipelineOutcome:
    """Everything produced while processing one expression."""
    text: str
    parse_result: ParseResult
    tokens: List[Token] = field(default_factory=list)
    postfix: List[str] = field(default_factory=list)
    evaluation: Optional[EvaluationResult] = None

    @property
    def ok(self) -> bool:
        return self.parse_result.ok and self.evaluation is not None and self.evaluation.ok

    @property
    def value(self) -> Optional[int]:
        if self.evaluation is None:
            return None
        return self.evaluation.value


class Pipeline:
    """
    Runs expressions through every stage.

    Owns one Parser, so a Pipeline is meant for sequential use; create one
    per worker to process expressions in parallel.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.parser = Parser(self.settings.operand_bits)
        self.converter = PostfixConverter()
        self.evaluator = Evaluator(self.settings.result_bits)

    def run(self, text: str) -> PipelineOutcome:
        """Process one expression. Syntax and runtime errors end up in the outcome."""
        parse_result = self.parser.parse(text)
        outcome = PipelineOutcome(text, parse_result, self.parser.get_tokens())
        if not parse_result.ok:
            logger.info("Syntax error in %r: %s", text, parse_result)
            return outcome

        outcome.postfix = self.converter.convert(outcome.tokens)
        outcome.evaluation = self.evaluator.evaluate(outcome.postfix)
        if not outcome.evaluation.ok:
            logger.info("Runtime error in %r: %s", text, outcome.evaluation.message)
        return outcome


def evaluate_expression(text: str, settings: Optional[Settings] = None) -> PipelineOutcome:
    """Convenience function to run a single expression through a fresh Pipeline."""
    return Pipeline(settings).run(text)
