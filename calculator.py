"""
calculator.py — Pipeline facade: text → tokens → AST → integer.

Wires a Tokenizer, a Parser, a direct Evaluator and a StepEvaluator
together. Used by the CLI (intcalc.py) and by the HTTP API. Holds no
per-expression state, so one instance serves any number of evaluations.
"""
from __future__ import annotations

import itertools
import logging
from typing import Iterator, Optional

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.evaluator.stepwise_evaluator import StepwiseEvaluator
from adapters.parser.precedence_parser import PrecedenceClimbingParser
from adapters.tokenizer.gated_tokenizer import GatedTokenizer
from contracts import BinOpNode, EvalOutcome, ExprAST, ParamError, TraceOutcome, UnaryOpNode
from ports.evaluator import Evaluator, StepEvaluator
from ports.parser import Parser
from ports.tokenizer import Tokenizer

logger = logging.getLogger("intcalc.calculator")


class Calculator:
    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        parser: Parser | None = None,
        evaluator: Evaluator | None = None,
        stepper: StepEvaluator | None = None,
    ) -> None:
        self._tokenizer = tokenizer or GatedTokenizer()
        self._parser = parser or PrecedenceClimbingParser()
        self._evaluator = evaluator or ASTEvaluator()
        self._stepper = stepper or StepwiseEvaluator()

    def compile(self, text: Optional[str]) -> ExprAST:
        """Validates, tokenizes and parses. Raises ParamError on empty input."""
        expr = (text or "").strip()
        if not expr:
            raise ParamError("parameter error: no expression given")
        tokens = self._tokenizer.tokenize(expr)
        return self._parser.parse(tokens)

    def evaluate(self, text: Optional[str]) -> int:
        return self._evaluator.evaluate(self.compile(text))

    def trace(self, text: Optional[str]) -> Iterator[int]:
        """
        Compiles eagerly (syntax errors surface here), then returns the lazy
        post-order sequence; arithmetic errors surface while iterating.
        """
        return self._stepper.steps(self.compile(text))

    def run(self, text: Optional[str], trace: bool = False) -> EvalOutcome:
        expr = (text or "").strip()
        if not trace:
            return EvalOutcome(expression=expr, value=self.evaluate(expr))
        steps = list(self.trace(expr))
        logger.debug("Trace of %r: %s", expr, steps)
        return EvalOutcome(expression=expr, value=steps[-1], steps=steps)

    def run_trace(self, text: Optional[str], max_steps: int | None = None) -> TraceOutcome:
        """
        Consumes at most max_steps values of the trace; the rest of the
        sequence is never computed.
        """
        expr = (text or "").strip()
        ast = self.compile(expr)
        it = self._stepper.steps(ast)
        if max_steps is None or max_steps >= _node_count(ast):
            steps = list(it)
            return TraceOutcome(expression=expr, steps=steps, result=steps[-1])

        steps = list(itertools.islice(it, max_steps))
        return TraceOutcome(expression=expr, steps=steps, truncated=True)


def _node_count(root: ExprAST) -> int:
    """Length of the full trace: every node yields exactly once."""
    count = 0
    pending = [root]
    while pending:
        node = pending.pop()
        count += 1
        if isinstance(node, UnaryOpNode):
            pending.append(node.operand)
        elif isinstance(node, BinOpNode):
            pending.append(node.left)
            pending.append(node.right)
    return count
