"""
Adapter: StepwiseEvaluator
Implements the StepEvaluator port as a generator over the AST that yields
each sub-result the moment its subtree is finished (post-order):

  6 + 5 * 2   →   6, 5, 2, 10, 16

The generator is lazy: creating it computes nothing, each next() advances
exactly one node. It drives an explicit stack of (node, expanded) frames
rather than nested generators, so tree height is not bounded by the
interpreter's recursion limit. evaluate() drains it and keeps the last
value, so both modes share the same rules and the same error timing.
"""
from __future__ import annotations

import logging
from typing import Iterator

from adapters.evaluator.arith_rules import apply_binary, apply_unary
from contracts import ArithError, BinOpNode, ExprAST, NumberNode, UnaryOpNode

logger = logging.getLogger("intcalc.evaluator")


class StepwiseEvaluator:
    """Trace evaluator exposing every intermediate value."""

    # -- StepEvaluator protocol --------------------------------------------

    def steps(self, ast: ExprAST) -> Iterator[int]:
        return self._walk(ast)

    def evaluate(self, ast: ExprAST) -> int:
        last: int | None = None
        count = 0
        for last in self._walk(ast):
            count += 1
        logger.debug("Stepwise evaluation: %d steps, result %s", count, last)
        # The walk yields at least the root value or raises.
        return last  # type: ignore[return-value]

    # -- Private -----------------------------------------------------------

    def _walk(self, root: ExprAST) -> Iterator[int]:
        values: list[int] = []
        stack: list[tuple[ExprAST, bool]] = [(root, False)]

        while stack:
            node, expanded = stack.pop()

            if isinstance(node, NumberNode):
                result = node.value
            elif isinstance(node, UnaryOpNode):
                if not expanded:
                    stack.append((node, True))
                    stack.append((node.operand, False))
                    continue
                result = apply_unary(node.op, values.pop())
            elif isinstance(node, BinOpNode):
                if not expanded:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
                    continue
                right = values.pop()
                left = values.pop()
                result = apply_binary(node.op, left, right)
            else:
                raise ArithError(f"arithmetic error: unknown node {type(node).__name__}")

            values.append(result)
            yield result
