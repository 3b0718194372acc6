"""
Adapter: ASTEvaluator
Implements the Evaluator port with a direct post-order walk.

The walk keeps its own stack instead of recursing, so a flat chain such as
1+1+...+1 (a left-deep tree thousands of nodes tall) evaluates in constant
interpreter stack. Left operand is always finished before the right one, so
errors fire in the same order as in StepwiseEvaluator.
"""
from __future__ import annotations

import logging

from adapters.evaluator.arith_rules import apply_binary, apply_unary
from contracts import ArithError, BinOpNode, ExprAST, NumberNode, UnaryOpNode

logger = logging.getLogger("intcalc.evaluator")


class ASTEvaluator:
    """Exact integer evaluator; returns only the final value."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, ast: ExprAST) -> int:
        value = self._eval(ast)
        logger.debug("Direct evaluation result: %d", value)
        return value

    # -- Private -----------------------------------------------------------

    def _eval(self, root: ExprAST) -> int:
        values: list[int] = []
        # (node, children already scheduled)
        stack: list[tuple[ExprAST, bool]] = [(root, False)]

        while stack:
            node, expanded = stack.pop()

            if isinstance(node, NumberNode):
                values.append(node.value)
            elif isinstance(node, UnaryOpNode):
                if expanded:
                    values.append(apply_unary(node.op, values.pop()))
                else:
                    stack.append((node, True))
                    stack.append((node.operand, False))
            elif isinstance(node, BinOpNode):
                if expanded:
                    right = values.pop()
                    left = values.pop()
                    values.append(apply_binary(node.op, left, right))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
            else:
                raise ArithError(f"arithmetic error: unknown node {type(node).__name__}")

        return values[-1]
