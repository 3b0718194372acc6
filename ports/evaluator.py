"""
Port: Evaluator
Responsibility: compute the integer value of an AST, either in one go or as
a lazy post-order sequence of intermediate values.
"""
from typing import Iterator, Protocol, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, ast: ExprAST) -> int:
        """
        Returns the final value of the AST.
        Raises ArithError on division by zero or on any value outside the
        safe-integer range.
        """
        ...


@runtime_checkable
class StepEvaluator(Evaluator, Protocol):
    def steps(self, ast: ExprAST) -> Iterator[int]:
        """
        Yields every leaf and every operator result exactly once, in
        post-order. Nothing is computed ahead of demand; the last value
        equals evaluate(ast). Errors surface at the same point they would
        in evaluate(). Abandoning the iterator early is allowed.
        """
        ...
