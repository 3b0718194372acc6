"""
Port: Parser
Responsibility: build an immutable AST from a token list.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST, Token


@runtime_checkable
class Parser(Protocol):
    def parse(self, tokens: list[Token]) -> ExprAST:
        """
        Parses the whole token list into a single AST root.
        The token list is read, never mutated.
        Raises CalcSyntaxError on the first unexpected, missing or
        trailing token.
        """
        ...
