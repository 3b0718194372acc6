"""
Port: Tokenizer
Responsibility: turn raw expression text into a flat list of typed tokens.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Validates the text and splits it into NumberToken / OperatorToken /
        ParenToken items, left to right.
        Raises CalcSyntaxError for rejected characters, constructs or
        unbalanced parentheses; ArithError for literals outside the
        safe-integer range. No partial token list is ever returned.
        """
        ...
