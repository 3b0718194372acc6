"""
Adapter: PrecedenceClimbingParser
Implements the Parser port: recursive descent using precedence climbing.

  expr(min)  = factor (binop expr(prec + 1))*     binop accepted if prec >= min
  factor     = ('+' | '-') factor | '(' expr(0) ')' | NUMBER

Precedence: + - → 1, * / → 2. Recursing with prec + 1 on the right keeps
operators of equal precedence left-associative (6 - 2 - 1 == (6 - 2) - 1).
Unary signs recurse into factor, so they stack: -----1.
"""
from __future__ import annotations

import logging

from contracts import (
    PRECEDENCE,
    BinOpNode,
    CalcSyntaxError,
    ExprAST,
    NumberNode,
    NumberToken,
    OperatorToken,
    ParenToken,
    Token,
    UnaryOpNode,
)

logger = logging.getLogger("intcalc.parser")


class _Parser:
    """One parse pass; owns the cursor over an immutable token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek(self) -> Token | None:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _advance(self) -> Token:
        t = self._tokens[self._pos]
        self._pos += 1
        return t

    def _match_op(self, *ops: str) -> str | None:
        tok = self._peek()
        if isinstance(tok, OperatorToken) and tok.op in ops:
            self._advance()
            return tok.op
        return None

    def _match_paren(self, paren: str) -> bool:
        tok = self._peek()
        if isinstance(tok, ParenToken) and tok.paren == paren:
            self._advance()
            return True
        return False

    def parse(self) -> ExprAST:
        node = self._expr(0)
        if self._pos < len(self._tokens):
            raise CalcSyntaxError("syntax error: extra tokens after expression")
        return node

    def _expr(self, min_prec: int) -> ExprAST:
        left = self._factor()
        while True:
            tok = self._peek()
            if not isinstance(tok, OperatorToken):
                break
            prec = PRECEDENCE[tok.op]
            if prec < min_prec:
                break
            self._advance()
            right = self._expr(prec + 1)
            left = BinOpNode(op=tok.op, left=left, right=right)
        return left

    def _factor(self) -> ExprAST:
        op = self._match_op("+", "-")
        if op is not None:
            operand = self._factor()
            return UnaryOpNode(op=op, operand=operand)  # type: ignore[arg-type]

        if self._match_paren("("):
            node = self._expr(0)
            if not self._match_paren(")"):
                raise CalcSyntaxError("syntax error: missing closing parenthesis")
            return node

        tok = self._peek()
        if isinstance(tok, NumberToken):
            self._advance()
            return NumberNode(value=tok.value)

        if tok is None:
            raise CalcSyntaxError("syntax error: missing factor at end of expression")
        raise CalcSyntaxError(f"syntax error: unexpected token {_describe(tok)}")


def _describe(tok: Token) -> str:
    if isinstance(tok, OperatorToken):
        return repr(tok.op)
    if isinstance(tok, ParenToken):
        return repr(tok.paren)
    return repr(tok.value)


class PrecedenceClimbingParser:
    """Builds an AST from tokens; a fresh cursor per call."""

    # -- Parser protocol ----------------------------------------------------

    def parse(self, tokens: list[Token]) -> ExprAST:
        try:
            ast = _Parser(tokens).parse()
        except RecursionError:
            raise CalcSyntaxError("syntax error: expression nested too deeply") from None
        logger.debug("Parsed %d tokens into %s.", len(tokens), ast.node_type)
        return ast
