"""
contracts.py — Single source of truth for every data type in IntCalc.
All modules import tokens, AST nodes, results and errors ONLY from here.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

# Signed 53-bit range (IEEE-754 double safe integers)
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


def is_safe_integer(value: int) -> bool:
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


# ─────────────────────────── Errors ──────────────────────────────────────

class ErrorKind(str, Enum):
    PARAM = "PARAM"    # no expression text
    SYNTAX = "SYNTAX"  # rejected characters, parens, token order
    ARITH = "ARITH"    # range violation, division by zero


EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.PARAM: 1,
    ErrorKind.SYNTAX: 2,
    ErrorKind.ARITH: 3,
}


class ErrorReport(BaseModel):
    kind: ErrorKind
    code: int
    message: str


class CalcError(Exception):
    """Base of the closed error taxonomy. Never raised directly."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> int:
        return EXIT_CODES[self.kind]

    def to_report(self) -> ErrorReport:
        return ErrorReport(kind=self.kind, code=self.code, message=self.message)


class ParamError(CalcError):
    kind = ErrorKind.PARAM


class CalcSyntaxError(CalcError):
    kind = ErrorKind.SYNTAX


class ArithError(CalcError):
    kind = ErrorKind.ARITH


# ─────────────────────────── Tokens ──────────────────────────────────────

BinaryOp = Literal["+", "-", "*", "/"]
UnaryOp = Literal["+", "-"]

# Binary operator precedence; higher binds tighter
PRECEDENCE: dict[str, int] = {"+": 1, "-": 1, "*": 2, "/": 2}


class NumberToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: Literal["number"] = "number"
    value: int


class OperatorToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: Literal["operator"] = "operator"
    op: BinaryOp


class ParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: Literal["paren"] = "paren"
    paren: Literal["(", ")"]


Token = Union[NumberToken, OperatorToken, ParenToken]


# ─────────────────────────── AST ─────────────────────────────────────────

class NumberNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["number"] = "number"
    value: int


class UnaryOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["unary"] = "unary"
    op: UnaryOp
    operand: "ExprAST"


class BinOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binop"] = "binop"
    op: BinaryOp
    left: "ExprAST"
    right: "ExprAST"


ExprAST = Union[NumberNode, UnaryOpNode, BinOpNode]
UnaryOpNode.model_rebuild()
BinOpNode.model_rebuild()


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalOutcome(BaseModel):
    expression: str
    value: int
    steps: list[int] = Field(default_factory=list)  # post-order values (trace mode only)


class TraceOutcome(BaseModel):
    expression: str
    steps: list[int]
    result: Optional[int] = None  # None when the sequence was cut short
    truncated: bool = False
