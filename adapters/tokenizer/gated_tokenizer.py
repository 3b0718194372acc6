"""
Adapter: GatedTokenizer
Implements the Tokenizer port in two tiers:

  1. Gate: the whole text is matched against an ordered list of rejection
     patterns; the first hit fails with a message naming the rule.
  2. Scan, character by character. Digit runs become NumberToken,
     + - * / become OperatorToken, ( ) become ParenToken with a running
     depth check. Anything the gate let through but the scan does not know
     is reported by character.

Plain spaces are dropped wherever they appear; a tab is rejected in the scan.
"""
from __future__ import annotations

import logging
import re

from contracts import (
    ArithError,
    CalcSyntaxError,
    NumberToken,
    OperatorToken,
    ParenToken,
    Token,
    is_safe_integer,
)

logger = logging.getLogger("intcalc.tokenizer")

# ──────────────────────────────────────────────────────────────────────────────
# Gate
# ──────────────────────────────────────────────────────────────────────────────

# Priority order matters: the first matching rule is the one reported.
_GATE_RULES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("unsupported operator", re.compile(r"[%^]")),
    ("decimal point", re.compile(r"\.")),
    ("exponent notation", re.compile(r"[eE][+-]?[0-9]+")),
    ("identifier", re.compile(r"[a-zA-Z_]")),
    ("unsupported character", re.compile(r"[^0-9+\-*/() \t]")),
)

_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("+-*/")


def _gate(text: str) -> None:
    for rule, pattern in _GATE_RULES:
        if pattern.search(text):
            raise CalcSyntaxError(f"syntax error: unsupported construct ({rule})")


def _number_token(digits: str) -> NumberToken:
    value = int(digits)
    if not is_safe_integer(value):
        raise ArithError("arithmetic error: value outside safe integer range")
    return NumberToken(value=value)


# ──────────────────────────────────────────────────────────────────────────────
# Adapter
# ──────────────────────────────────────────────────────────────────────────────

class GatedTokenizer:
    """Whole-text gate followed by a precise per-character scan."""

    # -- Tokenizer protocol -------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        _gate(text)

        tokens: list[Token] = []
        digits = ""
        depth = 0

        for ch in text:
            if ch == " ":
                # Skipped outright, even inside a digit run: "1 2" reads as 12.
                continue
            if ch.isspace():
                raise CalcSyntaxError("syntax error: unsupported whitespace character")

            if ch in _DIGITS:
                digits += ch
                continue

            if digits:
                tokens.append(_number_token(digits))
                digits = ""

            if ch in _OPERATORS:
                tokens.append(OperatorToken(op=ch))  # type: ignore[arg-type]
                continue

            if ch in "()":
                tokens.append(ParenToken(paren=ch))  # type: ignore[arg-type]
                depth += 1 if ch == "(" else -1
                if depth < 0:
                    raise CalcSyntaxError("syntax error: closing parenthesis before opening")
                continue

            raise CalcSyntaxError(f"syntax error: unexpected character {ch!r}")

        if digits:
            tokens.append(_number_token(digits))

        if depth != 0:
            raise CalcSyntaxError("syntax error: unbalanced parentheses")

        logger.debug("Tokenized %d characters into %d tokens.", len(text), len(tokens))
        return tokens
