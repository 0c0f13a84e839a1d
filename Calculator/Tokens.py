# Tokens.py
"""""
Token types shared by the three pipeline stages.

A token is one of Number, Op, LParen or RParen. Tokens are frozen value
objects, so sequences can be compared, logged and reused freely.
"""""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from . import error as E


class Operator(Enum):
    """Binary operators with their precedence table."""

    # (symbol, precedence, left_associative)
    ADD = ("+", 1, True)
    SUB = ("-", 1, True)
    MUL = ("*", 2, True)
    DIV = ("/", 2, True)

    def __init__(self, symbol, precedence, left_associative):
        self.symbol = symbol
        self.precedence = precedence
        self.left_associative = left_associative

    def apply(self, left: float, right: float) -> float:
        if self is Operator.ADD:
            return left + right
        elif self is Operator.SUB:
            return left - right
        elif self is Operator.MUL:
            return left * right
        # Exact comparison: near-zero divisors are divided normally
        if right == 0.0:
            raise E.DivisionByZeroError()
        return left / right

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self):
        value = float(self.value)
        if value.is_integer():
            return str(int(value))
        return repr(value)


@dataclass(frozen=True)
class Op:
    operator: Operator

    def __str__(self):
        return self.operator.symbol


@dataclass(frozen=True)
class LParen:
    def __str__(self):
        return "("


@dataclass(frozen=True)
class RParen:
    def __str__(self):
        return ")"


Token = Union[Number, Op, LParen, RParen]


def to_text(tokens):
    """Render a token sequence as space separated source text (e.g. '2 3 4 * +')."""
    return " ".join(str(token) for token in tokens)
