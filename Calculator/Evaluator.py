# Evaluator.py
"""Stack based evaluation of postfix token sequences."""

import logging

from . import error as E
from .Tokens import Number, Op

logger = logging.getLogger(__name__)


def evaluate(postfix):
    """Evaluate a postfix sequence and return the single remaining value.

    Raises:
        DivisionByZeroError: right operand of '/' is exactly 0.0
        InvalidExpressionError: operand underflow, parens in the input,
                                empty input or leftover operands
    """
    stack = []

    for token in postfix:
        if isinstance(token, Number):
            stack.append(token.value)

        elif isinstance(token, Op):
            if len(stack) < 2:
                raise E.InvalidExpressionError(f"Missing number for '{token.operator.symbol}'", code="3027")
            right = stack.pop()
            left = stack.pop()
            stack.append(token.operator.apply(left, right))

        else:
            # Parentheses never survive a successful conversion
            raise E.InvalidExpressionError(f"Unexpected token in postfix input: {token!r}", code="3012")

    if not stack:
        raise E.InvalidExpressionError("Empty expression", code="3029")
    if len(stack) > 1:
        raise E.InvalidExpressionError(f"{len(stack)} values left without operator", code="3030")

    logger.debug("Result: %r", stack[0])
    return stack[0]
