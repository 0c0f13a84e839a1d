# PostfixConverter.py
"""""
Infix to postfix (Reverse Polish) conversion with the Shunting Yard algorithm.

    2 + 3 * 4      ->  2 3 4 * +
    (2 + 3) * 4    ->  2 3 + 4 *
    10 - 4 - 3     ->  10 4 - 3 -      (left-associative)

The converter owns the structural check of the expression: every ')' needs an
earlier '(' and every '(' needs a later ')'.
"""""

import logging

from . import error as E
from .Tokens import LParen, Number, Op, RParen, to_text

logger = logging.getLogger(__name__)


def should_pop(top, incoming):
    """True if the stacked operator `top` leaves the stack before `incoming` is pushed."""
    if top.precedence > incoming.precedence:
        return True
    return top.precedence == incoming.precedence and incoming.left_associative


def to_postfix(tokens):
    """Reorder an infix token sequence into postfix order.

    Raises:
        MismatchedParensError: unmatched ')' (code 3010) or unclosed '(' (code 3009)
        InvalidExpressionError: something other than a token in the sequence
    """
    output = []
    stack = []  # Op and LParen tokens

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)

        elif isinstance(token, Op):
            while stack and isinstance(stack[-1], Op) and should_pop(stack[-1].operator, token.operator):
                output.append(stack.pop())
            stack.append(token)

        elif isinstance(token, LParen):
            stack.append(token)

        elif isinstance(token, RParen):
            while stack and not isinstance(stack[-1], LParen):
                output.append(stack.pop())
            if not stack:
                raise E.MismatchedParensError("Missing opening parenthesis '('", code="3010")
            stack.pop()  # discard the '('

        else:
            raise E.InvalidExpressionError(f"Unexpected token: {token!r}", code="3012")

    while stack:
        token = stack.pop()
        if isinstance(token, LParen):
            raise E.MismatchedParensError("Missing closing parenthesis ')'", code="3009")
        output.append(token)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Postfix: %s", to_text(output))
    return output
