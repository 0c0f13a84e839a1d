# Tokenizer.py
"""""
Tokenizer: converts a raw input string into a flat list of tokens.

Supported input
---------------
- ASCII digits with at most one '.' per number ('2', '2.5', '10.25')
- the operators '+', '-', '*', '/' and the parentheses '(' and ')'
- whitespace (space, tab, newline) anywhere between tokens, ignored

Every other character is rejected immediately with BadTokenError.
"""""

import logging

from . import error as E
from .Tokens import LParen, Op, Operator, Number, RParen, to_text

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
WHITESPACE = " \t\n"

SINGLE_CHAR_TOKENS = {operator.symbol: Op(operator) for operator in Operator}
SINGLE_CHAR_TOKENS["("] = LParen()
SINGLE_CHAR_TOKENS[")"] = RParen()


def scan_number(problem, start):
    """Read the numeric literal beginning at `start`.

    Consumes digits and '.' greedily, then validates the literal.
    Returns:
        (Number token, position after the literal)
    """
    b = start
    while b < len(problem) and (problem[b] in DIGITS or problem[b] == "."):
        b += 1
    str_number = problem[start:b]

    if str_number.count(".") > 1:
        raise E.InvalidExpressionError(f"Malformed number: {str_number}", code="3008")
    if str_number.endswith("."):
        raise E.InvalidExpressionError(f"Malformed number: {str_number}", code="3013")

    return Number(float(str_number)), b


def tokenize(problem):
    """Convert `problem` into a list of tokens in source order.

    Empty or whitespace-only input gives an empty list; judging emptiness is
    left to the evaluator.
    """
    tokens = []
    b = 0

    while b < len(problem):
        current_char = problem[b]

        # --- Numbers: digits and decimal separator ---
        if current_char in DIGITS:
            number, b = scan_number(problem, b)
            tokens.append(number)
            continue

        # --- Operators and parentheses ---
        elif current_char in SINGLE_CHAR_TOKENS:
            tokens.append(SINGLE_CHAR_TOKENS[current_char])

        # --- Whitespace (ignored) ---
        elif current_char in WHITESPACE:
            pass

        else:
            raise E.BadTokenError(current_char)

        b += 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Tokens: %s", to_text(tokens))
    return tokens
