# MathEngine.py
"""""
Core calculation engine.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of tokens.
2) PostfixConverter: reorders the tokens into postfix order (Shunting Yard).
3) Evaluator: walks the postfix tokens with an operand stack.
4) Formatter: renders results using Decimal and the user's decimal places.

calculate() is pure and keeps no state between calls, so the UI worker thread
and the command line runner can both call it directly.
"""""

import logging
import math
import sys
from decimal import Decimal, localcontext

from . import error as E
from .Evaluator import evaluate
from .PostfixConverter import to_postfix
from .Tokenizer import tokenize

logger = logging.getLogger(__name__)

__all__ = [
    "calculate", "tokenize", "to_postfix", "evaluate",
    "cleanup", "display_result", "compose_display", "describe_error", "result_literal",
    "run_batch", "repl",
]


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem):
    """Main API: tokenize -> to_postfix -> evaluate.

    Returns the float result. The first failing stage raises its MathError
    with `equation` set to `problem`; later stages do not run.
    """
    try:
        tokens = tokenize(problem)
        postfix = to_postfix(tokens)
        return evaluate(postfix)
    except E.MathError as e:
        if e.equation is None:
            e.equation = problem
        logger.debug("Calculation of %r failed with code %s: %s", problem, e.code, e.message)
        raise


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, decimal_places):
    """Format a float result for display.

    Integers are printed without fractional part, everything else is rounded
    to `decimal_places`.
    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag indicates whether digits were dropped.
    """
    rounding = False

    if not math.isfinite(ergebnis):
        return str(ergebnis), rounding
    if ergebnis == 0:
        return "0", rounding

    # repr() gives the shortest string that round-trips, so no binary artifacts
    value = Decimal(repr(ergebnis))

    if value == value.to_integral_value():
        return format(value.normalize(), "f"), rounding

    decimal_places = max(decimal_places, 0)
    with localcontext() as ctx:
        # Enough digits for any non-integral float plus the requested places
        ctx.prec = decimal_places + 32
        gerundetes_ergebnis = value.quantize(Decimal(1).scaleb(-decimal_places))

    if gerundetes_ergebnis != value:
        rounding = True
    if gerundetes_ergebnis == 0:
        return "0", rounding

    return format(gerundetes_ergebnis.normalize(), "f"), rounding


def display_result(problem, decimal_places):
    """calculate() followed by cleanup(); returns (rendered_value, rounding_flag)."""
    return cleanup(calculate(problem), decimal_places)


def compose_display(equation, output, rounding, show_equation):
    """Build the display line, e.g. '= 14', '≈ 0.3333' or '2+3*4 = 14'."""
    sign = "\u2248" if rounding else "="  # "≈"
    if show_equation:
        return f"{' '.join(equation.split())} {sign} {output}"
    return f"{sign} {output}"


def result_literal(ergebnis):
    """Full precision source text for a result, so it can start the next problem.

    Negative values are written as '(0-x)' since the tokenizer has no unary minus.
    Returns None for inf and nan, which cannot be typed back in.
    """
    if not math.isfinite(ergebnis):
        return None
    if ergebnis == 0:
        return "0"

    text = format(Decimal(repr(abs(ergebnis))).normalize(), "f")
    if ergebnis < 0:
        return f"(0-{text})"
    return text


def describe_error(error):
    """One line rendering of a MathError: 'Error 3011: Unexpected Token: '@''."""
    text = E.ERROR_MESSAGES.get(error.code, "Unknown error")
    if isinstance(error, E.BadTokenError):
        text += repr(error.char)
    elif text.endswith(": "):
        text += error.message
    return f"Error {error.code}: {text.strip()}"


# -----------------------------
# Command line helpers
# -----------------------------

def _render_line(problem, settings):
    output, rounding = display_result(problem, settings["decimal_places"])
    return compose_display(problem, output, rounding, settings["show_equation"])


def run_batch(expressions, settings, out=None):
    """Evaluate each expression and write one line per result or error.

    Returns the number of expressions that failed.
    """
    if out is None:
        out = sys.stdout
    failures = 0
    for problem in expressions:
        try:
            line = _render_line(problem, settings)
        except E.MathError as e:
            failures += 1
            line = f"{problem} -> {describe_error(e)}"
        out.write(line + "\n")
    return failures


def repl(settings, stdin=None, out=None):
    """Read problems line by line until EOF or an empty line."""
    if stdin is None:
        stdin = sys.stdin
    if out is None:
        out = sys.stdout
    for raw_line in stdin:
        problem = raw_line.strip()
        if not problem:
            break
        run_batch([problem], settings, out)
