"""Tests for postfix evaluation."""

import pytest

from Calculator import error as E
from Calculator.Evaluator import evaluate
from Calculator.Tokens import LParen, Number, Op, Operator


def test_evaluate_postfix():
    postfix = [
        Number(2.0), Number(3.0), Number(4.0),
        Op(Operator.MUL), Op(Operator.ADD),
    ]
    assert evaluate(postfix) == 14.0


def test_operand_order_is_preserved():
    assert evaluate([Number(10.0), Number(4.0), Op(Operator.SUB)]) == 6.0
    assert evaluate([Number(1.0), Number(4.0), Op(Operator.DIV)]) == 0.25


def test_single_number():
    assert evaluate([Number(7.5)]) == 7.5


def test_division_by_zero():
    with pytest.raises(E.DivisionByZeroError) as excinfo:
        evaluate([Number(5.0), Number(0.0), Op(Operator.DIV)])
    assert excinfo.value.code == "3003"


def test_division_by_tiny_number_is_allowed():
    assert evaluate([Number(1.0), Number(1e-300), Op(Operator.DIV)]) == pytest.approx(1e300)


def test_zero_numerator_is_fine():
    assert evaluate([Number(0.0), Number(5.0), Op(Operator.DIV)]) == 0.0


# --- Malformed input ---

def test_empty_input():
    with pytest.raises(E.InvalidExpressionError) as excinfo:
        evaluate([])
    assert excinfo.value.code == "3029"


def test_operator_without_enough_operands():
    with pytest.raises(E.InvalidExpressionError) as excinfo:
        evaluate([Number(2.0), Op(Operator.ADD)])
    assert excinfo.value.code == "3027"


def test_leftover_operands():
    with pytest.raises(E.InvalidExpressionError) as excinfo:
        evaluate([Number(2.0), Number(3.0)])
    assert excinfo.value.code == "3030"


def test_paren_in_postfix_input():
    with pytest.raises(E.InvalidExpressionError):
        evaluate([Number(1.0), LParen()])


# --- Operator table ---

@pytest.mark.parametrize("operator, precedence", [
    (Operator.ADD, 1), (Operator.SUB, 1), (Operator.MUL, 2), (Operator.DIV, 2),
])
def test_precedence_table(operator, precedence):
    assert operator.precedence == precedence


def test_all_operators_are_left_associative():
    assert all(operator.left_associative for operator in Operator)


def test_number_text():
    assert str(Number(2)) == "2"
    assert str(Number(2.0)) == "2"
    assert str(Number(2.5)) == "2.5"
