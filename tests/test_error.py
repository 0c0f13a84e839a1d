"""Tests for the error taxonomy and message table."""

import pytest

from Calculator import error as E


@pytest.mark.parametrize("error_class", [
    E.BadTokenError, E.InvalidExpressionError, E.MismatchedParensError, E.DivisionByZeroError,
])
def test_all_kinds_are_math_errors(error_class):
    assert issubclass(error_class, E.MathError)


def test_bad_token_carries_character():
    error = E.BadTokenError("@")
    assert error.char == "@"
    assert error.code == "3011"
    assert error.equation is None


def test_division_by_zero_defaults():
    error = E.DivisionByZeroError()
    assert error.code == "3003"
    assert str(error) == "Division by zero"


def test_every_code_has_a_category():
    for code in E.ERROR_MESSAGES:
        assert code[0] in E.Error_Dictionary
