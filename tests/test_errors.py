"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from expression_tree.errors import (
    ArithmeticEvaluationError,
    ExpressionTreeError,
    MalformedExpressionError,
    StructuralError,
)


@pytest.mark.parametrize(
    "error_class",
    [ArithmeticEvaluationError, MalformedExpressionError, StructuralError],
)
def test_all_errors_share_base(error_class: type[Exception]) -> None:
    assert issubclass(error_class, ExpressionTreeError)


def test_malformed_is_value_error() -> None:
    assert issubclass(MalformedExpressionError, ValueError)


def test_arithmetic_is_zero_division_error() -> None:
    assert issubclass(ArithmeticEvaluationError, ZeroDivisionError)


def test_structural_is_not_value_error() -> None:
    assert not issubclass(StructuralError, ValueError)
