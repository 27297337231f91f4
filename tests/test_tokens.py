"""Tests for token classification and the precedence table."""

from __future__ import annotations

import pytest

from expression_tree.errors import MalformedExpressionError
from expression_tree.tokens import (
    OPERATORS,
    TokenKind,
    classify,
    is_literal,
    is_operator,
    precedence,
)


class TestTokenKind:
    def test_has_exactly_four_members(self) -> None:
        assert len(TokenKind) == 4

    def test_values_are_lowercased(self) -> None:
        assert TokenKind.LITERAL == "literal"
        assert TokenKind.OPERATOR == "operator"
        assert TokenKind.OPEN_PAREN == "open_paren"
        assert TokenKind.CLOSE_PAREN == "close_paren"


class TestClassify:
    @pytest.mark.parametrize("token", ["0", "7", "42", "007", "123456789"])
    def test_integer_literals(self, token: str) -> None:
        assert classify(token) is TokenKind.LITERAL

    @pytest.mark.parametrize("token", ["+", "-", "*", "/", "%"])
    def test_operators(self, token: str) -> None:
        assert classify(token) is TokenKind.OPERATOR

    def test_parentheses(self) -> None:
        assert classify("(") is TokenKind.OPEN_PAREN
        assert classify(")") is TokenKind.CLOSE_PAREN

    @pytest.mark.parametrize("token", ["", "x", "3.5", "-3", "^", "3 4", " 3"])
    def test_unrecognized_raises(self, token: str) -> None:
        with pytest.raises(MalformedExpressionError, match="Unrecognized token"):
            classify(token)


class TestPredicates:
    def test_operator_set(self) -> None:
        assert OPERATORS == {"+", "-", "*", "/", "%"}

    def test_is_operator_rejects_parentheses(self) -> None:
        assert is_operator("(") is False
        assert is_operator(")") is False

    def test_is_literal_rejects_non_ascii_digits(self) -> None:
        assert is_literal("٣") is False


class TestPrecedence:
    def test_multiplicative_bind_tighter_than_additive(self) -> None:
        for tight in "*/%":
            for loose in "+-":
                assert precedence(tight) > precedence(loose)

    def test_equal_levels_within_groups(self) -> None:
        assert precedence("+") == precedence("-")
        assert precedence("*") == precedence("/") == precedence("%")

    def test_non_operator_raises(self) -> None:
        with pytest.raises(MalformedExpressionError, match="Not an operator"):
            precedence("(")
