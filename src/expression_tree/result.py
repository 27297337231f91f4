"""ExpressionResult dataclass holding every stage of one pipeline run.

This module provides the result type returned by analyze() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExpressionResult"]


@dataclass(frozen=True, slots=True)
class ExpressionResult:
    """Everything produced while turning one expression into a value.

    Attributes:
        expression: The original expression text, unmodified.
        infix_tokens: Tokens in input order, parentheses included.
        postfix_tokens: Tokens in postfix order, no parentheses.
        prefix: Space-joined prefix rendering of the built tree.
        infix: Fully parenthesized infix rendering of the built tree.
        postfix: Space-joined postfix rendering of the built tree.
        value: Integer value of the expression.
    """

    expression: str
    infix_tokens: tuple[str, ...]
    postfix_tokens: tuple[str, ...]
    prefix: str
    infix: str
    postfix: str
    value: int
