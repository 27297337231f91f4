"""Token classification and the operator precedence table.

Tokens are plain immutable ``str`` values. ``classify`` maps a token to its
``TokenKind``; ``precedence`` gives an operator's binding level, where a higher
number binds more tightly.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from expression_tree.errors import MalformedExpressionError

__all__ = [
    "CLOSE_PAREN",
    "OPEN_PAREN",
    "OPERATORS",
    "PRECEDENCE",
    "TokenKind",
    "classify",
    "is_literal",
    "is_operator",
    "precedence",
]

OPEN_PAREN = "("
CLOSE_PAREN = ")"

# Binding level per operator; equal levels associate left to right.
PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "%": 2,
}

OPERATORS = frozenset(PRECEDENCE)

_LITERAL = re.compile(r"[0-9]+")


class TokenKind(StrEnum):
    """The four kinds of token an expression is made of.

    - LITERAL     -> "literal"     : non-negative integer, e.g. "42"
    - OPERATOR    -> "operator"    : one of + - * / %
    - OPEN_PAREN  -> "open_paren"  : "("
    - CLOSE_PAREN -> "close_paren" : ")"
    """

    LITERAL = auto()
    OPERATOR = auto()
    OPEN_PAREN = auto()
    CLOSE_PAREN = auto()


def is_operator(token: str) -> bool:
    return token in OPERATORS


def is_literal(token: str) -> bool:
    return _LITERAL.fullmatch(token) is not None


def classify(token: str) -> TokenKind:
    """Return the kind of ``token``.

    Raises:
        MalformedExpressionError: If the token is none of the four kinds.
    """
    if is_literal(token):
        return TokenKind.LITERAL
    if is_operator(token):
        return TokenKind.OPERATOR
    if token == OPEN_PAREN:
        return TokenKind.OPEN_PAREN
    if token == CLOSE_PAREN:
        return TokenKind.CLOSE_PAREN
    msg = f"Unrecognized token: {token!r}"
    raise MalformedExpressionError(msg)


def precedence(operator: str) -> int:
    """Return the binding level of ``operator`` (higher binds tighter)."""
    try:
        return PRECEDENCE[operator]
    except KeyError:
        msg = f"Not an operator: {operator!r}"
        raise MalformedExpressionError(msg) from None
