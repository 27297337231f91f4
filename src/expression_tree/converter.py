"""Infix-to-postfix conversion with an operator-precedence stack.

The algorithm is shunting-yard with one deliberate deviation: when a ``)``
closes a group and the token left on top of the stack is an operator, that
operator is flushed to the output immediately instead of waiting for the next
precedence comparison. Tree shapes produced downstream depend on this, so
``"1 + (2) * 3"`` converts to ``1 2 + 3 *`` rather than ``1 2 3 * +``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from expression_tree.errors import MalformedExpressionError
from expression_tree.tokens import OPEN_PAREN, TokenKind, classify, precedence

__all__ = ["to_postfix"]

logger = logging.getLogger(__name__)


def to_postfix(tokens: Iterable[str]) -> list[str]:
    """Convert an infix token sequence to postfix (Reverse Polish) order.

    Args:
        tokens: Infix tokens, typically the generator returned by ``tokenize``.
            Consumed exactly once.

    Returns:
        A new list of literal and operator tokens in postfix order. It never
        contains parentheses.

    Raises:
        MalformedExpressionError: On an unmatched ``)`` or ``(``, an empty
            ``()`` group, an unrecognized token, or an empty token sequence.
    """
    output: list[str] = []
    stack: list[str] = []
    previous: TokenKind | None = None

    for token in tokens:
        kind = classify(token)

        if kind is TokenKind.LITERAL:
            output.append(token)

        elif kind is TokenKind.OPERATOR:
            rank = precedence(token)
            while (
                stack
                and stack[-1] != OPEN_PAREN
                and precedence(stack[-1]) >= rank
            ):
                output.append(stack.pop())
            stack.append(token)

        elif kind is TokenKind.OPEN_PAREN:
            stack.append(token)

        else:
            if previous is TokenKind.OPEN_PAREN:
                msg = "Empty parenthesized group"
                raise MalformedExpressionError(msg)
            while stack and stack[-1] != OPEN_PAREN:
                output.append(stack.pop())
            if not stack:
                msg = "Missing open parenthesis"
                raise MalformedExpressionError(msg)
            stack.pop()
            # Eager group flush.
            if stack and stack[-1] != OPEN_PAREN:
                output.append(stack.pop())

        previous = kind

    if previous is None:
        msg = "Empty expression"
        raise MalformedExpressionError(msg)

    while stack:
        top = stack.pop()
        if top == OPEN_PAREN:
            msg = "Missing closing parenthesis"
            raise MalformedExpressionError(msg)
        output.append(top)

    logger.debug("Postfix sequence: %s", output)
    return output
