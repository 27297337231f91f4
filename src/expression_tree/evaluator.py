"""Integer evaluation of a built expression tree.

Operators dispatch through ``OPERATIONS``. Division truncates toward zero and the
remainder takes the sign of the dividend, so ``q * b + r == a`` always holds.
Python's own ``//`` and ``%`` floor instead, which differs once a subtraction
produces a negative intermediate (``(1 - 8) / 2`` is ``-3`` here, not ``-4``).
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from typing import TYPE_CHECKING

from expression_tree.errors import (
    ArithmeticEvaluationError,
    MalformedExpressionError,
    StructuralError,
)

if TYPE_CHECKING:
    from expression_tree.tree.nodes import ExpressionNode

__all__ = ["OPERATIONS", "evaluate_node"]

logger = logging.getLogger(__name__)


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        msg = f"Division by zero: {a} / {b}"
        raise ArithmeticEvaluationError(msg)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _truncating_mod(a: int, b: int) -> int:
    if b == 0:
        msg = f"Modulo by zero: {a} % {b}"
        raise ArithmeticEvaluationError(msg)
    return a - b * _truncating_div(a, b)


OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
    "%": _truncating_mod,
}


def _literal_value(token: str) -> int:
    try:
        return int(token)
    except ValueError as error:
        # CPython caps int() conversion at sys.get_int_max_str_digits().
        msg = f"Integer literal too large: {len(token)} digits"
        raise MalformedExpressionError(msg) from error


def evaluate_node(node: ExpressionNode) -> int:
    """Compute the integer value of the subtree rooted at ``node``.

    Walks the tree post-order with an explicit stack, so the depth of the tree
    is bounded by memory rather than the interpreter's recursion limit.

    Args:
        node: Root of a fully built subtree.

    Returns:
        The integer value of the subtree.

    Raises:
        ArithmeticEvaluationError: On division or modulo by zero.
        MalformedExpressionError: If a literal has too many digits to convert.
        StructuralError: If an operator node is missing an operand.
    """
    values: list[int] = []
    stack: list[tuple[ExpressionNode, bool]] = [(node, False)]
    while stack:
        current, operands_ready = stack.pop()
        if current.is_leaf:
            values.append(_literal_value(current.token))
            continue

        if not operands_ready:
            if current.left is None or current.right is None:
                msg = f"Operator {current.token!r} is missing an operand"
                raise StructuralError(msg)
            stack.append((current, True))
            stack.append((current.right, False))
            stack.append((current.left, False))
            continue

        right = values.pop()
        left = values.pop()
        result = OPERATIONS[current.token](left, right)
        logger.debug("%d %s %d = %d", left, current.token, right, result)
        values.append(result)

    return values.pop()
