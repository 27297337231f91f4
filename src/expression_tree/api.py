"""Public API functions for expression-tree.

This module provides the user-facing functions: parse, evaluate and analyze.
Each call runs the whole pipeline on fresh objects, so calls never share state.
"""

from __future__ import annotations

from expression_tree.converter import to_postfix
from expression_tree.result import ExpressionResult
from expression_tree.tokenizer import tokenize
from expression_tree.tree import ExpressionTree

__all__ = ["analyze", "evaluate", "parse"]


def parse(expression: str) -> ExpressionTree:
    """Tokenize, convert and build ``expression`` into a new ExpressionTree.

    Raises:
        MalformedExpressionError: If the text is not a well-formed expression.
        StructuralError: If operators and operands do not pair up.
    """
    return ExpressionTree().build(to_postfix(tokenize(expression)))


def evaluate(expression: str) -> int:
    """Return the integer value of ``expression``.

    Raises:
        MalformedExpressionError: If the text is not a well-formed expression.
        StructuralError: If operators and operands do not pair up.
        ArithmeticEvaluationError: On division or modulo by zero.
    """
    return parse(expression).evaluate()


def analyze(expression: str) -> ExpressionResult:
    """Run every pipeline stage on ``expression`` and collect the results.

    Args:
        expression: Infix expression text.

    Returns:
        An ``ExpressionResult`` with the infix and postfix token sequences, the
        three renderings of the built tree, and its value.

    Raises:
        ExpressionTreeError: Whichever subclass the failing stage raises.
    """
    infix_tokens = tuple(tokenize(expression))
    postfix = to_postfix(infix_tokens)
    tree = ExpressionTree().build(postfix)
    return ExpressionResult(
        expression=expression,
        infix_tokens=infix_tokens,
        postfix_tokens=tuple(postfix),
        prefix=tree.prefix(),
        infix=tree.infix(),
        postfix=tree.postfix(),
        value=tree.evaluate(),
    )
