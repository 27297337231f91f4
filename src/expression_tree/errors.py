"""Exception hierarchy for expression-tree.

Every failure the pipeline can report derives from ``ExpressionTreeError``:

- ``MalformedExpressionError``:  bad input text or token sequence (unmatched
  parentheses, unrecognized characters, empty groups or expressions).
- ``StructuralError``:           the postfix sequence does not describe a valid
  binary-operator tree, or the tree was read before it was built.
- ``ArithmeticEvaluationError``: division or modulo by zero during evaluation.

The leaf classes also subclass the closest builtin so callers that already catch
``ValueError`` or ``ZeroDivisionError`` keep working.
"""

from __future__ import annotations

__all__ = [
    "ArithmeticEvaluationError",
    "ExpressionTreeError",
    "MalformedExpressionError",
    "StructuralError",
]


class ExpressionTreeError(Exception):
    """Base class for every error raised by expression-tree."""


class MalformedExpressionError(ExpressionTreeError, ValueError):
    """The expression text or token sequence is not well formed."""


class StructuralError(ExpressionTreeError):
    """The operators and operands cannot be arranged into a binary tree."""


class ArithmeticEvaluationError(ExpressionTreeError, ZeroDivisionError):
    """Evaluating the tree divided (or took a remainder) by zero."""
