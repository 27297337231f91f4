"""expression-tree - infix expressions as binary trees: parse, render, evaluate."""

from __future__ import annotations

from expression_tree.api import analyze, evaluate, parse
from expression_tree.cache import ExpressionCache
from expression_tree.converter import to_postfix
from expression_tree.errors import (
    ArithmeticEvaluationError,
    ExpressionTreeError,
    MalformedExpressionError,
    StructuralError,
)
from expression_tree.result import ExpressionResult
from expression_tree.tokenizer import tokenize
from expression_tree.tokens import TokenKind
from expression_tree.tree import ExpressionNode, ExpressionTree

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArithmeticEvaluationError",
    "ExpressionCache",
    "ExpressionNode",
    "ExpressionResult",
    "ExpressionTree",
    "ExpressionTreeError",
    "MalformedExpressionError",
    "StructuralError",
    "TokenKind",
    "analyze",
    "evaluate",
    "parse",
    "to_postfix",
    "tokenize",
]
