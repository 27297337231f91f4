"""Depth-first renderings of an expression tree.

``prefix_tokens`` and ``postfix_tokens`` return token lists that callers
space-join. ``render_infix`` returns the fully parenthesized infix string:
every operator node is wrapped as ``"(" + left + op + right + ")"`` and no
spaces are inserted, so ``3 + 4 * 2`` renders as ``(3+(4*2))``.
"""

from __future__ import annotations

from expression_tree.tree.nodes import ExpressionNode

__all__ = ["postfix_tokens", "prefix_tokens", "render_infix"]


def prefix_tokens(node: ExpressionNode) -> list[str]:
    """Tokens in node, left, right order."""
    tokens: list[str] = []
    stack = [node]
    while stack:
        current = stack.pop()
        tokens.append(current.token)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return tokens


def postfix_tokens(node: ExpressionNode) -> list[str]:
    """Tokens in left, right, node order."""
    # Node, right, left order reversed is left, right, node.
    tokens: list[str] = []
    stack = [node]
    while stack:
        current = stack.pop()
        tokens.append(current.token)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    tokens.reverse()
    return tokens


def render_infix(node: ExpressionNode) -> str:
    parts: list[str] = []
    # Strings are emitted as-is; nodes are expanded in place.
    stack: list[ExpressionNode | str] = [node]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        if item.right is not None:
            stack.append(")")
            stack.append(item.right)
        stack.append(item.token)
        if item.left is not None:
            stack.append(item.left)
            stack.append("(")
    return "".join(parts)
