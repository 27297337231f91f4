"""ExpressionNode dataclass for the binary expression tree.

A node owns its two optional children outright; trees never share nodes.
"""

from __future__ import annotations

from dataclasses import dataclass

from expression_tree.tokens import is_operator


@dataclass(slots=True)
class ExpressionNode:
    """A node in an expression tree.

    Attributes:
        token:  Integer literal for leaves, operator for internal nodes.
        left:   Left operand subtree, ``None`` while absent.
        right:  Right operand subtree, ``None`` while absent.
    """

    token: str
    left: ExpressionNode | None = None
    right: ExpressionNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def is_operator(self) -> bool:
        return is_operator(self.token)

    @property
    def is_complete(self) -> bool:
        """True when this node needs no further children.

        Literals must stay leaves; operators need both operands.
        """
        if self.is_operator:
            return self.left is not None and self.right is not None
        return self.is_leaf
