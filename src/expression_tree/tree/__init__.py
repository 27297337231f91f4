"""Tree subpackage for the binary expression tree.

Re-exports the public API for the tree module:
- ExpressionNode: dataclass holding a token and two optional children
- ExpressionTree: builds the tree from postfix tokens, renders and evaluates it
"""

from expression_tree.tree.builder import ExpressionTree
from expression_tree.tree.nodes import ExpressionNode

__all__ = ["ExpressionNode", "ExpressionTree"]
