"""ExpressionTree: builds a binary expression tree from a postfix sequence.

The postfix tokens are inserted back to front. Each new node goes into the first
free slot found by searching from the root: the right slot of a node is tried
before its left slot, and the slots below a filled operator slot come before
anything further along. Because the last postfix token is the outermost operator and
every operator is inserted before its operands, this fills each operator's right
operand, then its left one, leaving a tree whose subtrees mirror the grouping
encoded in the postfix order.

The first free slot in that search order is always the one opened most
recently, so open slots are kept on a stack and each insertion is constant time.

Example::

    tree = ExpressionTree().build(["3", "4", "2", "*", "+"])
    tree.infix()     # "(3+(4*2))"
    tree.evaluate()  # 11
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum, auto

from expression_tree.errors import MalformedExpressionError, StructuralError
from expression_tree.evaluator import evaluate_node
from expression_tree.tokens import TokenKind, classify
from expression_tree.tree.nodes import ExpressionNode
from expression_tree.tree.traversal import postfix_tokens, prefix_tokens, render_infix

__all__ = ["ExpressionTree"]

logger = logging.getLogger(__name__)


class ExpressionTree:
    """A binary expression tree with prefix, infix and postfix renderings.

    The tree starts empty. ``build`` populates it from a postfix sequence and
    returns the tree itself; calling ``build`` again discards the previous tree
    and builds a new one. Every read (renderings, ``evaluate``, ``nodes``) on a
    tree that has not been built raises ``StructuralError``.

    Attributes:
        root: The outermost node, ``None`` until ``build`` succeeds.
    """

    def __init__(self) -> None:
        self.root: ExpressionNode | None = None

    def __repr__(self) -> str:
        if self.root is None:
            return "ExpressionTree(<empty>)"
        return f"ExpressionTree({self.infix()!r})"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def build(self, postfix: Iterable[str]) -> ExpressionTree:
        """Populate the tree from a postfix token sequence.

        Args:
            postfix: Literal and operator tokens in postfix order.

        Returns:
            This tree, for chaining.

        Raises:
            MalformedExpressionError: If a token is a parenthesis or unrecognized.
            StructuralError: If the operand and operator counts do not form a
                binary tree (too many or too few operands, or no tokens at all).
                The tree is left empty.
        """
        self.root = None
        tokens = list(postfix)
        if not tokens:
            msg = "Cannot build a tree from an empty postfix sequence"
            raise StructuralError(msg)
        nodes = [_make_node(token) for token in tokens]

        root = nodes.pop()
        # Open operand slots, most recently opened on top. A right slot sits
        # above the left slot of the same operator.
        pending: list[tuple[ExpressionNode, _Slot]] = []
        _open_slots(root, pending)
        while nodes:
            node = nodes.pop()
            if not pending:
                if not root.is_operator:
                    msg = (
                        f"Cannot attach {node.token!r} below literal "
                        f"{root.token!r}: too many operands"
                    )
                else:
                    msg = f"No free operand slot for {node.token!r}: too many operands"
                raise StructuralError(msg)
            parent, slot = pending.pop()
            if slot is _Slot.RIGHT:
                parent.right = node
            else:
                parent.left = node
            _open_slots(node, pending)

        if pending:
            parent, _ = pending[-1]
            msg = f"Operator {parent.token!r} is missing an operand: too few operands"
            raise StructuralError(msg)

        self.root = root
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built tree with %d literals and %d operators",
                self.leaf_count,
                self.operator_count,
            )
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_built(self) -> bool:
        return self.root is not None

    def nodes(self) -> Iterator[ExpressionNode]:
        """Iterate over every node in pre-order."""
        return _walk(self._require_root())

    @property
    def leaf_count(self) -> int:
        return sum(1 for node in self.nodes() if node.is_leaf)

    @property
    def operator_count(self) -> int:
        return sum(1 for node in self.nodes() if node.is_operator)

    # ------------------------------------------------------------------
    # Renderings and evaluation
    # ------------------------------------------------------------------

    def prefix(self) -> str:
        """Space-joined tokens in prefix order, e.g. ``"+ 3 * 4 2"``."""
        return " ".join(prefix_tokens(self._require_root()))

    def infix(self) -> str:
        """Fully parenthesized infix rendering, e.g. ``"(3+(4*2))"``."""
        return render_infix(self._require_root())

    def postfix(self) -> str:
        """Space-joined tokens in postfix order, e.g. ``"3 4 2 * +"``."""
        return " ".join(postfix_tokens(self._require_root()))

    def evaluate(self) -> int:
        """Compute the integer value of the expression.

        Raises:
            ArithmeticEvaluationError: On division or modulo by zero.
            MalformedExpressionError: If a literal has too many digits to convert.
            StructuralError: If the tree has not been built.
        """
        return evaluate_node(self._require_root())

    def _require_root(self) -> ExpressionNode:
        if self.root is None:
            msg = "Expression tree has not been built"
            raise StructuralError(msg)
        return self.root


def _walk(root: ExpressionNode) -> Iterator[ExpressionNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


class _Slot(Enum):
    RIGHT = auto()
    LEFT = auto()


def _make_node(token: str) -> ExpressionNode:
    if classify(token) in (TokenKind.OPEN_PAREN, TokenKind.CLOSE_PAREN):
        msg = f"Parenthesis {token!r} cannot appear in a postfix sequence"
        raise MalformedExpressionError(msg)
    return ExpressionNode(token)


def _open_slots(
    node: ExpressionNode, pending: list[tuple[ExpressionNode, _Slot]]
) -> None:
    if node.is_operator:
        pending.append((node, _Slot.LEFT))
        pending.append((node, _Slot.RIGHT))
