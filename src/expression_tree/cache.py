"""ExpressionCache: LRU cache of built expression trees.

Parsing the same expression text twice builds the same tree, and built trees
are never mutated, so a cache can hand out one shared tree per distinct text.
LRU eviction occurs silently when ``max_size`` is exceeded. Expressions that
fail to parse raise as usual and are not cached.

Each ``ExpressionCache`` instance maintains its own ``LRUCache``; two separate
instances never interfere with each other.

Example::

    from expression_tree.cache import ExpressionCache

    cache = ExpressionCache(max_size=64)

    # First call tokenizes, converts and builds
    cache.evaluate("3 + 4 * 2")

    # Second call reuses the cached tree
    cache.parse("3 + 4 * 2").prefix()
"""

from __future__ import annotations

import logging

from cachetools import LRUCache

from expression_tree.api import parse
from expression_tree.tree import ExpressionTree

__all__ = ["ExpressionCache"]

logger = logging.getLogger(__name__)


class ExpressionCache:
    """LRU-backed cache of ``ExpressionTree`` objects keyed by expression text.

    Args:
        max_size: Maximum number of trees to hold. Defaults to 128. When exceeded,
            the least-recently-used tree is silently evicted.
    """

    def __init__(self, max_size: int = 128) -> None:
        self._cache: LRUCache[str, ExpressionTree] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of trees this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of trees stored in the cache."""
        return int(self._cache.currsize)

    def __contains__(self, expression: object) -> bool:
        return expression in self._cache

    # ------------------------------------------------------------------
    # Pipeline surface
    # ------------------------------------------------------------------

    def parse(self, expression: str) -> ExpressionTree:
        """Return the built tree for ``expression``, building it on a miss.

        The returned tree is shared with later callers; do not rebuild it.
        """
        tree = self._cache.get(expression)
        if tree is None:
            logger.debug("Cache miss for %r", expression)
            tree = parse(expression)
            self._cache[expression] = tree
        return tree

    def evaluate(self, expression: str) -> int:
        """Return the integer value of ``expression`` using the cached tree.

        Evaluation itself is not cached, so a division by zero raises on every
        call.
        """
        return self.parse(expression).evaluate()

    def clear(self) -> None:
        self._cache.clear()
