"""Command-line driver: reads one expression from stdin and prints each stage.

Usage::

    echo "3 + 4 * 2" | python -m expression_tree

Set ``EXPRESSION_TREE_LOG_LEVEL=DEBUG`` to see the pipeline's log records. An
unknown level name falls back to ``WARNING``.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from expression_tree.api import analyze
from expression_tree.errors import ExpressionTreeError


def _format_tokens(tokens: Sequence[str]) -> str:
    return "[" + ", ".join(tokens) + "]"


def main() -> int:
    name = os.environ.get("EXPRESSION_TREE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelNamesMapping().get(name, logging.WARNING)
    logging.basicConfig(level=level)

    try:
        expression = input()
    except EOFError:
        print("Error: no expression on standard input", file=sys.stderr)
        return 1

    try:
        result = analyze(expression)
    except ExpressionTreeError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    print("Original Expression: " + result.expression)
    print("Infix Tokens: " + _format_tokens(result.infix_tokens))
    print("Postfix Tokens: " + _format_tokens(result.postfix_tokens))
    print("Build: complete")
    print("Prefix: " + result.prefix)
    print("Infix: " + result.infix)
    print("Postfix: " + result.postfix)
    print(f"Evaluate: {result.value}")
    print("Display: complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
