"""Tokenizer: splits infix expression text into a lazy stream of tokens.

The text is cut at every boundary next to one of ``+ - * / % ( )``. Each
fragment is trimmed and empty fragments are dropped, so whitespace never reaches
the converter. No grouping or precedence checks happen here; a mismatched
parenthesis passes straight through and is reported by the converter.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from expression_tree.errors import MalformedExpressionError
from expression_tree.tokens import is_literal

__all__ = ["tokenize"]

logger = logging.getLogger(__name__)

# Capturing group keeps the delimiters in the re.split() output.
_BOUNDARY = re.compile(r"([-+*/%()])")


def tokenize(expression: str) -> Iterator[str]:
    """Yield the tokens of ``expression`` from left to right.

    The returned generator is one-shot. Operators and parentheses are yielded as
    single characters; runs of digits are yielded as one integer literal.

    Args:
        expression: Infix text built from digits, ``+ - * / % ( )`` and
            whitespace.

    Yields:
        Token strings with no surrounding whitespace.

    Raises:
        MalformedExpressionError: When a fragment between two boundaries is not an
            integer literal, e.g. ``"3 4"`` or ``"x"``. Raised lazily, at the
            point the generator reaches the fragment.
    """
    count = 0
    for fragment in _BOUNDARY.split(expression):
        token = fragment.strip()
        if not token:
            continue
        if _BOUNDARY.fullmatch(token) is None and not is_literal(token):
            msg = f"Could not parse token {token!r} in expression: {expression!r}"
            raise MalformedExpressionError(msg)
        count += 1
        yield token
    logger.debug("Tokenized %r into %d tokens", expression, count)
