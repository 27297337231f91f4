"""pytest plugin for expression-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from expression_tree import analyze


@pytest.fixture(scope="session")
def assert_evaluates() -> Any:
    """Fixture that returns a callable expression-value asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to analyze() which builds a fresh tree per call).

    Usage in tests::

        def test_precedence(assert_evaluates):
            assert_evaluates("3 + 4 * 2", 11)

    Returns:
        A callable ``_assert(expression, expected) -> None`` that raises
        ``AssertionError`` when the expression evaluates to anything else.
        Pipeline errors (e.g. division by zero) propagate unchanged.
    """

    def _assert(expression: str, expected: int) -> None:
        result = analyze(expression)
        if result.value != expected:
            raise AssertionError(
                f"Expression value mismatch: "
                f"value={result.value} != expected={expected}\n"
                f"  expression: {expression}\n"
                f"  postfix:    {' '.join(result.postfix_tokens)}\n"
                f"  infix:      {result.infix}"
            )

    return _assert
