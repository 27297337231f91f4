"""Integrations subpackage for expression-tree.

Contains the pytest plugin (auto-discovered via the pytest11 entry point). It is
not imported here so that importing expression_tree never imports pytest.
"""

from __future__ import annotations

__all__: list[str] = []
