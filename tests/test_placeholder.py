"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import expression_tree

    assert expression_tree.__version__ is not None
    assert expression_tree.__version__ == "0.1.0"
