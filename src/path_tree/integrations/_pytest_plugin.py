"""pytest plugin for path-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from path_tree import Node, Registry

# Shape description: a key, or (key, [child shapes...]).
Shape = Any


def _shape_of(node: Node) -> Shape:
    if node.is_leaf:
        return node.key
    return (node.key, [_shape_of(child) for child in node.children])


def _normalize(shape: Shape) -> Shape:
    if isinstance(shape, tuple) and len(shape) == 2 and isinstance(shape[1], list):
        key, children = shape
        if not children:
            return key
        return (key, [_normalize(child) for child in children])
    return shape


@pytest.fixture
def tree_registry() -> Registry:
    """A fresh, empty ``Registry`` for each test."""
    return Registry()


@pytest.fixture(scope="session")
def assert_tree_shape() -> Any:
    """Fixture that returns a callable tree-shape asserter.

    A shape is either a bare key (a leaf) or a ``(key, [child shapes])``
    tuple. Children are compared in order.

    Usage in tests::

        def test_menu(tree_registry, assert_tree_shape):
            root = resolve_tree("home", tree_registry)
            assert_tree_shape(root, ("home", ["about", "logout"]))

    Returns:
        A callable ``_assert(node, expected) -> None`` that raises
        ``AssertionError`` when the keys or child order of ``node`` differ.
    """

    def _assert(node: Node, expected: Shape) -> None:
        """Assert that ``node``'s key/children layout equals ``expected``.

        Raises:
            AssertionError: With both shapes in the message on mismatch.
        """
        actual = _shape_of(node)
        wanted = _normalize(expected)
        if actual != wanted:
            raise AssertionError(
                f"Tree shape mismatch:\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {wanted!r}"
            )

    return _assert
