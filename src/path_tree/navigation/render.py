"""Pretty-printing of resolved trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from path_tree.tree.nodes import Node

__all__ = ["render_tree"]

_BRANCH = "├── "
_LAST = "└── "
_PIPE = "│   "
_SPACE = "    "


def _label(node: Node) -> str:
    value_type = type(node.value).__name__
    if node.key is None:
        return f"[{value_type}]"
    return f"{node.key} [{value_type}]"


def _render_children(node: Node, lines: list[str], prefix: str) -> None:
    total = len(node.children)
    for i, child in enumerate(node.children):
        is_last = i == total - 1
        lines.append(f"{prefix}{_LAST if is_last else _BRANCH}{_label(child)}")
        _render_children(child, lines, prefix + (_SPACE if is_last else _PIPE))


def render_tree(node: Node) -> str:
    """Render ``node`` and its subtree, one line per node.

    Each line shows the node key followed by the value's type name in
    brackets; keyless nodes show only the bracketed type::

        home [Home]
        ├── about [About]
        │   └── team [Team]
        └── logout [Logout]
    """
    lines = [_label(node)]
    _render_children(node, lines, "")
    return "\n".join(lines)
