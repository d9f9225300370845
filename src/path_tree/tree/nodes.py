"""Node: the immutable unit of a resolved tree.

A node holds a key, a value and an ordered tuple of child nodes. Nodes are
created once, bottom-up, by the tree resolver and never change afterwards,
so a built tree can be shared freely between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Node"]


@dataclass(frozen=True, slots=True)
class Node:
    """An immutable tree node.

    Attributes:
        key:       Identifies the node among its siblings (used by path
                   traversal). May be None.
        value:     The object this node wraps. Never None.
        children:  Child nodes in declaration order. "No children" is always
                   the empty tuple; any iterable passed in is copied into a
                   tuple so callers cannot mutate it afterwards.
    """

    key: Any
    value: Any
    children: tuple[Node, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.value is None:
            msg = "Node value must not be None"
            raise ValueError(msg)
        children: Iterable[Node] | None = self.children
        normalized = tuple(children) if children is not None else ()
        if any(child is None for child in normalized):
            msg = "Node children must not contain None"
            raise ValueError(msg)
        # frozen dataclass: bypass __setattr__ for the one-time normalisation
        object.__setattr__(self, "children", normalized)

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return not self.children

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def child(self, key: Any) -> Node | None:
        """Return the first child whose key equals ``key``, or None."""
        for node in self.children:
            if node.key == key:
                return node
        return None

    def iter_depth_first(self) -> Iterator[Node]:
        """Yield this node and all descendants in pre-order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
