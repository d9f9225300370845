"""PathWalker: stateful traversal of a built tree by path strings.

The walker tracks a current position as the stack of nodes from the root
to the node it stands on. ``walk()`` moves along a path relative to that
position (or from the root, for absolute paths) and returns the node it
reaches. A failed walk leaves the position unchanged.

A child matches a path segment when its key equals the segment, or when
the key's ``str()`` does. Nodes with a None key are never matched. When
several siblings match, the first in declaration order wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from path_tree.navigation.path import PARENT, SEPARATOR, TreePath

if TYPE_CHECKING:
    from path_tree.tree.nodes import Node

__all__ = ["PathNotFoundError", "PathWalker", "find_child"]


class PathNotFoundError(LookupError):
    """A path segment could not be followed.

    Attributes:
        segment:  The segment that failed.
        reached:  The path walked successfully before the failure.
    """

    def __init__(self, segment: str, reached: str) -> None:
        msg = f"No node for segment {segment!r} at {reached!r}"
        super().__init__(msg)
        self.segment = segment
        self.reached = reached


def find_child(node: Node, segment: str) -> Node | None:
    """Return the first child of ``node`` matching ``segment``, or None."""
    for child in node.children:
        if child.key is None:
            continue
        if child.key == segment or str(child.key) == segment:
            return child
    return None


class PathWalker:
    """Walks a tree by path strings, remembering where it stands.

    Example::

        walker = PathWalker(root)
        walker.walk("about/team")     # -> Node for "team"
        walker.walk("..")             # back to "about"
        walker.current_path           # "/about"
    """

    def __init__(self, root: Node) -> None:
        self._root = root
        self._position: tuple[Node, ...] = (root,)

    @property
    def root(self) -> Node:
        return self._root

    @property
    def current(self) -> Node:
        """The node the walker stands on."""
        return self._position[-1]

    @property
    def position(self) -> tuple[Node, ...]:
        """Nodes from the root down to ``current``, inclusive."""
        return self._position

    @property
    def current_path(self) -> str:
        """Absolute path string of the current position."""
        return _format(self._position)

    def reset(self) -> None:
        """Move back to the root."""
        self._position = (self._root,)

    def walk(self, path: TreePath | str) -> Node:
        """Follow ``path`` and return the node reached.

        Raises:
            PathNotFoundError: A segment matches no child, or ``..`` would
                move above the root. The position is left unchanged.
        """
        if isinstance(path, str):
            path = TreePath.parse(path)
        stack = [self._root] if path.absolute else list(self._position)

        for segment in path.segments:
            if segment == PARENT:
                if len(stack) == 1:
                    raise PathNotFoundError(segment, _format(stack))
                stack.pop()
                continue
            child = find_child(stack[-1], segment)
            if child is None:
                raise PathNotFoundError(segment, _format(stack))
            stack.append(child)

        self._position = tuple(stack)
        return self.current


def _format(stack: tuple[Node, ...] | list[Node]) -> str:
    return SEPARATOR + SEPARATOR.join(str(node.key) for node in stack[1:])
