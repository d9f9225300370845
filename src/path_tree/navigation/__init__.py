"""Navigation subpackage: walking and printing resolved trees.

Re-exports the public API for the navigation module:
- TreePath: parsed, normalised slash-separated path
- PathWalker: stateful walker tracking the current position in a tree
- PathNotFoundError: raised when a path segment cannot be followed
- render_tree: pretty-prints a tree one node per line
"""

from path_tree.navigation.path import TreePath
from path_tree.navigation.render import render_tree
from path_tree.navigation.walker import PathNotFoundError, PathWalker, find_child

__all__ = ["PathNotFoundError", "PathWalker", "TreePath", "find_child", "render_tree"]
