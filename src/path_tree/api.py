"""Public API functions for path-tree.

This module provides the two user-facing functions: resolve_tree and walk.
Each call creates fresh resolver/walker objects to guarantee zero global
state mutation between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from path_tree.navigation.walker import PathWalker
from path_tree.resolution.resolver import TreeResolver

if TYPE_CHECKING:
    from path_tree.navigation.path import TreePath
    from path_tree.protocols import RegistryLookup
    from path_tree.resolution.config import ResolverConfig
    from path_tree.resolution.resolver import Descriptor
    from path_tree.tree.metadata import MetadataSource
    from path_tree.tree.nodes import Node

__all__ = ["resolve_tree", "walk"]


def resolve_tree(
    descriptor: Descriptor,
    lookup: RegistryLookup,
    metadata: MetadataSource | None = None,
    config: ResolverConfig | None = None,
    max_cache_size: int | None = None,
) -> Node:
    """Resolve the tree rooted at ``descriptor``.

    Creates a fresh ``TreeResolver`` per call.

    Args:
        descriptor:     Name or type of the root value.
        lookup:         The registry lookup port (e.g. a ``Registry``).
        metadata:       Metadata source. Defaults to the ``tree_node``
                        attribute reader.
        config:         Resolver behaviour. Defaults to ``ResolverConfig()``.
        max_cache_size: Size of the per-resolution lookup cache; None
                        disables it.

    Returns:
        The root ``Node``.
    """
    resolver = TreeResolver(
        lookup, metadata=metadata, config=config, max_cache_size=max_cache_size
    )
    return resolver.resolve(descriptor)


def walk(root: Node, path: TreePath | str) -> Node:
    """Return the node reached by following ``path`` from ``root``.

    Raises:
        PathNotFoundError: A segment of ``path`` matches no child.
    """
    return PathWalker(root).walk(path)
