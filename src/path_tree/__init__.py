"""path-tree: immutable trees resolved declaratively from registry metadata."""

from __future__ import annotations

import logging

from path_tree.api import resolve_tree, walk
from path_tree.cache import LookupCache
from path_tree.errors import (
    AmbiguousBindingError,
    ConflictingChildSpecError,
    CycleError,
    DepthLimitError,
    LookupFailedError,
    NotFoundError,
    RegistrationError,
    TreeResolutionError,
)
from path_tree.navigation import PathNotFoundError, PathWalker, TreePath, render_tree
from path_tree.protocols import KeyBuilder, RegistryLookup
from path_tree.registry import Binding, Inject, Registry, Scope
from path_tree.resolution import ResolverConfig, TreeResolver
from path_tree.tree import MappingMetadataSource, Node, NodeMeta, tree_node

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "AmbiguousBindingError",
    "Binding",
    "ConflictingChildSpecError",
    "CycleError",
    "DepthLimitError",
    "Inject",
    "KeyBuilder",
    "LookupCache",
    "LookupFailedError",
    "MappingMetadataSource",
    "Node",
    "NodeMeta",
    "NotFoundError",
    "PathNotFoundError",
    "PathWalker",
    "RegistrationError",
    "Registry",
    "RegistryLookup",
    "ResolverConfig",
    "Scope",
    "TreePath",
    "TreeResolutionError",
    "TreeResolver",
    "render_tree",
    "resolve_tree",
    "tree_node",
    "walk",
]
