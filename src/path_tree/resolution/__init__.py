"""Resolution subpackage: declarative tree construction from registry metadata."""

from path_tree.resolution.children import ChildResolver
from path_tree.resolution.config import ResolverConfig
from path_tree.resolution.keys import KeyResolver
from path_tree.resolution.resolver import Descriptor, TreeResolver

__all__ = [
    "ChildResolver",
    "Descriptor",
    "KeyResolver",
    "ResolverConfig",
    "TreeResolver",
]
