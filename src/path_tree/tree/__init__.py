"""Tree subpackage for the immutable node model and its metadata.

Re-exports the public API for the tree module:
- Node: frozen dataclass holding a key, a value and ordered children
- NodeMeta: frozen record describing how a node's key and children resolve
- tree_node: class decorator attaching NodeMeta to a value type
- MetadataSource: protocol mapping a value type to its NodeMeta
- AttributeMetadataSource / MappingMetadataSource: bundled metadata sources
"""

from path_tree.tree.metadata import (
    AttributeMetadataSource,
    MappingMetadataSource,
    MetadataSource,
    NodeMeta,
    tree_node,
)
from path_tree.tree.nodes import Node

__all__ = [
    "AttributeMetadataSource",
    "MappingMetadataSource",
    "MetadataSource",
    "Node",
    "NodeMeta",
    "tree_node",
]
