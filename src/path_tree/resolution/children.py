"""ChildResolver: turns a node's metadata into its ordered child nodes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from path_tree.errors import ConflictingChildSpecError

if TYPE_CHECKING:
    from path_tree.tree.metadata import NodeMeta
    from path_tree.tree.nodes import Node

__all__ = ["ChildResolver"]


class ChildResolver:
    """Validates child descriptors and builds one node per descriptor.

    ``child_types`` and ``children`` are mutually exclusive; metadata naming
    both is rejected before any child lookup happens. Children keep the order
    in which the metadata declares them.
    """

    def resolve(
        self,
        meta: NodeMeta | None,
        value_type: type,
        build: Callable[[str | type], Node],
    ) -> tuple[Node, ...]:
        """Return the child nodes described by ``meta``.

        Args:
            meta:       Metadata of the parent value, or None.
            value_type: Type of the parent value (for error context).
            build:      Callback that resolves one child descriptor into a
                        fully built node (the tree resolver's recursion).

        Raises:
            ConflictingChildSpecError: ``meta`` declares both names and types.
        """
        if meta is None or (not meta.children and not meta.child_types):
            return ()
        if meta.has_conflicting_children:
            raise ConflictingChildSpecError(meta, value_type=value_type)

        descriptors: tuple[str | type, ...] = meta.child_types or meta.children
        return tuple(build(descriptor) for descriptor in descriptors)
