"""TreeResolver: builds an immutable Node tree from registry metadata.

Given a root descriptor (a name or a type) the resolver:

1. looks the value object up through the ``RegistryLookup`` port (by type
   when a type is given, otherwise by name),
2. reads the ``NodeMeta`` attached to ``type(value)`` (absence is legal),
3. resolves the node key with ``KeyResolver``,
4. resolves the child nodes with ``ChildResolver``, recursing into step 1
   for every child descriptor, and
5. returns ``Node(key, value, children)``.

Metadata is read top-down but nodes are assembled bottom-up: every child is
fully built before its parent node exists. Any failure aborts the whole
resolution; the error carries the descriptor trail from the root to the
failing node.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from path_tree.cache import LookupCache
from path_tree.errors import (
    CycleError,
    DepthLimitError,
    NotFoundError,
    TreeResolutionError,
    describe,
)
from path_tree.resolution.children import ChildResolver
from path_tree.resolution.config import ResolverConfig
from path_tree.resolution.keys import KeyResolver
from path_tree.tree.metadata import AttributeMetadataSource
from path_tree.tree.nodes import Node

if TYPE_CHECKING:
    from path_tree.protocols import RegistryLookup
    from path_tree.tree.metadata import MetadataSource

__all__ = ["Descriptor", "TreeResolver"]

logger = logging.getLogger(__name__)

# A descriptor locates a value: a name (lookup by name) or a type.
Descriptor = str | type


class TreeResolver:
    """Resolves a root descriptor into a fully materialised tree.

    The resolver holds no per-call state: ``resolve()`` may be called any
    number of times, and resolving the same descriptor against an unchanged
    registry yields structurally equal trees.

    Example::

        from path_tree import Registry, TreeResolver, tree_node

        registry = Registry()

        @registry.component(name="logout")
        @tree_node(key="logout")
        class Logout: ...

        @registry.component(name="home")
        @tree_node(key="home", children=["logout"])
        class Home: ...

        root = TreeResolver(registry).resolve("home")
        print(root.key, [c.key for c in root.children])   # home ['logout']
    """

    def __init__(
        self,
        lookup: RegistryLookup,
        metadata: MetadataSource | None = None,
        config: ResolverConfig | None = None,
        max_cache_size: int | None = None,
    ) -> None:
        """Initialise the resolver.

        Args:
            lookup:   The registry lookup port.
            metadata: Where node metadata is read from. Defaults to
                ``AttributeMetadataSource()`` (metadata set by ``tree_node``).
            config:   Behaviour switches. Defaults to ``ResolverConfig()``.
            max_cache_size: When set, each ``resolve()`` call wraps ``lookup``
                in a fresh ``LookupCache`` of this size, so a descriptor
                looked up twice within one tree yields the same instance.
                This is an infrastructure parameter, not part of
                ``ResolverConfig``.
        """
        self._lookup = lookup
        self._metadata: MetadataSource = (
            metadata if metadata is not None else AttributeMetadataSource()
        )
        self._config = config if config is not None else ResolverConfig()
        self._max_cache_size = max_cache_size
        self._keys = KeyResolver(self._config)
        self._children = ChildResolver()

    @property
    def config(self) -> ResolverConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, descriptor: Descriptor) -> Node:
        """Build the tree rooted at the value located by ``descriptor``.

        Args:
            descriptor: A name (``str``) or a type.

        Returns:
            The root ``Node`` of the resolved tree.

        Raises:
            TypeError: ``descriptor`` is neither a str nor a type.
            ValueError: ``descriptor`` is a blank name.
            NotFoundError: A root, key or child lookup matched nothing.
            AmbiguousBindingError: A lookup matched more than one candidate.
            ConflictingChildSpecError: Metadata names children by both name
                and type.
            CycleError: Metadata is cyclic (when ``detect_cycles`` is on).
            DepthLimitError: The tree is deeper than ``max_depth``.
        """
        _check_descriptor(descriptor)
        lookup: RegistryLookup = self._lookup
        if self._max_cache_size is not None:
            lookup = LookupCache(self._lookup, max_size=self._max_cache_size)
        return self._build(descriptor, (), lookup)

    # ------------------------------------------------------------------
    # Recursion
    # ------------------------------------------------------------------

    def _build(
        self,
        descriptor: Descriptor,
        ancestors: tuple[Descriptor, ...],
        lookup: RegistryLookup,
    ) -> Node:
        if self._config.detect_cycles and descriptor in ancestors:
            raise CycleError(descriptor, ancestors)
        max_depth = self._config.max_depth
        if max_depth is not None and len(ancestors) >= max_depth:
            raise DepthLimitError(descriptor, max_depth, ancestors)

        trail = (*ancestors, descriptor)
        logger.debug("Resolving node %s", describe(descriptor))

        try:
            value = self._lookup_value(descriptor, lookup)
        except TreeResolutionError as exc:
            exc.with_context(trail=trail)
            raise

        value_type = type(value)
        meta = self._metadata.metadata_for(value_type)

        try:
            key = self._keys.resolve(value, meta, lookup)
            children = self._children.resolve(
                meta,
                value_type,
                lambda child: self._build(child, trail, lookup),
            )
        except TreeResolutionError as exc:
            exc.with_context(value_type=value_type, trail=trail)
            raise

        logger.debug(
            "Built node %s (key=%r, %d children)",
            describe(descriptor),
            key,
            len(children),
        )
        return Node(key=key, value=value, children=children)

    @staticmethod
    def _lookup_value(descriptor: Descriptor, lookup: RegistryLookup) -> Any:
        if isinstance(descriptor, type):
            value = lookup.resolve_by_type(descriptor)
        else:
            value = lookup.resolve_by_name(descriptor)
        # A provider that produced None has not produced a node value.
        if value is None:
            raise NotFoundError(descriptor)
        return value


def _check_descriptor(descriptor: Any) -> None:
    if isinstance(descriptor, type):
        return
    if not isinstance(descriptor, str):
        msg = f"Descriptor must be a str or a type, got {type(descriptor).__name__}"
        raise TypeError(msg)
    if not descriptor.strip():
        msg = "Descriptor name must not be blank"
        raise ValueError(msg)
