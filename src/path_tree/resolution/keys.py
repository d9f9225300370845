"""KeyResolver: decides the key of a node from its value and metadata.

Precedence (first applicable wins):

1. The value is self-keying (a callable ``build_key``): it is called. A
   non-None key is passed once through ``lookup.inject`` so the registry can
   populate its dependencies. Metadata is not consulted for such values,
   even when ``build_key()`` returns None.
2. Metadata has a non-blank literal ``key``: that string, exactly as declared.
3. Metadata has a ``key_type``: the single registry instance of that type.
4. Metadata has a non-blank ``key_name``: the single registry instance of
   that name.
5. Otherwise the key is None.

Only one of steps 3 and 4 is attempted. Lookup failures there are fatal and
propagate as ``NotFoundError`` / ``AmbiguousBindingError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from path_tree.protocols import KeyBuilder
from path_tree.resolution.config import ResolverConfig

if TYPE_CHECKING:
    from path_tree.protocols import RegistryLookup
    from path_tree.tree.metadata import NodeMeta

__all__ = ["KeyResolver"]


class KeyResolver:
    """Resolves node keys following the precedence documented above."""

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config if config is not None else ResolverConfig()

    def resolve(self, value: Any, meta: NodeMeta | None, lookup: RegistryLookup) -> Any:
        """Return the key for the node wrapping ``value``.

        Args:
            value:  The node's value object.
            meta:   Metadata attached to ``type(value)``, or None.
            lookup: Registry used for key lookups and key injection.

        Returns:
            The resolved key, or None when no strategy applies.
        """
        if isinstance(value, KeyBuilder) and callable(value.build_key):
            key = value.build_key()
            if key is not None and self._config.inject_keys:
                lookup.inject(key)
            return key

        if meta is None:
            return None
        if meta.key.strip():
            return meta.key
        if meta.key_type is not None:
            return lookup.resolve_by_type(meta.key_type)
        if meta.key_name.strip():
            return lookup.resolve_by_name(meta.key_name)
        return None
