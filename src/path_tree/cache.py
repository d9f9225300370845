"""LookupCache: LRU-backed caching proxy for any RegistryLookup.

Wraps any ``RegistryLookup``-conformant object and remembers the instance
returned for each name and type. Repeated lookups of the same descriptor are
served from memory and return the *same* instance, which keeps values stable
for the duration of a tree resolution even when the underlying registry
hands out a fresh (prototype-scoped) object on every call.

Failed lookups are never cached: the error propagates and the next lookup of
that descriptor hits the wrapped registry again. LRU eviction is silent when
``max_size`` is exceeded.

Each ``LookupCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state. The proxy is not thread-safe; use one per
resolution (as ``TreeResolver`` does) or guard it externally.

Example::

    from path_tree.cache import LookupCache
    from path_tree.registry import Registry, Scope

    registry = Registry()
    registry.register(list, name="items", scope=Scope.PROTOTYPE)
    cache = LookupCache(registry, max_size=64)

    assert cache.resolve_by_name("items") is cache.resolve_by_name("items")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from path_tree.protocols import RegistryLookup

__all__ = ["LookupCache"]


class LookupCache:
    """LRU-backed caching proxy around any RegistryLookup.

    Satisfies the ``RegistryLookup`` Protocol structurally. Name and type
    lookups live in the same cache under distinct keys, so a class and a
    string never collide.

    Args:
        lookup: Any object satisfying the ``RegistryLookup`` Protocol.
        max_size: Maximum number of resolved instances to hold. Defaults to
            128. Must be at least 1.
    """

    def __init__(self, lookup: RegistryLookup, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._lookup: Any = lookup
        self._cache: LRUCache[tuple[str, Any], Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    @property
    def wrapped(self) -> RegistryLookup:
        """The underlying lookup."""
        return self._lookup  # type: ignore[no-any-return]

    # ------------------------------------------------------------------
    # RegistryLookup Protocol surface
    # ------------------------------------------------------------------

    def resolve_by_name(self, name: str) -> Any:
        """Return the instance for ``name``, hitting the wrapped lookup once."""
        cache_key = ("name", name)
        if cache_key not in self._cache:
            self._cache[cache_key] = self._lookup.resolve_by_name(name)
        return self._cache[cache_key]

    def resolve_by_type(self, type_: type) -> Any:
        """Return the instance for ``type_``, hitting the wrapped lookup once."""
        cache_key = ("type", type_)
        if cache_key not in self._cache:
            self._cache[cache_key] = self._lookup.resolve_by_type(type_)
        return self._cache[cache_key]

    def inject(self, instance: Any) -> None:
        """Delegate to the wrapped lookup; injection results are not cached."""
        self._lookup.inject(instance)

    def clear(self) -> None:
        """Drop every cached instance."""
        self._cache.clear()
