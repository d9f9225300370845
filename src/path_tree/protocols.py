"""Structural protocols for the tree resolver's collaborators.

``RegistryLookup`` is the port the resolver depends on to turn names and
types into object instances. Any object with conformant methods passes
``isinstance`` checks; no inheritance is required. The bundled
``path_tree.registry.Registry`` is one implementation.

``KeyBuilder`` is the optional self-keying capability of a value object: a
value with a ``build_key()`` method computes its own node key.

Example::

    from path_tree.protocols import KeyBuilder

    class Profile:
        def build_key(self) -> object:
            return "profile"

    assert isinstance(Profile(), KeyBuilder)  # True, structural conformance
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["KeyBuilder", "RegistryLookup"]


@runtime_checkable
class RegistryLookup(Protocol):
    """Structural protocol for the registry lookup port.

    Both ``resolve_by_*`` methods must return exactly one fully initialised
    instance, raising ``path_tree.errors.NotFoundError`` when zero candidates
    match and ``path_tree.errors.AmbiguousBindingError`` when more than one
    does. Instances must be stable for the duration of one tree resolution;
    caching and scoping are otherwise up to the implementation.

    ``inject`` populates the dependencies an externally created object
    declares (used on keys produced by ``KeyBuilder.build_key``).
    """

    def resolve_by_name(self, name: str) -> Any: ...

    def resolve_by_type(self, type_: type) -> Any: ...

    def inject(self, instance: Any) -> None: ...


@runtime_checkable
class KeyBuilder(Protocol):
    """Self-keying capability: the value builds its own node key."""

    def build_key(self) -> Any: ...
