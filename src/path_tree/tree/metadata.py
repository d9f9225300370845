"""NodeMeta: declarative metadata describing how a node is resolved.

Metadata is attached to a value object's *type* and tells the resolver:

- how to obtain the node key: a literal ``key`` string, a ``key_type`` or a
  ``key_name`` looked up in the registry (in that precedence), and
- which values become child nodes: ``children`` (names) XOR ``child_types``
  (types), in declared order.

Attaching metadata is done with the ``tree_node`` class decorator::

    @tree_node(key="home", children=["about", "logout"])
    class Home: ...

The resolver reads metadata through a ``MetadataSource``. The default
``AttributeMetadataSource`` reads what ``tree_node`` stored on the class;
``MappingMetadataSource`` lets callers supply a plain ``{type: NodeMeta}``
mapping for types they cannot decorate.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, runtime_checkable

__all__ = [
    "META_ATTRIBUTE",
    "AttributeMetadataSource",
    "MappingMetadataSource",
    "MetadataSource",
    "NodeMeta",
    "tree_node",
]

# Class attribute under which ``tree_node`` stores the NodeMeta record.
META_ATTRIBUTE = "__tree_node__"

_T = TypeVar("_T", bound=type)


@dataclass(frozen=True, slots=True)
class NodeMeta:
    """Immutable metadata record for one value type.

    Attributes:
        key:         Literal node key. Used when not blank.
        key_type:    Type of the registry object to use as the key.
        key_name:    Name of the registry object to use as the key.
        children:    Names of the child node values, in order.
        child_types: Types of the child node values, in order.

    ``children`` and ``child_types`` are mutually exclusive. The record can
    still be built with both (it is plain data); resolution then fails with
    ``ConflictingChildSpecError``.
    """

    key: str = ""
    key_type: type | None = None
    key_name: str = ""
    children: tuple[str, ...] = field(default=())
    child_types: tuple[type, ...] = field(default=())

    def __post_init__(self) -> None:
        for attribute in ("key", "key_name"):
            value = getattr(self, attribute)
            if not isinstance(value, str):
                msg = f"{attribute} must be str, got {type(value).__name__}"
                raise TypeError(msg)
        for attribute in ("children", "child_types"):
            # A bare string would otherwise be split into characters.
            if isinstance(getattr(self, attribute), str):
                msg = f"{attribute} must be a sequence, not a single str"
                raise TypeError(msg)
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "child_types", tuple(self.child_types))
        for name in self.children:
            if not isinstance(name, str):
                msg = f"children entries must be str, got {type(name).__name__}"
                raise TypeError(msg)
        for child_type in self.child_types:
            if not isinstance(child_type, type):
                msg = f"child_types entries must be types, got {child_type!r}"
                raise TypeError(msg)
        if self.key_type is not None and not isinstance(self.key_type, type):
            msg = f"key_type must be a type, got {self.key_type!r}"
            raise TypeError(msg)

    @property
    def has_conflicting_children(self) -> bool:
        """True when both ``children`` and ``child_types`` are populated."""
        return bool(self.children) and bool(self.child_types)


def tree_node(
    *,
    key: str = "",
    key_type: type | None = None,
    key_name: str = "",
    children: Iterable[str] = (),
    child_types: Iterable[type] = (),
) -> Callable[[_T], _T]:
    """Class decorator attaching a ``NodeMeta`` record to the decorated class."""
    meta = NodeMeta(
        key=key,
        key_type=key_type,
        key_name=key_name,
        children=children,  # type: ignore[arg-type]
        child_types=child_types,  # type: ignore[arg-type]
    )

    def _attach(cls: _T) -> _T:
        setattr(cls, META_ATTRIBUTE, meta)
        return cls

    return _attach


@runtime_checkable
class MetadataSource(Protocol):
    """Structural protocol: maps a value type to its metadata (or None)."""

    def metadata_for(self, value_type: type) -> NodeMeta | None: ...


class AttributeMetadataSource:
    """Reads metadata stored on the class by ``tree_node``.

    Only the class's own ``__dict__`` is consulted: a subclass of a decorated
    class does not inherit its base's node metadata.
    """

    def metadata_for(self, value_type: type) -> NodeMeta | None:
        meta = vars(value_type).get(META_ATTRIBUTE)
        return meta if isinstance(meta, NodeMeta) else None


class MappingMetadataSource:
    """Metadata looked up in a caller-supplied ``{type: NodeMeta}`` mapping."""

    def __init__(self, mapping: Mapping[type, NodeMeta]) -> None:
        self._mapping = dict(mapping)

    def metadata_for(self, value_type: type) -> NodeMeta | None:
        return self._mapping.get(value_type)
