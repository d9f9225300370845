"""Registry: in-memory implementation of the ``RegistryLookup`` port.

A registry holds *bindings*. Each binding has a provider (a class, a
zero-argument factory, or a ready instance), an optional name, the types it
is exposed under, and a scope:

- ``Scope.SINGLETON``: the provider is called once; every lookup returns
  the same instance.
- ``Scope.PROTOTYPE``: every lookup calls the provider again.

Lookups follow exactly-one semantics: zero matching bindings raise
``NotFoundError``, more than one raise ``AmbiguousBindingError``. Several
bindings may share a name or a type; the ambiguity only surfaces when that
name or type is looked up.

When ``types`` is not given for a class provider, the binding is exposed
under the class and every base class except ``object``, so looking up a base
class finds all of its registered subclasses.

Dependencies are declared with ``Inject`` class attributes and populated on
every instance the registry creates (and on demand via ``inject()``)::

    registry = Registry()

    @registry.component(name="userId")
    class UserId:
        pass

    @registry.component(name="profile")
    class Profile:
        user_id: UserId = Inject()          # by annotated type
        current = Inject(name="userId")     # by name

The registry is safe to share between threads: singleton creation is
serialised by a re-entrant lock.
"""

from __future__ import annotations

import logging
import threading
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, TypeVar

from path_tree.errors import AmbiguousBindingError, NotFoundError, RegistrationError

__all__ = ["Binding", "Inject", "Registry", "Scope"]

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound=type)

_MISSING: Any = object()


class Scope(StrEnum):
    """Instance lifecycle of a binding."""

    SINGLETON = auto()
    PROTOTYPE = auto()


class Inject:
    """Class-attribute marker declaring a dependency to be injected.

    ``Inject(SomeType)`` resolves by type, ``Inject(name="x")`` by name and a
    bare ``Inject()`` by the attribute's annotation.
    """

    __slots__ = ("attribute", "name", "type")

    def __init__(self, type_: type | None = None, *, name: str = "") -> None:
        if type_ is not None and name:
            msg = "Inject takes a type or a name, not both"
            raise RegistrationError(msg)
        self.type = type_
        self.name = name
        self.attribute = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.attribute = name

    def __repr__(self) -> str:
        target = self.name or (self.type.__qualname__ if self.type else "<annotation>")
        return f"Inject({target})"


@dataclass(frozen=True, slots=True, eq=False)
class Binding:
    """One registry entry.

    Attributes:
        provider:   Zero-argument callable producing the instance.
        name:       Name the binding is found under, or None.
        types:      Types the binding is found under.
        scope:      Instance lifecycle.
    """

    provider: Callable[[], Any]
    name: str | None
    types: tuple[type, ...]
    scope: Scope

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self.types)
        return f"Binding(name={self.name!r}, types=[{names}], scope={self.scope})"


def _exposed_types(cls: type) -> tuple[type, ...]:
    return tuple(t for t in cls.__mro__ if t is not object)


class Registry:
    """In-memory registry of named and typed bindings.

    Satisfies the ``RegistryLookup`` Protocol structurally.
    """

    def __init__(self) -> None:
        self._bindings: list[Binding] = []
        self._singletons: dict[Binding, Any] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        provider: Callable[[], Any] | None = None,
        *,
        instance: Any = _MISSING,
        name: str | None = None,
        types: Iterable[type] | None = None,
        scope: Scope = Scope.SINGLETON,
        replace: bool = False,
    ) -> Binding:
        """Add a binding and return it.

        Args:
            provider: A class (called with no arguments) or a zero-argument
                factory. Mutually exclusive with ``instance``.
            instance: A ready object, bound as a singleton. It is stored as
                given; no dependencies are injected into it.
            name:     Name to bind under. Must not be blank when given.
            types:    Types to bind under. Defaults to the provider class's
                MRO (minus ``object``), or ``type(instance)``'s.
            scope:    Instance lifecycle for provider bindings.
            replace:  Drop existing bindings with the same name first.

        Raises:
            RegistrationError: On inconsistent arguments, or when a factory
                binding would be reachable by neither name nor type.
        """
        has_instance = instance is not _MISSING
        if has_instance == (provider is not None):
            msg = "register() needs exactly one of provider or instance"
            raise RegistrationError(msg)
        if name is not None and not name.strip():
            msg = "Binding name must not be blank"
            raise RegistrationError(msg)

        if has_instance:
            if scope is not Scope.SINGLETON:
                msg = "Instance bindings are always singletons"
                raise RegistrationError(msg)
            bean_class: type | None = type(instance)
            factory: Callable[[], Any] = lambda: instance  # noqa: E731
        elif isinstance(provider, type):
            bean_class = provider
            factory = provider
        elif callable(provider):
            bean_class = None
            factory = provider
        else:
            msg = f"Provider must be a class or a callable, got {provider!r}"
            raise RegistrationError(msg)

        if types is not None:
            exposed = tuple(types)
            for t in exposed:
                if not isinstance(t, type):
                    msg = f"Binding types must be types, got {t!r}"
                    raise RegistrationError(msg)
        elif bean_class is not None:
            exposed = _exposed_types(bean_class)
        else:
            exposed = ()

        if name is None and not exposed:
            msg = f"Binding for {provider!r} has neither a name nor types"
            raise RegistrationError(msg)

        binding = Binding(provider=factory, name=name, types=exposed, scope=scope)
        with self._lock:
            if replace and name is not None:
                for old in [b for b in self._bindings if b.name == name]:
                    self._bindings.remove(old)
                    self._singletons.pop(old, None)
            self._bindings.append(binding)
            if has_instance:
                self._singletons[binding] = instance
        logger.debug("Registered %r", binding)
        return binding

    def component(
        self,
        name: str | None = None,
        *,
        types: Iterable[type] | None = None,
        scope: Scope = Scope.SINGLETON,
    ) -> Callable[[_T], _T]:
        """Class decorator form of ``register``."""

        def _register(cls: _T) -> _T:
            self.register(cls, name=name, types=types, scope=scope)
            return cls

        return _register

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def names(self) -> tuple[str, ...]:
        """Registered names, in registration order, without duplicates."""
        seen = dict.fromkeys(b.name for b in self._bindings if b.name is not None)
        return tuple(seen)

    def bindings_for_name(self, name: str) -> tuple[Binding, ...]:
        """All bindings registered under ``name``."""
        return tuple(b for b in self._bindings if b.name == name)

    def bindings_for_type(self, type_: type) -> tuple[Binding, ...]:
        """All bindings exposed under ``type_``."""
        return tuple(b for b in self._bindings if type_ in b.types)

    # ------------------------------------------------------------------
    # RegistryLookup Protocol surface
    # ------------------------------------------------------------------

    def resolve_by_name(self, name: str) -> Any:
        """Return the single instance bound under ``name``."""
        return self._single(name, self.bindings_for_name(name))

    def resolve_by_type(self, type_: type) -> Any:
        """Return the single instance bound under ``type_``."""
        return self._single(type_, self.bindings_for_type(type_))

    def inject(self, instance: Any) -> None:
        """Populate every ``Inject`` attribute declared on ``instance``'s class.

        Attributes already set on the instance itself are left untouched, so
        injecting twice is harmless. Only the nearest definition of an
        attribute in the MRO counts: a subclass overriding an ``Inject`` with a
        plain class attribute disables that injection. For ``Inject()``
        without a target, the attribute's annotation decides the type to
        resolve.

        Raises:
            RegistrationError: When a bare ``Inject()`` has no usable annotation.
        """
        state = getattr(instance, "__dict__", None)
        seen: set[str] = set()
        for cls in type(instance).__mro__:
            for attribute, marker in vars(cls).items():
                if attribute in seen:
                    continue
                seen.add(attribute)
                if not isinstance(marker, Inject):
                    continue
                if state is not None and attribute in state:
                    continue
                setattr(instance, attribute, self._dependency(cls, attribute, marker))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _single(self, descriptor: Any, candidates: tuple[Binding, ...]) -> Any:
        if not candidates:
            raise NotFoundError(descriptor)
        if len(candidates) > 1:
            raise AmbiguousBindingError(descriptor, len(candidates))
        return self._instance(candidates[0])

    def _instance(self, binding: Binding) -> Any:
        if binding.scope is Scope.PROTOTYPE:
            return self._create(binding)
        with self._lock:
            if binding not in self._singletons:
                self._singletons[binding] = self._create(binding)
            return self._singletons[binding]

    def _create(self, binding: Binding) -> Any:
        logger.debug("Creating instance for %r", binding)
        obj = binding.provider()
        self.inject(obj)
        return obj

    def _dependency(self, owner: type, attribute: str, marker: Inject) -> Any:
        if marker.name:
            return self.resolve_by_name(marker.name)
        if marker.type is not None:
            return self.resolve_by_type(marker.type)
        hint = typing.get_type_hints(owner).get(attribute)
        if not isinstance(hint, type):
            msg = (
                f"Cannot infer dependency type for {owner.__qualname__}.{attribute}; "
                "annotate it with a class or pass Inject(type_) / Inject(name=...)"
            )
            raise RegistrationError(msg)
        return self.resolve_by_type(hint)
