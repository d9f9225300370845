"""Error hierarchy for tree resolution and registry lookups.

Every failure raised while building a tree derives from ``TreeResolutionError``
and is fatal to the enclosing ``resolve()`` call: nothing is retried and no
partial tree is returned.

Errors carry optional diagnostic context that is rendered into ``str(error)``:

- ``descriptor``:  the name or type whose lookup failed.
- ``value_type``:  the type of the value object whose metadata caused the
                   failure (key and child lookups).
- ``trail``:       descriptors from the root to the node being resolved.

The resolver attaches ``trail`` (and ``value_type`` where known) while the
error unwinds, so the registry only has to raise with the ``descriptor``.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "AmbiguousBindingError",
    "ConflictingChildSpecError",
    "CycleError",
    "DepthLimitError",
    "LookupFailedError",
    "NotFoundError",
    "RegistrationError",
    "TreeResolutionError",
]


def describe(descriptor: Any) -> str:
    """Return a short human-readable form of a name or type descriptor."""
    if isinstance(descriptor, type):
        return f"{descriptor.__module__}.{descriptor.__qualname__}"
    return repr(descriptor)


class TreeResolutionError(RuntimeError):
    """Base class for every failure raised while resolving a tree."""

    def __init__(
        self,
        message: str,
        *,
        descriptor: Any = None,
        value_type: type | None = None,
        trail: tuple[Any, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.descriptor = descriptor
        self.value_type = value_type
        self.trail = trail

    def with_context(
        self,
        *,
        value_type: type | None = None,
        trail: tuple[Any, ...] | None = None,
    ) -> TreeResolutionError:
        """Fill in context that is still missing and return ``self``.

        Context set closer to the failure point wins: an attribute that is
        already populated is never overwritten.
        """
        if self.value_type is None and value_type is not None:
            self.value_type = value_type
        if not self.trail and trail:
            self.trail = trail
        return self

    def __str__(self) -> str:
        parts = [self.message]
        if self.value_type is not None:
            parts.append(f"value type: {describe(self.value_type)}")
        if self.trail:
            parts.append("trail: " + " -> ".join(describe(d) for d in self.trail))
        return "; ".join(parts)

    def __reduce__(self) -> tuple[Any, ...]:
        # Subclass constructors do not accept the message; restore state directly.
        return _rebuild, (type(self), self.message, self.__dict__.copy())


class LookupFailedError(TreeResolutionError, LookupError):
    """A name or type lookup did not match exactly one candidate."""


class NotFoundError(LookupFailedError):
    """A name or type lookup matched zero candidates."""

    def __init__(self, descriptor: Any, **context: Any) -> None:
        msg = f"No candidate found for {describe(descriptor)}"
        super().__init__(msg, descriptor=descriptor, **context)


class AmbiguousBindingError(LookupFailedError):
    """A name or type lookup matched more than one candidate."""

    def __init__(self, descriptor: Any, candidates: int, **context: Any) -> None:
        msg = (
            f"Expected exactly one candidate for {describe(descriptor)}, "
            f"found {candidates}"
        )
        super().__init__(msg, descriptor=descriptor, **context)
        self.candidates = candidates


class ConflictingChildSpecError(TreeResolutionError, ValueError):
    """Metadata names children both by name and by type."""

    def __init__(self, meta: Any, value_type: type | None = None, **context: Any) -> None:
        msg = (
            "Child nodes are identified with both names and types; "
            f"expected only one to be provided (preferably types): {meta!r}"
        )
        super().__init__(msg, value_type=value_type, **context)
        self.meta = meta


class CycleError(TreeResolutionError):
    """A descriptor reappeared on its own resolution path."""

    def __init__(self, descriptor: Any, trail: tuple[Any, ...]) -> None:
        msg = f"Cyclic tree metadata: {describe(descriptor)} is its own ancestor"
        super().__init__(msg, descriptor=descriptor, trail=(*trail, descriptor))


class DepthLimitError(TreeResolutionError):
    """Resolution went deeper than ``ResolverConfig.max_depth``."""

    def __init__(self, descriptor: Any, max_depth: int, trail: tuple[Any, ...]) -> None:
        msg = f"Tree depth exceeds max_depth={max_depth} at {describe(descriptor)}"
        super().__init__(msg, descriptor=descriptor, trail=(*trail, descriptor))
        self.max_depth = max_depth


class RegistrationError(ValueError):
    """A registry binding is invalid or clashes with an existing one."""


def _rebuild(
    cls: type[TreeResolutionError], message: str, state: dict[str, Any]
) -> TreeResolutionError:
    error = cls.__new__(cls, message)
    error.args = (message,)
    error.__dict__.update(state)
    return error
