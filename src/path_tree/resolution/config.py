"""ResolverConfig: behaviour switches for the tree resolver.

ResolverConfig is a frozen (immutable) dataclass. None of its options change
the tree built from well-formed (finite, acyclic) metadata; they only decide
how malformed metadata and key injection are handled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for ``TreeResolver``.

    Attributes:
        detect_cycles: When True, a descriptor that reappears among its own
            ancestors raises ``CycleError`` instead of recursing forever.
            Default True.
        max_depth: Maximum tree depth (the root is depth 1). ``None`` means
            unbounded. Exceeding it raises ``DepthLimitError``.
        inject_keys: When True, a non-None key produced by a self-keying value
            is passed once through ``RegistryLookup.inject`` before use.
            Default True.
    """

    detect_cycles: bool = True
    max_depth: int | None = None
    inject_keys: bool = True

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
