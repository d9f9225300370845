"""Tests for RegistryLookup and KeyBuilder Protocol conformance.

Verifies that:
- User-defined classes with conformant methods satisfy the Protocols.
- Classes missing a method (or using a wrong name) do not satisfy them.
"""

from __future__ import annotations

from typing import Any

from path_tree.protocols import KeyBuilder, RegistryLookup


class _UserLookup:
    """Minimal user-defined lookup conforming to RegistryLookup."""

    def resolve_by_name(self, name: str) -> Any:
        return name

    def resolve_by_type(self, type_: type) -> Any:
        return type_()

    def inject(self, instance: Any) -> None:
        return None


class _NoInjectLookup:
    """Lookup without inject() -- should NOT satisfy RegistryLookup."""

    def resolve_by_name(self, name: str) -> Any:
        return name

    def resolve_by_type(self, type_: type) -> Any:
        return type_()


class _SelfKeyed:
    def build_key(self) -> Any:
        return "key"


class _WrongName:
    def make_key(self) -> Any:
        return "key"


# ---------------------------------------------------------------------------
# Positive conformance tests
# ---------------------------------------------------------------------------


def test_user_defined_lookup_passes_isinstance():
    assert isinstance(_UserLookup(), RegistryLookup) is True


def test_self_keyed_value_passes_isinstance():
    assert isinstance(_SelfKeyed(), KeyBuilder) is True


def test_protocol_does_not_require_inheritance():
    assert KeyBuilder not in type(_SelfKeyed()).__mro__


# ---------------------------------------------------------------------------
# Negative conformance tests
# ---------------------------------------------------------------------------


def test_lookup_without_inject_fails_isinstance():
    assert isinstance(_NoInjectLookup(), RegistryLookup) is False


def test_wrong_method_name_fails_key_builder():
    assert isinstance(_WrongName(), KeyBuilder) is False


def test_plain_object_is_not_self_keying():
    assert isinstance(object(), KeyBuilder) is False
