"""Tests for KeyResolver precedence.

Verifies:
- build_key() wins over every metadata field, and its key is injected once
- a None from build_key() is final (no metadata fallback, no injection)
- a non-blank literal key wins over key_type and key_name
- key_type wins over key_name; key_name is used when key_type is absent
- blank literals/names are ignored; no metadata means a None key
"""

from __future__ import annotations

from typing import Any

import pytest

from path_tree.errors import AmbiguousBindingError, NotFoundError
from path_tree.resolution.config import ResolverConfig
from path_tree.resolution.keys import KeyResolver
from path_tree.tree.metadata import NodeMeta


class _FakeLookup:
    """Minimal RegistryLookup recording lookups and injections."""

    def __init__(
        self,
        by_name: dict[str, Any] | None = None,
        by_type: dict[type, Any] | None = None,
    ) -> None:
        self.by_name = by_name or {}
        self.by_type = by_type or {}
        self.injected: list[Any] = []
        self.calls: list[Any] = []

    def resolve_by_name(self, name: str) -> Any:
        self.calls.append(name)
        if name not in self.by_name:
            raise NotFoundError(name)
        return self.by_name[name]

    def resolve_by_type(self, type_: type) -> Any:
        self.calls.append(type_)
        if type_ not in self.by_type:
            raise NotFoundError(type_)
        return self.by_type[type_]

    def inject(self, instance: Any) -> None:
        self.injected.append(instance)


class UserId:
    pass


class _SelfKeyed:
    def __init__(self, key: Any) -> None:
        self._key = key

    def build_key(self) -> Any:
        return self._key


class _Value:
    pass


class _NonCallableBuildKey:
    build_key = None


@pytest.fixture
def resolver() -> KeyResolver:
    return KeyResolver()


# ---------------------------------------------------------------------------
# Self-keying
# ---------------------------------------------------------------------------


class TestSelfKeying:
    def test_build_key_wins_over_metadata(self, resolver: KeyResolver) -> None:
        lookup = _FakeLookup(by_type={UserId: UserId()})
        key_obj = object()
        meta = NodeMeta(key="literal", key_type=UserId)

        key = resolver.resolve(_SelfKeyed(key_obj), meta, lookup)

        assert key is key_obj
        assert lookup.calls == []

    def test_built_key_is_injected_once(self, resolver: KeyResolver) -> None:
        lookup = _FakeLookup()
        key_obj = object()
        resolver.resolve(_SelfKeyed(key_obj), None, lookup)
        assert lookup.injected == [key_obj]

    def test_none_from_build_key_is_final(self, resolver: KeyResolver) -> None:
        lookup = _FakeLookup()
        key = resolver.resolve(_SelfKeyed(None), NodeMeta(key="literal"), lookup)
        assert key is None
        assert lookup.injected == []

    def test_injection_can_be_disabled(self) -> None:
        lookup = _FakeLookup()
        resolver = KeyResolver(ResolverConfig(inject_keys=False))
        key = resolver.resolve(_SelfKeyed("k"), None, lookup)
        assert key == "k"
        assert lookup.injected == []

    def test_non_callable_build_key_uses_metadata(
        self, resolver: KeyResolver
    ) -> None:
        lookup = _FakeLookup()
        key = resolver.resolve(
            _NonCallableBuildKey(), NodeMeta(key="literal"), lookup
        )
        assert key == "literal"
        assert lookup.injected == []


# ---------------------------------------------------------------------------
# Metadata precedence
# ---------------------------------------------------------------------------


class TestMetadataPrecedence:
    def test_literal_key_wins(self, resolver: KeyResolver) -> None:
        lookup = _FakeLookup(by_name={"label": "from-name"}, by_type={UserId: 1})
        meta = NodeMeta(key="literal", key_type=UserId, key_name="label")
        assert resolver.resolve(_Value(), meta, lookup) == "literal"
        assert lookup.calls == []

    def test_literal_key_kept_verbatim(self, resolver: KeyResolver) -> None:
        meta = NodeMeta(key=" padded ")
        assert resolver.resolve(_Value(), meta, _FakeLookup()) == " padded "

    def test_key_type_wins_over_key_name(self, resolver: KeyResolver) -> None:
        user = UserId()
        lookup = _FakeLookup(by_name={"label": "from-name"}, by_type={UserId: user})
        meta = NodeMeta(key_type=UserId, key_name="label")

        assert resolver.resolve(_Value(), meta, lookup) is user
        assert lookup.calls == [UserId]

    def test_blank_literal_falls_through_to_key_type(
        self, resolver: KeyResolver
    ) -> None:
        user = UserId()
        lookup = _FakeLookup(by_type={UserId: user})
        meta = NodeMeta(key="   ", key_type=UserId)
        assert resolver.resolve(_Value(), meta, lookup) is user

    def test_key_name_used_without_key_type(self, resolver: KeyResolver) -> None:
        lookup = _FakeLookup(by_name={"label": "from-name"})
        meta = NodeMeta(key_name="label")
        assert resolver.resolve(_Value(), meta, lookup) == "from-name"

    def test_blank_key_name_means_none(self, resolver: KeyResolver) -> None:
        lookup = _FakeLookup()
        assert resolver.resolve(_Value(), NodeMeta(key_name="  "), lookup) is None
        assert lookup.calls == []

    def test_empty_metadata_means_none(self, resolver: KeyResolver) -> None:
        assert resolver.resolve(_Value(), NodeMeta(), _FakeLookup()) is None

    def test_no_metadata_means_none(self, resolver: KeyResolver) -> None:
        assert resolver.resolve(_Value(), None, _FakeLookup()) is None

    def test_looked_up_keys_are_not_injected(self, resolver: KeyResolver) -> None:
        lookup = _FakeLookup(by_type={UserId: UserId()})
        resolver.resolve(_Value(), NodeMeta(key_type=UserId), lookup)
        assert lookup.injected == []


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestKeyLookupFailures:
    def test_missing_key_type_propagates(self, resolver: KeyResolver) -> None:
        with pytest.raises(NotFoundError):
            resolver.resolve(_Value(), NodeMeta(key_type=UserId), _FakeLookup())

    def test_missing_key_name_propagates(self, resolver: KeyResolver) -> None:
        with pytest.raises(NotFoundError):
            resolver.resolve(_Value(), NodeMeta(key_name="label"), _FakeLookup())

    def test_ambiguous_key_propagates(self, resolver: KeyResolver) -> None:
        class _Ambiguous(_FakeLookup):
            def resolve_by_type(self, type_: type) -> Any:
                raise AmbiguousBindingError(type_, 2)

        with pytest.raises(AmbiguousBindingError):
            resolver.resolve(_Value(), NodeMeta(key_type=UserId), _Ambiguous())
