"""Tests for ResolverConfig defaults, validation and immutability."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from path_tree.resolution.config import ResolverConfig


class TestDefaults:
    def test_cycle_detection_on_by_default(self) -> None:
        assert ResolverConfig().detect_cycles is True

    def test_depth_unbounded_by_default(self) -> None:
        assert ResolverConfig().max_depth is None

    def test_key_injection_on_by_default(self) -> None:
        assert ResolverConfig().inject_keys is True


class TestValidation:
    @pytest.mark.parametrize("depth", [0, -1])
    def test_non_positive_max_depth_rejected(self, depth: int) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            ResolverConfig(max_depth=depth)

    def test_max_depth_one_allowed(self) -> None:
        assert ResolverConfig(max_depth=1).max_depth == 1


class TestImmutability:
    def test_frozen(self) -> None:
        config = ResolverConfig()
        with pytest.raises(FrozenInstanceError):
            config.detect_cycles = False  # type: ignore[misc]

    def test_equal_configs_compare_equal(self) -> None:
        assert ResolverConfig(max_depth=3) == ResolverConfig(max_depth=3)
