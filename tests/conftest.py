"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from micro_maps import CapacityPolicy


def build_source(size: int) -> dict[str, str]:
    return {f"key-{i}": f"value-{i}" for i in range(size)}


@pytest.fixture
def policy() -> CapacityPolicy:
    """Provide the default capacity policy."""
    return CapacityPolicy()


@pytest.fixture
def source_map() -> dict[str, str]:
    """Provide a fresh 100-entry map for each test."""
    return build_source(100)


@pytest.fixture(params=[0, 1, 100], ids=["empty", "single", "general"])
def sized_source(request: pytest.FixtureRequest) -> dict[str, str]:
    """Provide source maps covering each immutable representation."""
    return build_source(request.param)
