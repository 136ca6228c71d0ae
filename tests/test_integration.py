"""Integration tests combining the map factories."""

from __future__ import annotations

import pytest

from micro_maps import (
    UnsupportedOperationError,
    extend,
    fixed_map,
    fixed_sorted_map,
    sized_ordered_map,
    to_immutable_map,
)


class TestIntegration:
    """Integration tests for building, extending and freezing maps."""

    def test_build_extend_freeze(self) -> None:
        """Test a defaults map extended with overrides and then frozen."""
        defaults = fixed_map("timeout", 30, "retries", 3, "verbose", False)
        overrides = extend(defaults, "verbose", True, "region", "eu")

        frozen = to_immutable_map(overrides)

        # Defaults untouched, overrides applied
        assert defaults == {"timeout": 30, "retries": 3, "verbose": False}
        assert frozen == {"timeout": 30, "retries": 3, "verbose": True, "region": "eu"}

        # Later edits to the working copy do not leak into the frozen map
        overrides["timeout"] = 60
        assert frozen["timeout"] == 30

        with pytest.raises(UnsupportedOperationError):
            frozen["timeout"] = 60  # type: ignore[index]

    def test_ordered_then_sorted_views(self) -> None:
        """Test collecting entries in order and re-ordering them by key."""
        collected = sized_ordered_map(3)
        for key, value in (("zulu", 1), ("alpha", 2), ("mike", 3)):
            collected[key] = value

        flat = [item for pair in collected.items() for item in pair]
        by_key = fixed_sorted_map(*flat)

        assert list(collected) == ["zulu", "alpha", "mike"]
        assert list(by_key) == ["alpha", "mike", "zulu"]
        assert dict(by_key) == dict(collected)
