"""Capacity policy that pre-sized maps are allocated against."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from micro_maps.errors import InvalidArgumentError


DEFAULT_LOAD_FACTOR = 0.75
MIN_INITIAL_CAPACITY = 4


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class CapacityPolicy:
    """Growth policy that pre-sized maps are allocated against."""

    load_factor: float = DEFAULT_LOAD_FACTOR
    min_initial_capacity: int = MIN_INITIAL_CAPACITY

    def __post_init__(self) -> None:
        if not 0 < self.load_factor <= 1:
            raise InvalidArgumentError(
                f"Load factor must be in (0, 1], got {self.load_factor!r}."
            )
        if not _is_int(self.min_initial_capacity) or self.min_initial_capacity < 1:
            raise InvalidArgumentError(
                f"Minimum initial capacity must be a positive integer, "
                f"got {self.min_initial_capacity!r}."
            )

    @property
    def ratio(self) -> Fraction:
        """The load factor as an exact fraction."""
        return Fraction(self.load_factor)

    def initial_capacity(self, expected_size: int) -> int:
        """Capacity that holds *expected_size* entries without growing.

        Exact arithmetic, so arbitrarily large sizes work. int() truncates
        toward zero, so negative sizes fall back to the minimum.
        """
        if not _is_int(expected_size):
            raise InvalidArgumentError(
                f"Expected size must be an integer, got {type(expected_size).__name__}."
            )
        return max(int(expected_size / self.ratio) + 1, self.min_initial_capacity)

    def threshold(self, capacity: int) -> Fraction:
        return capacity * self.ratio


DEFAULT_POLICY = CapacityPolicy()
