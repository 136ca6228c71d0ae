"""Helpers for building pre-sized, fixed, sorted and immutable maps."""

from micro_maps.config import (
    DEFAULT_LOAD_FACTOR,
    DEFAULT_POLICY,
    MIN_INITIAL_CAPACITY,
    CapacityPolicy,
)
from micro_maps.errors import (
    InvalidArgumentError,
    MapsError,
    NullArgumentError,
    UnsupportedOperationError,
)
from micro_maps.factory import (
    capacity_for,
    extend,
    fixed_map,
    fixed_sorted_map,
    pairs,
    sized_ordered_map,
    sized_unordered_map,
    to_immutable_map,
)
from micro_maps.immutable import EMPTY_MAP, ImmutableMap
from micro_maps.sized import SizedDict, SizedOrderedDict


__all__ = [
    "DEFAULT_LOAD_FACTOR",
    "DEFAULT_POLICY",
    "EMPTY_MAP",
    "MIN_INITIAL_CAPACITY",
    "CapacityPolicy",
    "ImmutableMap",
    "InvalidArgumentError",
    "MapsError",
    "NullArgumentError",
    "SizedDict",
    "SizedOrderedDict",
    "UnsupportedOperationError",
    "capacity_for",
    "extend",
    "fixed_map",
    "fixed_sorted_map",
    "pairs",
    "sized_ordered_map",
    "sized_unordered_map",
    "to_immutable_map",
]
