"""Factory helpers for pre-sized, fixed, sorted and immutable maps."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from sortedcontainers import SortedDict

from micro_maps.config import DEFAULT_POLICY, CapacityPolicy
from micro_maps.errors import InvalidArgumentError, NullArgumentError
from micro_maps.immutable import EMPTY_MAP, ImmutableMap
from micro_maps.sized import SizedDict, SizedOrderedDict


K = TypeVar("K")
V = TypeVar("V")


def _resolve(policy: CapacityPolicy | None) -> CapacityPolicy:
    return policy if policy is not None else DEFAULT_POLICY


def capacity_for(expected_size: int, *, policy: CapacityPolicy | None = None) -> int:
    """Return the backing capacity that holds *expected_size* entries without growing."""
    return _resolve(policy).initial_capacity(expected_size)


def pairs(*items: Any) -> list[tuple[Any, Any]]:
    """Split an alternating key, value, key, value sequence into tuples.

    Raises InvalidArgumentError when a key is left without a value.
    """
    if len(items) % 2 != 0:
        raise InvalidArgumentError(
            f"Expected alternating keys and values, got {len(items)} items; "
            f"key {items[-1]!r} has no value."
        )
    return list(zip(items[0::2], items[1::2]))


def sized_unordered_map(
    expected_size: int, *, policy: CapacityPolicy | None = None
) -> SizedDict:
    """Return an empty map that holds *expected_size* entries without resizing."""
    policy = _resolve(policy)
    return SizedDict(capacity=policy.initial_capacity(expected_size), policy=policy)


def sized_ordered_map(
    expected_size: int, *, policy: CapacityPolicy | None = None
) -> SizedOrderedDict:
    """Like sized_unordered_map, but iteration follows insertion order."""
    policy = _resolve(policy)
    return SizedOrderedDict(capacity=policy.initial_capacity(expected_size), policy=policy)


def to_immutable_map(original: Mapping[K, V] | None) -> ImmutableMap[K, V]:
    """Return a read-only snapshot of *original*.

    None and empty maps share EMPTY_MAP. Changes made to *original* afterwards
    are not visible through the result.
    """
    if original is None or len(original) == 0:
        return EMPTY_MAP
    if isinstance(original, ImmutableMap):
        return original
    return ImmutableMap(original)


def fixed_map(
    key1: Any, value1: Any, *others: Any, policy: CapacityPolicy | None = None
) -> SizedDict:
    """Build an unordered map from ``key1, value1`` and the pairs in *others*.

    Later pairs overwrite earlier ones with the same key.
    """
    extra = pairs(*others)
    result = sized_unordered_map(len(extra) + 1, policy=policy)
    result[key1] = value1
    for key, value in extra:
        result[key] = value
    return result


def extend(
    original: Mapping[Any, Any] | None,
    key1: Any,
    value1: Any,
    *others: Any,
    policy: CapacityPolicy | None = None,
) -> SizedDict:
    """Return a new map with the entries of *original* plus the given pairs.

    The given pairs overwrite entries of *original*, which is left untouched.
    """
    if original is None:
        raise NullArgumentError("Cannot extend None; pass an empty mapping instead.")
    extra = pairs(*others)

    result = sized_unordered_map(len(original) + len(extra) + 1, policy=policy)
    result.update(original)
    result[key1] = value1
    for key, value in extra:
        result[key] = value
    return result


def fixed_sorted_map(key1: Any, value1: Any, *others: Any) -> SortedDict:
    """Build a map ordered by its keys from ``key1, value1`` and the pairs in *others*."""
    extra = pairs(*others)
    result = SortedDict()
    result[key1] = value1
    for key, value in extra:
        result[key] = value
    return result
