"""Mutable maps that track the backing capacity they were allocated with."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any

from micro_maps.config import DEFAULT_POLICY, CapacityPolicy
from micro_maps.errors import InvalidArgumentError


logger = logging.getLogger(__name__)


class _CapacityMixin:
    """Grows ``capacity`` whenever the entry count passes the load-factor threshold.

    Python dicts manage their own storage, so the capacity here is bookkeeping
    for the growth policy a pre-sized map is meant to stay within. Every
    insertion path funnels through ``__setitem__``.
    """

    def __init__(
        self,
        data: Any = (),
        /,
        *,
        capacity: int | None = None,
        policy: CapacityPolicy | None = None,
    ):
        self._policy = policy if policy is not None else DEFAULT_POLICY
        entries = dict(data)
        if capacity is None:
            capacity = self._policy.initial_capacity(len(entries))
        elif isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidArgumentError(f"Capacity must be a positive integer, got {capacity!r}.")
        self._initial_capacity = capacity
        self._capacity = capacity
        super().__init__()
        self.update(entries)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def initial_capacity(self) -> int:
        return self._initial_capacity

    @property
    def policy(self) -> CapacityPolicy:
        return self._policy

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(key, value)  # type: ignore[misc]
        self._ensure_capacity()

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key not in self:  # type: ignore[operator]
            self[key] = default
        return self[key]  # type: ignore[index]

    def __ior__(self, other: Any) -> Any:
        self.update(other)
        return self

    def copy(self) -> Any:
        duplicate = type(self)(capacity=self._capacity, policy=self._policy)
        duplicate.update(self)
        return duplicate

    def __reduce__(self) -> tuple[Any, ...]:
        # Entries go through the constructor so that __setitem__ never runs
        # before the capacity attributes exist.
        return type(self), (list(self.items()),), dict(self.__dict__)  # type: ignore[attr-defined]

    def _ensure_capacity(self) -> None:
        size = len(self)  # type: ignore[arg-type]
        if size <= self._policy.threshold(self._capacity):
            return

        previous = self._capacity
        while size > self._policy.threshold(self._capacity):
            self._capacity *= 2
        logger.debug(
            "%s grew from capacity %d to %d at %d entries",
            type(self).__name__,
            previous,
            self._capacity,
            size,
        )


class SizedDict(_CapacityMixin, dict):
    """Unordered map with a declared backing capacity."""


class SizedOrderedDict(_CapacityMixin, OrderedDict):
    """Insertion-ordered map with a declared backing capacity."""
