"""Read-only snapshot maps."""

from __future__ import annotations

import logging
from collections.abc import ItemsView, Iterable, Iterator, KeysView, Mapping, ValuesView
from typing import Any, NoReturn, TypeVar

from micro_maps.errors import UnsupportedOperationError


K = TypeVar("K")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def _reject(owner: object, operation: str) -> NoReturn:
    logger.debug("Rejected %s on %s", operation, type(owner).__name__)
    raise UnsupportedOperationError(f"{type(owner).__name__} does not support {operation}().")


class _ReadOnlyView:
    """Mutators a caller might reach for on a view; all of them refuse."""

    def remove(self, *args: Any) -> NoReturn:
        _reject(self, "remove")

    def discard(self, *args: Any) -> NoReturn:
        _reject(self, "discard")

    def pop(self, *args: Any) -> NoReturn:
        _reject(self, "pop")

    def clear(self) -> NoReturn:
        _reject(self, "clear")


class ReadOnlyKeysView(_ReadOnlyView, KeysView):
    pass


class ReadOnlyValuesView(_ReadOnlyView, ValuesView):
    pass


class ReadOnlyItemsView(_ReadOnlyView, ItemsView):
    pass


class ImmutableMap(Mapping[K, V]):
    """Mapping holding a private copy of its entries that cannot be changed.

    Reads behave like a dict; every mutating method raises
    UnsupportedOperationError.
    """

    __slots__ = ("_data", "_hash")

    def __init__(self, data: Mapping[K, V] | Iterable[tuple[K, V]] = ()) -> None:
        self._data: dict[K, V] = dict(data)
        self._hash: int | None = None

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._data.items()))
        return self._hash

    def keys(self) -> ReadOnlyKeysView[K]:
        return ReadOnlyKeysView(self)

    def values(self) -> ReadOnlyValuesView[V]:
        return ReadOnlyValuesView(self)

    def items(self) -> ReadOnlyItemsView[K, V]:
        return ReadOnlyItemsView(self)

    def to_dict(self) -> dict[K, V]:
        """Return a mutable copy of the entries."""
        return dict(self._data)

    # Mutators. Mapping defines none of these, they exist so that every
    # attempt fails the same way.

    def __setitem__(self, key: K, value: V) -> NoReturn:
        _reject(self, "__setitem__")

    def __delitem__(self, key: K) -> NoReturn:
        _reject(self, "__delitem__")

    def __ior__(self, other: Any) -> NoReturn:
        _reject(self, "__ior__")

    def update(self, *args: Any, **kwargs: Any) -> NoReturn:
        _reject(self, "update")

    def setdefault(self, key: K, default: Any = None) -> NoReturn:
        _reject(self, "setdefault")

    def pop(self, key: K, *args: Any) -> NoReturn:
        _reject(self, "pop")

    def popitem(self) -> NoReturn:
        _reject(self, "popitem")

    def clear(self) -> NoReturn:
        _reject(self, "clear")


EMPTY_MAP: ImmutableMap[Any, Any] = ImmutableMap()
