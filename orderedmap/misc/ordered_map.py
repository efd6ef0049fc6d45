import operator
import warnings
from abc import abstractmethod
from collections.abc import (
    Callable,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
)
from itertools import islice
from numbers import Integral, Real
from typing import Any, Generic, TypeVar, overload

import numpy as np

from orderedmap.configdefaults import config
from orderedmap.exceptions import FractionalIndexWarning
from orderedmap.utils import NOT_GIVEN, as_predicate, as_rng


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Predicate = Callable[..., Any]
RNGLike = np.random.Generator | int | None


class _OrderedMapQueries(Mapping[K, V], Generic[K, V]):
    """Array-like queries over an insertion ordered ``dict``.

    Subclasses store their entries in ``self._data`` and decide how an empty
    container of their own kind is created in `_make_empty`.
    """

    __slots__ = ()
    _data: dict[K, V]

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        yield from self._data

    def __reversed__(self) -> Iterator[K]:
        yield from reversed(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data.items())!r})"

    @abstractmethod
    def _make_empty(self) -> "OrderedMap[K, V]":
        """Return a new, empty, mutable container of this kind."""

    def _entries(self) -> tuple[tuple[K, V], ...]:
        # Scans run over a snapshot so predicates may change the container
        return tuple(self._data.items())

    def has_any(self, *keys: K) -> bool:
        """Return whether at least one of `keys` is present."""
        return any(key in self._data for key in keys)

    def at(self, index: int | float) -> V | None:
        """Return the value at position `index` in iteration order.

        Negative indices count back from the last entry. Fractional indices
        are truncated toward zero. An index outside the container returns
        ``None`` instead of raising, while a non-numeric index raises
        ``TypeError``.

        Notes
        -----
        Entries are not randomly addressable, so this walks the values from
        the start and costs O(n) in the worst case.

        """
        if isinstance(index, Real) and not isinstance(index, Integral):
            int_index = int(index)
        else:
            # Raises TypeError for non-numeric indices such as strings
            int_index = operator.index(index)
        if int_index != index and config.warn__fractional_index:
            warnings.warn(
                f"Index {index} truncated to {int_index}",
                FractionalIndexWarning,
                stacklevel=2,
            )
        size = len(self._data)
        if int_index < 0:
            int_index += size
        if not 0 <= int_index < size:
            return None
        return next(islice(self._data.values(), int_index, None))

    @overload
    def random(self, amount: None = None, rng: RNGLike = None) -> V | None: ...

    @overload
    def random(self, amount: int, rng: RNGLike = None) -> list[V]: ...

    def random(self, amount=None, rng=None):
        """Draw value(s) uniformly at random, without replacement.

        Parameters
        ----------
        amount
            Number of distinct values to draw. When omitted a single value (or
            ``None`` for an empty container) is returned instead of a list.
            It is clipped to the size of the container, and non-positive
            amounts return an empty list.
        rng
            A numpy ``Generator`` or a seed. Defaults to a shared generator
            seeded from ``config.seed``.

        """
        rng = as_rng(rng)
        size = len(self._data)
        if amount is None:
            if not size:
                return None
            return self.at(int(rng.integers(size)))

        amount = min(size, int(amount))
        if amount <= 0:
            return []

        # Partial Fisher-Yates: the first `amount` slots end up a uniform sample
        values = list(self._data.values())
        for i in range(amount):
            j = i + int(rng.integers(size - i))
            values[i], values[j] = values[j], values[i]
        return values[:amount]

    def find(self, fn: Predicate, this_arg: Any = NOT_GIVEN) -> V | None:
        """Return the first value for which ``fn(value, key, self)`` is truthy.

        If `this_arg` is given, `fn` is called with it prepended to the
        arguments, as if `fn` were a method of `this_arg`.
        """
        fn = as_predicate(fn, this_arg)
        for key, value in self._entries():
            if fn(value, key, self):
                return value
        return None

    def find_key(self, fn: Predicate, this_arg: Any = NOT_GIVEN) -> K | None:
        """Like `find`, but return the matching key."""
        fn = as_predicate(fn, this_arg)
        for key, value in self._entries():
            if fn(value, key, self):
                return key
        return None

    def find_last(self, fn: Predicate, this_arg: Any = NOT_GIVEN) -> V | None:
        """Like `find`, scanning from the last entry backwards."""
        fn = as_predicate(fn, this_arg)
        for key, value in reversed(self._entries()):
            if fn(value, key, self):
                return value
        return None

    def find_last_key(self, fn: Predicate, this_arg: Any = NOT_GIVEN) -> K | None:
        """Like `find_key`, scanning from the last entry backwards."""
        fn = as_predicate(fn, this_arg)
        for key, value in reversed(self._entries()):
            if fn(value, key, self):
                return key
        return None

    def filter(self, fn: Predicate, this_arg: Any = NOT_GIVEN):
        """Return a new container with the entries for which `fn` is truthy.

        The result is created with `_make_empty`, so it is of the same kind as
        this container, and keeps the relative order of the entries. This
        container is left untouched.
        """
        fn = as_predicate(fn, this_arg)
        results = self._make_empty()
        for key, value in self._entries():
            if fn(value, key, self):
                results[key] = value
        return results


class OrderedMap(_OrderedMapQueries[K, V], MutableMapping[K, V]):
    """Insertion ordered mapping with array-like helpers.

    Uses a plain dictionary to store the entries, relying on the fact that
    Python dicts maintain insertion order. Overwriting the value of an
    existing key keeps its position.

    Subclasses whose constructor takes arguments should override
    `_make_empty`, which `filter` and `copy` use to create their result.
    """

    __slots__ = ("_data",)

    def __init__(
        self, items: Mapping[K, V] | Iterable[tuple[K, V]] | None = None
    ) -> None:
        self._data = {}
        if items is not None:
            self.update(items)

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        del self._data[key]

    def clear(self) -> None:
        self._data.clear()

    def _make_empty(self) -> "OrderedMap[K, V]":
        return type(self)()

    def copy(self) -> "OrderedMap[K, V]":
        new_map = self._make_empty()
        new_map.update(self._data)
        return new_map

    def readonly(self) -> "ReadonlyOrderedMap[K, V]":
        return ReadonlyOrderedMap(self)

    def reverse(self) -> "OrderedMap[K, V]":
        """Reverse the iteration order in place and return this map."""
        # Entries were validated on insertion, so reorder the shared dict in
        # place instead of going through __setitem__ again
        entries = list(reversed(self._data.items()))
        self._data.clear()
        self._data.update(entries)
        return self


class ReadonlyOrderedMap(_OrderedMapQueries[K, V]):
    """Read-only view of an `OrderedMap`.

    The view shares its storage with the wrapped map, so later changes made
    through the map show up here.
    """

    __slots__ = ("_data", "_source")

    def __init__(self, source: OrderedMap[K, V]) -> None:
        if not isinstance(source, OrderedMap):
            raise TypeError(
                f"ReadonlyOrderedMap wraps an OrderedMap, got {type(source).__name__}"
            )
        self._source = source
        self._data = source._data

    def _make_empty(self) -> OrderedMap[K, V]:
        return self._source._make_empty()

    def filter(
        self, fn: Predicate, this_arg: Any = NOT_GIVEN
    ) -> "ReadonlyOrderedMap[K, V]":
        return type(self)(super().filter(fn, this_arg))
