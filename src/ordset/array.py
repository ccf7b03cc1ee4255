from __future__ import annotations

import logging
from collections.abc import Sized
from typing import Any, Iterable, Iterator, Optional, TypeVar

from .defaults import DEFAULT_CAPACITY, GROWTH_FACTOR
from .errors import InvalidArgumentError, NoSuchElementError
from .interface import OrderedContainer
from .ordering import is_member, require_collection, require_element, require_orderable, sorts_after

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ArrayOrderedSet(OrderedContainer[T]):
    """Ordered set stored in a contiguous buffer.

    The buffer is a list of `capacity` slots of which the first `size()` are
    in use. Inserting and removing shift the tail of the buffer, O(n);
    indexed access is O(1). The buffer grows by `GROWTH_FACTOR` when full
    and never shrinks, not even on `clear()`.
    """

    __slots__ = ("_data", "_count", "_descending")

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        *,
        descending: bool = False,
        capacity: Optional[int] = None,
    ) -> None:
        if capacity is None:
            capacity = len(items) if isinstance(items, Sized) else DEFAULT_CAPACITY
        if capacity < 0:
            raise InvalidArgumentError(f"capacity must be non-negative, got {capacity}")
        self._data: list[Optional[T]] = [None] * capacity
        self._count = 0
        self._descending = descending
        if items is not None:
            self.add_all(items)

    def capacity(self) -> int:
        return len(self._data)

    def ensure_capacity(self, minimum: int) -> None:
        capacity = len(self._data)
        if minimum <= capacity:
            return
        new_capacity = max(capacity * GROWTH_FACTOR, 1)
        while new_capacity < minimum:
            new_capacity *= GROWTH_FACTOR
        logger.debug("growing buffer from %d to %d slots", capacity, new_capacity)
        self._data.extend([None] * (new_capacity - capacity))

    def size(self) -> int:
        return self._count

    def is_reversed(self) -> bool:
        return self._descending

    def get(self, index: int) -> T:
        if not 0 <= index < self._count:
            raise NoSuchElementError(f"no element at index {index} in a set of size {self._count}")
        return self._data[index]  # type: ignore[return-value]

    def contains(self, element: Any) -> bool:
        return self._index_of(element) >= 0

    def add(self, element: T) -> bool:
        require_orderable(element)
        if self.contains(element):
            return False
        index = self._insertion_index(element)
        self.ensure_capacity(self._count + 1)
        data = self._data
        for i in range(self._count, index, -1):
            data[i] = data[i - 1]
        data[index] = element
        self._count += 1
        return True

    def remove(self, element: Any) -> bool:
        index = self._index_of(element)
        if index < 0:
            return False
        self._delete_at(index)
        return True

    def remove_all(self, items: Iterable[Any]) -> bool:
        return self._filter(require_collection(items), keep=False)

    def retain_all(self, items: Iterable[Any]) -> bool:
        return self._filter(require_collection(items), keep=True)

    def clear(self) -> None:
        data = self._data
        for i in range(self._count):
            data[i] = None
        logger.debug("cleared %d elements, capacity stays %d", self._count, len(data))
        self._count = 0

    def reverse(self) -> None:
        data = self._data
        last = self._count - 1
        for i in range(self._count // 2):
            data[i], data[last - i] = data[last - i], data[i]
        self._descending = not self._descending
        logger.debug("reversed %d elements, descending=%s", self._count, self._descending)

    def iterator(self) -> ArrayCursor[T]:
        return ArrayCursor(self)

    def _index_of(self, element: Any) -> int:
        require_element(element)
        data = self._data
        for i in range(self._count):
            if data[i] == element:
                return i
        return -1

    def _insertion_index(self, element: T) -> int:
        # first slot whose element belongs after the new one, else append
        data = self._data
        for i in range(self._count):
            if sorts_after(data[i], element, self._descending):
                return i
        return self._count

    def _delete_at(self, index: int) -> None:
        data = self._data
        for i in range(index, self._count - 1):
            data[i] = data[i + 1]
        self._count -= 1
        data[self._count] = None

    def _filter(self, items, keep: bool) -> bool:
        # decide for every element first so a failing membership test changes nothing
        drops = iter([is_member(value, items) != keep for value in self])
        before = self._count
        i = 0
        while i < self._count:
            if next(drops):
                # the next element shifts into slot i, look at it again
                self._delete_at(i)
            else:
                i += 1
        return self._count != before


class ArrayCursor(Iterator[T]):
    """Forward-only, single-pass cursor over an ArrayOrderedSet.

    Holds the index of the next element. The source set must not be
    mutated while the cursor is in use.
    """

    __slots__ = ("_owner", "_index")

    def __init__(self, owner: ArrayOrderedSet[T]) -> None:
        self._owner = owner
        self._index = 0

    def has_next(self) -> bool:
        return self._index < self._owner._count

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        value = self._owner._data[self._index]
        self._index += 1
        return value  # type: ignore[return-value]

    def __iter__(self) -> ArrayCursor[T]:
        return self
