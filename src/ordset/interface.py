from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from .errors import UnsupportedOperationError
from .ordering import compare_natural, require_collection, require_element, require_orderable

T = TypeVar("T")


class OrderedContainer(ABC, Generic[T]):
    """Duplicate-free container that keeps its elements sorted.

    Elements are kept in ascending order unless the container is reversed,
    in which case they are kept in descending order and every later `add`
    respects that orientation. Equality of elements is `==`, ordering is the
    natural `<` / `>` of the elements. `None` is rejected everywhere.

    Implementations hold no shared state here; the concrete methods below
    are written only against the abstract operations.

    Cursors returned by `iterator()` are invalidated by any mutation of the
    container they came from. Using one after such a mutation is undefined.

    No operation is thread-safe. Callers sharing a container between
    threads must guard every call with their own lock.
    """

    __slots__ = ()

    # mutable, so unhashable
    __hash__ = None  # type: ignore[assignment]

    @abstractmethod
    def add(self, element: T) -> bool:
        """Insert `element` at its sorted position; False if an equal element is already stored."""

    @abstractmethod
    def remove(self, element: Any) -> bool:
        """Remove the element equal to `element`; False if there is none."""

    @abstractmethod
    def contains(self, element: Any) -> bool:
        ...

    @abstractmethod
    def remove_all(self, items: Iterable[Any]) -> bool:
        """Remove every stored element that is in `items`; True if the contents changed."""

    @abstractmethod
    def retain_all(self, items: Iterable[Any]) -> bool:
        """Remove every stored element that is not in `items`; True if the contents changed."""

    @abstractmethod
    def get(self, index: int) -> T:
        ...

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop all elements. The orientation is kept."""

    @abstractmethod
    def reverse(self) -> None:
        """Flip the orientation and reverse the stored order in place."""

    @abstractmethod
    def is_reversed(self) -> bool:
        ...

    @abstractmethod
    def iterator(self) -> Iterator[T]:
        ...

    def add_all(self, items: Iterable[T]) -> bool:
        elements = list(require_collection(items))
        for element in elements:
            require_orderable(element)
        # the whole batch must order against one admitted element before anything is inserted
        anchor = next(iter(self), elements[0] if elements else None)
        for element in elements:
            compare_natural(element, anchor)
        before = self.size()
        for element in elements:
            self.add(element)
        return self.size() != before

    def contains_all(self, items: Iterable[Any]) -> bool:
        items = require_collection(items)
        for element in items:
            require_element(element)
        return all(self.contains(element) for element in items)

    def is_empty(self) -> bool:
        return self.size() == 0

    def to_array(self, array: Optional[list[Any]] = None) -> list[T]:
        raise UnsupportedOperationError(
            f"{type(self).__name__} cannot be converted to a fixed-size array, iterate it instead"
        )

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        # membership and size only, orientation is ignored
        if not isinstance(other, OrderedContainer):
            return NotImplemented
        return self.size() == other.size() and self.contains_all(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, descending={self.is_reversed()})"
