from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from .errors import NoSuchElementError
from .interface import OrderedContainer
from .ordering import is_member, require_collection, require_element, require_orderable, sorts_after

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class Node(Generic[T]):
    value: T
    next: Optional["Node[T]"] = None


class LinkedOrderedSet(OrderedContainer[T]):
    """Ordered set stored as a chain of singly-linked nodes.

    The set owns `head`, every node owns its successor and no node points
    back. Walking the chain is the only way in, so insert, remove and
    indexed access are O(n); operations at the head are O(1).
    """

    __slots__ = ("_head", "_count", "_descending")

    def __init__(self, items: Optional[Iterable[T]] = None, *, descending: bool = False) -> None:
        self._head: Optional[Node[T]] = None
        self._count = 0
        self._descending = descending
        if items is not None:
            self.add_all(items)

    def size(self) -> int:
        return self._count

    def is_reversed(self) -> bool:
        return self._descending

    def get(self, index: int) -> T:
        if not 0 <= index < self._count:
            raise NoSuchElementError(f"no element at index {index} in a set of size {self._count}")
        current = self._head
        for _ in range(index):
            current = current.next  # type: ignore[union-attr]
        return current.value  # type: ignore[union-attr]

    def contains(self, element: Any) -> bool:
        require_element(element)
        for value in self:
            if value == element:
                return True
        return False

    def add(self, element: T) -> bool:
        require_orderable(element)
        if self.contains(element):
            return False
        node = Node(element)
        head = self._head
        if head is None or sorts_after(head.value, element, self._descending):
            node.next = head
            self._head = node
        else:
            # stop at the last node that stays in front of the new one
            current = head
            while current.next is not None and not sorts_after(current.next.value, element, self._descending):
                current = current.next
            node.next = current.next
            current.next = node
        self._count += 1
        return True

    def remove(self, element: Any) -> bool:
        require_element(element)
        previous = None
        current = self._head
        while current is not None and current.value != element:
            previous, current = current, current.next
        if current is None:
            return False
        self._unlink(previous, current)
        return True

    def remove_all(self, items: Iterable[Any]) -> bool:
        return self._filter(require_collection(items), keep=False)

    def retain_all(self, items: Iterable[Any]) -> bool:
        return self._filter(require_collection(items), keep=True)

    def clear(self) -> None:
        logger.debug("cleared %d elements", self._count)
        self._head = None
        self._count = 0

    def reverse(self) -> None:
        previous = None
        current = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous, current = current, following
        self._head = previous
        self._descending = not self._descending
        logger.debug("reversed %d nodes, descending=%s", self._count, self._descending)

    def iterator(self) -> LinkedCursor[T]:
        return LinkedCursor(self._head)

    def _unlink(self, previous: Optional[Node[T]], node: Node[T]) -> Optional[Node[T]]:
        following = node.next
        if previous is None:
            self._head = following
        else:
            previous.next = following
        node.next = None
        self._count -= 1
        return following

    def _filter(self, items, keep: bool) -> bool:
        drops = iter([is_member(value, items) != keep for value in self])
        before = self._count
        previous = None
        current = self._head
        while current is not None:
            if next(drops):
                current = self._unlink(previous, current)
            else:
                previous, current = current, current.next
        return self._count != before


class LinkedCursor(Iterator[T]):
    """Forward-only, single-pass cursor over a LinkedOrderedSet.

    Holds a reference to the next node. The source set must not be
    mutated while the cursor is in use.
    """

    __slots__ = ("_node",)

    def __init__(self, head: Optional[Node[T]]) -> None:
        self._node = head

    def has_next(self) -> bool:
        return self._node is not None

    def __next__(self) -> T:
        node = self._node
        if node is None:
            raise StopIteration
        self._node = node.next
        return node.value

    def __iter__(self) -> LinkedCursor[T]:
        return self
