from __future__ import annotations

from typing import Iterable, Literal, Optional, TypeVar

from .array import ArrayOrderedSet
from .errors import InvalidArgumentError
from .interface import OrderedContainer
from .linked import LinkedOrderedSet

T = TypeVar("T")

Backing = Literal["array", "linked"]

BACKINGS: dict[str, type[OrderedContainer]] = {
    "array": ArrayOrderedSet,
    "linked": LinkedOrderedSet,
}


def make_ordered_set(
    items: Optional[Iterable[T]] = None,
    *,
    backing: Backing = "array",
    descending: bool = False,
) -> OrderedContainer[T]:
    try:
        cls = BACKINGS[backing]
    except KeyError:
        raise InvalidArgumentError(
            f"unknown backing {backing!r}, expected one of: {', '.join(sorted(BACKINGS))}"
        ) from None
    return cls(items, descending=descending)
