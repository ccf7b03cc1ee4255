from __future__ import annotations

from collections.abc import Collection
from typing import Any, Iterable

from .errors import InvalidArgumentError


def require_element(element: Any) -> Any:
    if element is None:
        raise InvalidArgumentError("None is not a valid ordered set element")
    return element


def require_orderable(element: Any) -> Any:
    require_element(element)
    # elements without an ordering fail here, before any container is touched
    compare_natural(element, element)
    return element


def require_collection(items: Iterable[Any] | None) -> Collection[Any]:
    if items is None:
        raise InvalidArgumentError("collection argument must not be None")
    if isinstance(items, Collection):
        return items
    # one-shot iterables are materialized so membership can be tested repeatedly
    return list(items)


def compare_natural(one: Any, other: Any) -> int:
    # three-way comparison on the natural ordering:
    # -1 if one sorts before other, 1 if after, 0 otherwise
    try:
        if one < other:
            return -1
        if one > other:
            return 1
    except TypeError as exc:
        raise InvalidArgumentError(f"{one!r} and {other!r} are not mutually comparable") from exc
    return 0


def sorts_after(existing: Any, element: Any, descending: bool) -> bool:
    """True when `existing` belongs after `element` under the given orientation."""
    order = compare_natural(existing, element)
    if descending:
        return order < 0
    return order > 0


def is_member(element: Any, items: Collection[Any]) -> bool:
    try:
        return element in items
    except TypeError as exc:
        raise InvalidArgumentError(f"cannot test {element!r} for membership in {type(items).__name__}") from exc
