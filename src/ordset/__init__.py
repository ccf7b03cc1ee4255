from .api import make_ordered_set
from .array import ArrayCursor, ArrayOrderedSet
from .errors import InvalidArgumentError, NoSuchElementError, OrderedSetError, UnsupportedOperationError
from .interface import OrderedContainer
from .linked import LinkedCursor, LinkedOrderedSet

__all__ = [
    "make_ordered_set",
    "OrderedContainer",
    "ArrayOrderedSet",
    "ArrayCursor",
    "LinkedOrderedSet",
    "LinkedCursor",
    "OrderedSetError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "UnsupportedOperationError",
]
