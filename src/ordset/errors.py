from __future__ import annotations


class OrderedSetError(Exception):
    """Base class for every error raised by ordset."""


class InvalidArgumentError(OrderedSetError, ValueError):
    pass


class NoSuchElementError(OrderedSetError, IndexError):
    pass


class UnsupportedOperationError(OrderedSetError, NotImplementedError):
    pass
