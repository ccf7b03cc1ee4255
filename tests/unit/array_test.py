from pytest import raises

from ordset import ArrayOrderedSet, InvalidArgumentError
from ordset.defaults import DEFAULT_CAPACITY


def test_default_capacity():
    s = ArrayOrderedSet()
    assert s.capacity() == DEFAULT_CAPACITY
    assert s.size() == 0


def test_capacity_from_sized_source():
    s = ArrayOrderedSet([3, 1, 3, 2])
    assert s.capacity() == 4
    assert list(s) == [1, 2, 3]


def test_explicit_capacity():
    s = ArrayOrderedSet(capacity=3)
    assert s.capacity() == 3


def test_negative_capacity():
    with raises(InvalidArgumentError):
        ArrayOrderedSet(capacity=-1)


def test_growth_doubles():
    s = ArrayOrderedSet(capacity=2)
    s.add(1)
    s.add(2)
    assert s.capacity() == 2
    s.add(3)
    assert s.capacity() == 4
    for v in range(4, 10):
        s.add(v)
    assert s.capacity() == 16
    assert list(s) == list(range(1, 10))


def test_growth_from_zero():
    s = ArrayOrderedSet(capacity=0)
    s.add(5)
    assert s.capacity() == 1
    s.add(4)
    assert s.capacity() == 2
    assert list(s) == [4, 5]


def test_growth_preserves_order_when_inserting_in_front():
    s = ArrayOrderedSet([2, 3], descending=True)
    assert s.capacity() == 2
    s.add(4)
    assert list(s) == [4, 3, 2]
    assert s.capacity() == 4


def test_duplicate_does_not_grow():
    s = ArrayOrderedSet(capacity=1)
    s.add(1)
    s.add(1)
    assert s.capacity() == 1


def test_ensure_capacity():
    s = ArrayOrderedSet(capacity=3)
    s.ensure_capacity(2)
    assert s.capacity() == 3
    s.ensure_capacity(13)
    assert s.capacity() == 24


def test_clear_keeps_capacity():
    s = ArrayOrderedSet(range(20))
    capacity = s.capacity()
    s.clear()
    assert s.capacity() == capacity
    assert s.size() == 0


def test_capacity_never_shrinks():
    s = ArrayOrderedSet(range(5), capacity=1)
    capacity = s.capacity()
    s.remove_all(range(5))
    assert s.is_empty()
    assert s.capacity() == capacity


def test_removed_slots_are_released():
    s = ArrayOrderedSet([1, 2, 3])
    s.remove(1)
    assert s._data[s.size():] == [None] * (s.capacity() - s.size())


def test_retain_all_rescans_shifted_slot():
    s = ArrayOrderedSet([1, 2, 3, 4, 5, 6])
    assert s.retain_all([6])
    assert list(s) == [6]


def test_remove_all_rescans_shifted_slot():
    s = ArrayOrderedSet([1, 2, 3, 4, 5, 6])
    assert s.remove_all([1, 2, 3, 5])
    assert list(s) == [4, 6]


def test_reverse_swaps_in_place():
    s = ArrayOrderedSet([1, 2, 3, 4, 5], capacity=8)
    data = s._data
    s.reverse()
    assert s._data is data
    assert data[:5] == [5, 4, 3, 2, 1]
    assert s.capacity() == 8
