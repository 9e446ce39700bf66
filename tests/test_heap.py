import pytest

from adtkit.errors import IllegalStateError
from adtkit.heap import HeapPriorityQueue


def test_minimum_after_two_inserts():
    hp = HeapPriorityQueue(5)
    hp.insert(1)
    hp.insert(2)
    assert hp.minimum() == 1


def test_delete_minimum():
    hp = HeapPriorityQueue(5)
    for value in (1, 2, 3, 2):
        hp.insert(value)
    assert hp.minimum() == 1
    hp.delete_minimum()
    assert hp.minimum() == 2


def test_draining_yields_sorted_values():
    values = [7, 3, 9, -2, 3, 0, 11, 5]
    hp = HeapPriorityQueue(len(values))
    for value in values:
        hp.insert(value)
    drained = []
    while len(hp):
        drained.append(hp.minimum())
        hp.delete_minimum()
    assert drained == sorted(values)


def test_length_tracks_inserts_and_deletes():
    hp = HeapPriorityQueue(3)
    hp.insert(4)
    hp.insert(1)
    assert len(hp) == 2
    hp.delete_minimum()
    assert len(hp) == 1


def test_insert_into_full_queue_raises():
    hp = HeapPriorityQueue(2)
    hp.insert(1)
    hp.insert(2)
    with pytest.raises(IllegalStateError):
        hp.insert(3)


def test_minimum_of_empty_queue_raises():
    with pytest.raises(IllegalStateError):
        HeapPriorityQueue(5).minimum()


def test_delete_from_empty_queue_raises():
    with pytest.raises(IllegalStateError):
        HeapPriorityQueue(5).delete_minimum()