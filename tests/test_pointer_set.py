import pytest

from adtkit.pointer_set import PointerSet


def _make(*values):
    ps = PointerSet()
    for value in values:
        ps.insert(value)
    return ps


def test_empty_after_creation():
    assert PointerSet().is_empty()


def test_belongs_to():
    ps = _make(1)
    assert ps.belongs_to(1)
    assert not ps.belongs_to(2)
    assert 1 in ps


def test_remove_existing_element():
    ps = _make(1)
    ps.remove(1)
    assert not ps.belongs_to(1)
    assert ps.is_empty()


def test_remove_missing_element_raises():
    with pytest.raises(KeyError):
        _make(1).remove(2)


def test_insert_ignores_duplicates():
    ps = _make(3, 3, 3)
    assert len(ps) == 1
    assert ps.elements() == [3]


def test_union():
    unified = _make(1, 2, 3, 4, 5).union(_make(3, 1, 33))
    for value in (1, 2, 3, 33, 4, 5):
        assert unified.belongs_to(value)
    assert len(unified) == 6


def test_union_orders_other_first():
    unified = _make(1, 2, 3, 4, 5).union(_make(3, 1, 33))
    assert unified.elements() == [3, 1, 33, 2, 4, 5]


def test_intersection():
    intersected = _make(1, 2, 3, 4, 5).intersect(_make(1, 3, 33))
    assert intersected.belongs_to(1)
    assert intersected.belongs_to(3)
    assert not intersected.belongs_to(4)
    assert not intersected.belongs_to(33)
    assert not intersected.belongs_to(5)


def test_difference():
    diff = _make(1, 2, 3, 4, 5).difference(_make(1, 3, 33))
    assert not diff.belongs_to(1)
    assert diff.belongs_to(2)
    assert diff.belongs_to(4)
    assert diff.belongs_to(5)
    assert not diff.belongs_to(33)
    assert not diff.belongs_to(3)


def test_operations_leave_operands_unchanged():
    first = _make(1, 2, 3)
    second = _make(2, 9)
    first.union(second)
    first.intersect(second)
    first.difference(second)
    assert first.elements() == [1, 2, 3]
    assert second.elements() == [2, 9]


def test_find_returns_position_or_none():
    ps = _make(10, 20, 30)
    assert ps.find(20) == 1
    assert ps.find(99) is None


def test_iteration_follows_insertion_order():
    assert list(_make(5, 1, 4)) == [5, 1, 4]


def test_str_lists_elements():
    assert str(_make(1, 2)) == "List Content: \n1 | 2 | \n"