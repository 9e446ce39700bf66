import pytest

from adtkit.arrays import (
    Largest,
    compare,
    greater_than,
    largest,
    member,
    ordering,
    remove,
    reverse,
)
from adtkit.errors import NotOrderedError


@pytest.fixture
def sample():
    return [1, 2, 5, 4, 5, 3, 6, 9]


def test_greater_than_counts_strictly_greater(sample):
    assert greater_than(sample, 1) == len(sample) - 1
    assert greater_than(sample, 9) == 0
    assert greater_than([], 0) == 0


def test_member(sample):
    for value in (1, 2, 6):
        assert member(sample, value) is True
    assert member(sample, 7) is False
    assert member([], 1) is False


def test_largest(sample):
    result = largest(sample)
    assert result == Largest(9, sample.index(9))


def test_largest_reports_first_occurrence():
    assert largest([3, 7, 7, 1]) == Largest(7, 1)


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


def test_remove_first_occurrence(sample):
    before = list(sample)
    remove(sample, 5)
    assert len(sample) == len(before)
    assert sample[-1] == 0
    assert sample.count(5) == before.count(5) - 1
    assert sample[:2] == before[:2]
    assert sample[2:-1] == before[3:]


def test_remove_missing_is_noop(sample):
    before = list(sample)
    remove(sample, 42)
    assert sample == before


def test_compare():
    assert compare(3, 3) == 0
    assert compare(1, 2) == -1
    assert compare(2, 1) == 1


def test_ordering_cases():
    assert ordering([1, 2, 6]) == compare(1, 2)
    assert ordering([0, 0, 0, 0]) == compare(0, 0)
    assert ordering([0, -1, -20]) == compare(0, -1)


def test_ordering_not_ordered_raises():
    with pytest.raises(NotOrderedError) as info:
        ordering([0, 1, -1, -20])
    assert str(info.value) == "My exception happened"


def test_ordering_short_sequences():
    assert ordering([5]) == 0
    assert ordering([1, 2]) == compare(1, 2)


def test_reverse_round_trip():
    values = [0, 1, -1, -20]
    original = list(values)
    reverse(values)
    assert values == original[::-1]
    reverse(values)
    assert values == original