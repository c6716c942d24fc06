"""Tests for SortedArray storage."""

import pytest

from sortgraph.domain.errors import CapacityError
from sortgraph.infrastructure.sorted_array import SortedArray


def _filled(*items: int, capacity: int | None = None) -> SortedArray[int]:
    arr: SortedArray[int] = SortedArray(capacity)
    for item in items:
        arr.insert(item)
    return arr


class TestInsert:
    def test_keeps_ascending_order(self) -> None:
        arr = _filled(5, 1, 4, 2, 3)
        assert arr.snapshot() == [1, 2, 3, 4, 5]

    def test_returns_position(self) -> None:
        arr = _filled(1, 3)
        assert arr.insert(2) == 1

    def test_full_raises(self) -> None:
        arr = _filled(1, 2, capacity=2)
        assert arr.is_full
        with pytest.raises(CapacityError):
            arr.insert(3)
        assert arr.snapshot() == [1, 2]

    def test_zero_capacity_is_always_full(self) -> None:
        assert SortedArray(0).is_full

    def test_unbounded_never_full(self) -> None:
        arr = _filled(*range(100))
        assert arr.capacity is None
        assert not arr.is_full

    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ValueError):
            SortedArray(-1)


class TestFind:
    def test_found(self) -> None:
        arr = _filled(10, 20, 30)
        assert arr.find(20) == 1
        assert 30 in arr

    def test_missing(self) -> None:
        arr = _filled(10, 20, 30)
        assert arr.find(25) is None
        assert arr.find(99) is None
        assert 5 not in arr

    def test_empty(self) -> None:
        assert SortedArray().find(1) is None


class TestRemove:
    def test_remove_at_closes_gap(self) -> None:
        arr = _filled(1, 2, 3)
        assert arr.remove_at(1) == 2
        assert arr.snapshot() == [1, 3]

    def test_remove_where_preserves_order(self) -> None:
        arr = _filled(*range(10))
        removed = arr.remove_where(lambda x: x % 3 == 0)
        assert removed == [0, 3, 6, 9]
        assert arr.snapshot() == [1, 2, 4, 5, 7, 8]

    def test_remove_where_no_match(self) -> None:
        arr = _filled(1, 2)
        assert arr.remove_where(lambda x: x > 5) == []
        assert len(arr) == 2

    def test_failing_predicate_leaves_storage_intact(self) -> None:
        arr = _filled(1, 2, 3)

        def boom(x: int) -> bool:
            if x == 3:
                raise RuntimeError("boom")
            return True

        with pytest.raises(RuntimeError):
            arr.remove_where(boom)
        assert arr.snapshot() == [1, 2, 3]


def test_snapshot_does_not_alias() -> None:
    arr = _filled(1, 2)
    snap = arr.snapshot()
    snap.append(99)
    assert arr.snapshot() == [1, 2]
