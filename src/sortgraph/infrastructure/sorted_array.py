"""SortedArray — an ordered sequence with an optional capacity ceiling.

Backs both the vertex and the edge collection of :class:`ArrayGraph`.
Lookups are binary searches (``bisect``), inserts shift the tail of the
underlying list, and bulk removal rebuilds the list in a single pass.

Complexity: O(log n) find, O(n) insert and remove.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Callable, Iterator
from typing import Any

from sortgraph.domain.errors import CapacityError


class SortedArray[T]:
    """Ascending, duplicate-free storage for orderable items.

    The caller refuses duplicates and checks :attr:`is_full` before
    :meth:`insert`.

    Args:
        capacity: Maximum number of items, or None for unbounded storage.
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int | None:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def find(self, item: T) -> int | None:
        """Return the index of an item equal to *item*, or None."""
        index = bisect_left(self._items, item)  # type: ignore[type-var]
        if index < len(self._items) and self._items[index] == item:
            return index
        return None

    def insert(self, item: T) -> int:
        """Insert *item* at its sorted position and return that position."""
        if self.is_full:
            raise CapacityError(f"SortedArray is full ({self._capacity} items)")
        index = bisect_left(self._items, item)  # type: ignore[type-var]
        self._items.insert(index, item)
        return index

    def remove_at(self, index: int) -> T:
        """Remove and return the item at *index*, closing the gap."""
        return self._items.pop(index)

    def remove_where(self, predicate: Callable[[T], bool]) -> list[T]:
        """Remove every item matching *predicate* and return them in order.

        The surviving items are collected first and swapped in with one
        assignment, so a failing predicate leaves the storage untouched.
        """
        kept: list[T] = []
        removed: list[T] = []
        for item in self._items:
            (removed if predicate(item) else kept).append(item)
        if removed:
            self._items = kept
        return removed

    def snapshot(self) -> list[T]:
        """Return a sorted copy that does not alias internal storage."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: Any) -> bool:
        return self.find(item) is not None

    def __repr__(self) -> str:
        return f"SortedArray(capacity={self._capacity}, items={self._items!r})"
