"""An array-backed binary min-heap of integers."""

from __future__ import annotations

from typing import Iterator


class MinHeap:
    """A min-heap; iteration yields the underlying array order."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Add ``value`` and restore the heap order upwards."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[index] > items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def peek(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def pop(self) -> int:
        """Remove and return the smallest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        least = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return least

    def _sift_down(self) -> None:
        items = self._items
        count = len(items)
        index = 0
        while True:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < count and items[child] < items[smallest]:
                    smallest = child
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"MinHeap({self._items!r})"