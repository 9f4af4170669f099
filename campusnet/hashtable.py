"""A separately chained hash table of integers with stepped resizing."""

from __future__ import annotations

from typing import Iterator

RESIZE_SIZES = (101, 211, 401, 809, 1601, 3203, 6421, 12809, 25601)
SHRINK_FACTOR = 4


class IntHashTable:
    """A set of integers stored in chained buckets, hashed by ``value % size``.

    Iteration visits buckets in order and each chain in insertion order.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        self._buckets: list[list[int]] = [[] for _ in range(size)]
        self._count = 0

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[value % len(self._buckets)]

    def add(self, value: int) -> None:
        """Insert ``value``; growing first if the table would be overfull."""
        if self._count + 1 > self.size:
            self.grow()
        bucket = self._bucket(value)
        if value in bucket:
            return
        bucket.append(value)
        self._count += 1

    def remove(self, value: int) -> None:
        """Delete ``value``; raise KeyError if it is absent."""
        bucket = self._bucket(value)
        if value not in bucket:
            raise KeyError(value)
        if self._count - 1 == self.size // SHRINK_FACTOR:
            self.shrink()
            bucket = self._bucket(value)
        bucket.remove(value)
        self._count -= 1

    def resize(self, size: int) -> None:
        """Rehash every element into a table of ``size`` buckets."""
        if size <= 0:
            raise ValueError(f"table size must be positive, got {size}")
        old = list(self)
        self._buckets = [[] for _ in range(size)]
        self._count = 0
        for value in old:
            self._bucket(value).append(value)
            self._count += 1

    def grow(self) -> None:
        """Resize to the smallest step larger than the element count."""
        for step in RESIZE_SIZES:
            if self._count < step:
                self.resize(step)
                return
        raise OverflowError(
            f"table cannot hold more than {RESIZE_SIZES[-1]} elements"
        )

    def shrink(self) -> None:
        """Resize to the largest step below the element count."""
        for step in reversed(RESIZE_SIZES):
            if self._count > step:
                self.resize(step)
                return
        self.resize(RESIZE_SIZES[0])

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return value in self._bucket(value)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"IntHashTable(size={self.size}, elements={list(self)!r})"