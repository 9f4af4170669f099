"""A singly linked list of distinct integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class _Link:
    value: int
    next: _Link | None = None


class IntList:
    """Distinct integers kept in insertion order.

    Inserting a value already present and removing an absent one do nothing.
    """

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._head: _Link | None = None
        self._count = 0
        for value in values or ():
            self.insert(value)

    def insert(self, value: int) -> None:
        """Append ``value`` at the end unless it is already present."""
        if self._head is None:
            self._head = _Link(value)
            self._count += 1
            return
        link = self._head
        while True:
            if link.value == value:
                return
            if link.next is None:
                break
            link = link.next
        link.next = _Link(value)
        self._count += 1

    def remove(self, value: int) -> None:
        """Unlink ``value`` if it is present."""
        previous: _Link | None = None
        link = self._head
        while link is not None and link.value != value:
            previous, link = link, link.next
        if link is None:
            return
        if previous is None:
            self._head = link.next
        else:
            previous.next = link.next
        self._count -= 1

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[int]:
        link = self._head
        while link is not None:
            yield link.value
            link = link.next

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return "".join(f"---{value}" for value in self)

    def __repr__(self) -> str:
        return f"IntList({list(self)!r})"