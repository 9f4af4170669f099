"""An unbalanced binary search tree of distinct integers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass
class _Node:
    value: int
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """A set of integers kept in a plain binary search tree.

    Duplicates are ignored; iteration yields values in ascending order.
    """

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self._root: _Node | None = None
        self._count = 0
        for value in values or ():
            self.insert(value)

    def insert(self, value: int) -> None:
        """Add ``value`` unless it is already present."""
        if self._root is None:
            self._root = _Node(value)
            self._count += 1
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._count += 1

    def _find_node(self, value: int) -> _Node | None:
        node = self._root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def find(self, value: int) -> int | None:
        """Return ``value`` if it is stored, otherwise ``None``."""
        node = self._find_node(value)
        return None if node is None else node.value

    def minimum(self) -> int:
        """Return the smallest stored value."""
        if self._root is None:
            raise ValueError("minimum of an empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def remove(self, value: int) -> None:
        """Delete ``value``; nothing happens if it is absent."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            return

        if node.left is not None and node.right is not None:
            # Replace with the in-order successor, then unlink the successor.
            succ_parent = node
            succ = node.right
            while succ.left is not None:
                succ_parent = succ
                succ = succ.left
            node.value = succ.value
            if succ_parent is node:
                succ_parent.right = succ.right
            else:
                succ_parent.left = succ.right
        else:
            child = node.left if node.left is not None else node.right
            if parent is None:
                self._root = child
            elif parent.left is node:
                parent.left = child
            else:
                parent.right = child
        self._count -= 1

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return self._find_node(value) is not None

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"


def random_bst(n: int, rng: random.Random | None = None) -> BinarySearchTree:
    """Build a tree from a random permutation of ``1..n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    rng = rng or random.Random()
    perm = list(range(1, n + 1))
    rng.shuffle(perm)
    return BinarySearchTree(perm)