"""An unbalanced binary search tree ordered by a comparison function."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


def _natural_compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _default_format(value: Any) -> str:
    return f"{value} "


class BinarySearchTree:
    """A binary search tree; equal values go to the right subtree.

    ``compare(a, b)`` returns a negative, zero or positive number;
    ``print_func`` formats one value as the text ``traverse`` writes.
    """

    def __init__(
        self,
        compare: Callable[[Any, Any], int] | None = None,
        print_func: Callable[[Any], str] | None = None,
    ) -> None:
        self._root: _Node | None = None
        self._compare = compare or _natural_compare
        self._format = print_func or _default_format

    def __iter__(self) -> Iterator[Any]:
        pending: list[_Node] = []
        node = self._root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __contains__(self, value: Any) -> bool:
        return self.lookup(value)

    def insert(self, value: Any) -> bool:
        """Add a value to the tree."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return True
        current = self._root
        while True:
            if self._compare(value, current.value) < 0:
                if current.left is None:
                    current.left = node
                    return True
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return True
                current = current.right

    def lookup(self, value: Any) -> bool:
        """Tell whether a value comparing equal is in the tree."""
        current = self._root
        while current is not None:
            cmp = self._compare(value, current.value)
            if cmp == 0:
                return True
            current = current.left if cmp < 0 else current.right
        return False

    def remove(self, value: Any) -> bool:
        """Remove one value comparing equal; tell whether one was found."""
        current = self._root
        parent = None
        while current is not None:
            cmp = self._compare(value, current.value)
            if cmp == 0:
                break
            parent = current
            current = current.left if cmp < 0 else current.right
        if current is None:
            return False

        if current.right is None:
            successor = current.left
        elif current.right.left is None:
            current.right.left = current.left
            successor = current.right
        else:
            successor_parent = current.right
            successor = successor_parent.left
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            successor_parent.left = successor.right
            successor.left = current.left
            successor.right = current.right

        if parent is None:
            self._root = successor
        elif parent.left is current:
            parent.left = successor
        else:
            parent.right = successor
        return True

    def traverse(self) -> None:
        """Write every formatted value to standard output in order."""
        sys.stdout.write("".join(self._format(value) for value in self))