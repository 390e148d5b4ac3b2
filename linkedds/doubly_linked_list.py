"""A doubly linked list with head and tail references."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(
        self, value: Any, next: _Node | None = None, prev: _Node | None = None
    ) -> None:
        self.value = value
        self.next = next
        self.prev = prev


def _default_format(value: Any) -> str:
    return f"{value} "


def _require_non_negative(index: int) -> None:
    if index < 0:
        raise ValueError("index must be non-negative")


class DoublyLinkedList:
    """A list of values linked in both directions.

    ``print_func`` formats one value as the text that ``print_list`` writes.
    """

    def __init__(self, print_func: Callable[[Any], str] | None = None) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        self._format = print_func or _default_format

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def prepend(self, value: Any) -> None:
        """Add a value at the front."""
        node = _Node(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._length += 1

    def append(self, value: Any) -> None:
        """Add a value at the back."""
        node = _Node(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert before position ``index``; an index past the end appends."""
        _require_non_negative(index)
        if index >= self._length:
            self.append(value)
            return
        if index == 0:
            self.prepend(value)
            return
        leader = self._node_at(index - 1)
        follower = leader.next
        node = _Node(value, next=follower, prev=leader)
        follower.prev = node
        leader.next = node
        self._length += 1

    def remove(self, index: int) -> Any:
        """Remove and return the value at ``index``; out of range does nothing and gives None."""
        _require_non_negative(index)
        if index >= self._length:
            return None
        if index == 0:
            removed = self._head
            self._head = removed.next
            if self._head is not None:
                self._head.prev = None
            else:
                self._tail = None
        else:
            leader = self._node_at(index - 1)
            removed = leader.next
            leader.next = removed.next
            if removed is self._tail:
                self._tail = leader
            else:
                removed.next.prev = leader
        self._length -= 1
        return removed.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        current = self._head
        self._head, self._tail = self._tail, self._head
        while current is not None:
            following = current.next
            current.next, current.prev = current.prev, following
            current = following

    def is_empty(self) -> bool:
        return self._head is None

    def print_list(self, file: TextIO | None = None) -> None:
        """Write every formatted value, then a newline."""
        out = file if file is not None else sys.stdout
        out.write("".join(self._format(value) for value in self) + "\n")