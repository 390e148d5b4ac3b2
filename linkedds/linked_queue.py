"""A first-in, first-out queue built from linked nodes."""

from __future__ import annotations

from typing import Any

from linkedds.singly_linked_list import SinglyLinkedList


class Queue:
    """A FIFO queue; empty operations give None rather than raising."""

    def __init__(self) -> None:
        self._items = SinglyLinkedList()

    def enqueue(self, value: Any) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value, or None when empty."""
        return self._items.remove(0)

    def peek(self) -> Any:
        """Return the front value without removing it, or None when empty."""
        return next(iter(self._items), None)

    def is_empty(self) -> bool:
        return self._items.is_empty()