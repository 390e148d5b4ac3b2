"""A last-in, first-out stack with a fixed capacity."""

from __future__ import annotations

from typing import Any

INITIAL_STACK_CAPACITY = 128


class Stack:
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = INITIAL_STACK_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put a value on top; raises OverflowError when full."""
        if len(self._items) >= self._capacity:
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items