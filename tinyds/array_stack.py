"""A bounded last-in first-out stack."""

from __future__ import annotations

import sys
from typing import Any, Optional

DEFAULT_CAPACITY = 100


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError(f"stack overflow, cannot push {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the stack operations."""
    del argv
    stack = ArrayStack()
    for value in (10, 20, 30):
        stack.push(value)
        print(f"Push successfully {value}.")
    print(f"Value of top: {stack.peek()}")
    print(f"Check stack full(1/0): {int(stack.is_full())}")

    stack.pop()
    stack.pop()
    print(f"Value of top: {stack.peek()}")
    print(f"Check Empty(1/-1): {int(stack.is_empty())}")
    return 0


if __name__ == "__main__":
    sys.exit(main())