"""A bounded first-in first-out queue over a fixed number of slots."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional

DEFAULT_CAPACITY = 100


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a queue whose slots are used up."""


class ArrayQueue:
    """A queue backed by a fixed array of ``capacity`` slots.

    Slots are consumed by ``enqueue`` and are not reused after ``dequeue``,
    so the queue is full once ``capacity`` values have been added in total.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def is_empty(self) -> bool:
        return self._front >= len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        value = self.peek()
        self._slots[self._front] = None
        self._front += 1
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._slots[self._front]

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __repr__(self) -> str:
        return f"ArrayQueue({list(self)!r}, capacity={self.capacity})"


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the queue operations."""
    del argv
    queue = ArrayQueue()
    print(f"Check queue(1/0): {int(queue.is_empty())}")

    for value in (10, 20, 30):
        queue.enqueue(value)
        print("Add element at rear of queue!")

    print(f"Front element: {queue.peek()}")
    print("List queue: " + " ".join(str(value) for value in queue))

    queue.dequeue()
    print("Remove front element succesfully!")
    print(f"Front element: {queue.peek()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())