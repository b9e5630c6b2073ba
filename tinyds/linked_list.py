"""A singly linked list of values."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps only a reference to its head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        current = self.head
        while current is not None:
            yield current
            current = current.next

    def prepend(self, data: Any) -> Node:
        """Insert ``data`` at the front and return its node."""
        self.head = Node(data, self.head)
        return self.head

    def append(self, data: Any) -> Node:
        """Insert ``data`` at the end and return its node."""
        node = Node(data)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def insert_after(self, node: Optional[Node], data: Any) -> Node:
        """Insert ``data`` right after ``node`` and return the new node."""
        if node is None:
            raise ValueError("cannot insert after a missing node")
        node.next = Node(data, node.next)
        return node.next

    def insert_at(self, data: Any, pos: int) -> Node:
        """Insert ``data`` at index ``pos``; past the end, append instead."""
        if pos < 0:
            raise ValueError("position must not be negative")
        if pos == 0:
            return self.prepend(data)
        for index, node in enumerate(self._nodes()):
            if index == pos - 1:
                return self.insert_after(node, data)
        return self.append(data)

    def delete_by_key(self, key: Any) -> None:
        """Remove the first node whose data equals ``key``."""
        if self.is_empty():
            raise ValueError("list is empty")
        previous = None
        for node in self._nodes():
            if node.data == key:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous = node
        raise ValueError(f"{key!r} not in list")

    def delete_at(self, pos: int) -> Any:
        """Remove the node at index ``pos`` and return its data."""
        if self.is_empty():
            raise IndexError("list is empty")
        if pos < 0:
            raise IndexError("position is out of range")
        previous = None
        for index, node in enumerate(self._nodes()):
            if index == pos:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return node.data
            previous = node
        raise IndexError("position is out of range")

    def search(self, key: Any) -> Optional[Node]:
        """Return the first node whose data equals ``key``, or None."""
        return next((node for node in self._nodes() if node.data == key), None)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def is_empty(self) -> bool:
        return self.head is None

    def clear(self) -> None:
        self.head = None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return "[" + "".join(f"{value} " for value in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the list operations."""
    del argv
    out = sys.stdout
    items = LinkedList()
    items.append(10)
    items.prepend(5)
    items.insert_after(items.head, 7)
    items.insert_at(15, 3)

    print(f"List contents: {items}", file=out)
    print(f"Length: {len(items)}", file=out)

    print("Deleting key 7...", file=out)
    items.delete_by_key(7)
    print(items, file=out)

    print("Reversing list...", file=out)
    items.reverse()
    print(items, file=out)

    items.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())