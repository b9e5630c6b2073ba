# tinyds

Three small data structures for storing integers, or any other values:

- `tinyds.linked_list.LinkedList` is a singly linked list made of `Node` objects.
- `tinyds.array_queue.ArrayQueue` is a first-in, first-out queue with a fixed number of slots.
- `tinyds.array_stack.ArrayStack` is a last-in, first-out stack with a fixed capacity.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Linked list

```python
from tinyds.linked_list import LinkedList

items = LinkedList([10])
items.prepend(5)
items.insert_after(items.search(5), 7)
items.insert_at(15, 3)        # a position past the end appends
print(items)                  # [5 7 10 15 ]
print(len(items))             # 4
items.delete_by_key(7)
items.reverse()
print(list(items))            # [15, 10, 5]
print(items.delete_at(0))     # 15
items.clear()
print(items.is_empty())       # True
```

- `LinkedList(values)` builds a list from any iterable; with no argument it starts empty.
- `prepend`, `append`, `insert_after` and `insert_at` each return the new `Node`.
- `insert_after(node, data)` raises `ValueError` when `node` is `None`.
- `insert_at(data, pos)` inserts at index `pos`; a position past the end appends, and a negative position raises `ValueError`.
- `search(key)` returns the first `Node` that holds `key`, or `None` when no node does.
- `delete_by_key(key)` removes the first node holding `key`; it raises `ValueError` when the list is empty or holds no such node.
- `delete_at(pos)` removes the node at index `pos` and returns its data; it raises `IndexError` when the list is empty or `pos` is out of range.
- `reverse()` reverses the list in place, and `clear()` empties it.
- The list supports `len()` and iteration over its values; `str()` prints the values in brackets, each followed by a space.

## Queue

```python
from tinyds.array_queue import ArrayQueue, QueueEmptyError

queue = ArrayQueue(capacity=100)
for value in (10, 20, 30):
    queue.enqueue(value)
print(queue.peek())           # 10
print(queue.dequeue())        # 10
print(list(queue))            # [20, 30]
print(len(queue))             # 2
```

The capacity defaults to 100 and must be positive. Each `enqueue` uses up one slot and slots are not reused after `dequeue`, so the queue counts as full once `capacity` values have been added in total, however many have been taken out since. `enqueue` on a full queue raises `QueueFullError` (a kind of `OverflowError`). `dequeue` and `peek` on an empty queue raise `QueueEmptyError` (a kind of `IndexError`).

## Stack

```python
from tinyds.array_stack import ArrayStack

stack = ArrayStack(capacity=100)
for value in (10, 20, 30):
    stack.push(value)
print(stack.peek())           # 30
stack.pop()
stack.pop()
print(stack.peek())           # 10
print(len(stack))             # 1
```

The capacity defaults to 100 and must be positive. `push` raises `StackFullError` (a kind of `OverflowError`) when the stack holds `capacity` values. `pop` and `peek` on an empty stack raise `StackEmptyError` (a kind of `IndexError`).

## Demonstrations

Each structure comes with a short command-line demonstration that runs a fixed sequence of operations and prints the results:

```
tinyds-list-demo
tinyds-queue-demo
tinyds-stack-demo
```

The demonstrations take no options and read no input.

## Running the tests

```
pip install ".[test]"
pytest
```