import pytest

from tinyds.array_queue import ArrayQueue, QueueEmptyError, QueueFullError, main


def test_new_queue_is_empty():
    queue = ArrayQueue()
    assert queue.is_empty()
    assert not queue.is_full()
    assert len(queue) == 0
    assert queue.capacity == 100


def test_fifo_order():
    queue = ArrayQueue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    assert list(queue) == [10, 20, 30]
    assert queue.peek() == 10
    assert queue.dequeue() == 10
    assert queue.peek() == 20
    assert len(queue) == 2


def test_round_trip():
    values = list(range(50))
    queue = ArrayQueue()
    for value in values:
        queue.enqueue(value)
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


def test_empty_errors():
    queue = ArrayQueue()
    with pytest.raises(QueueEmptyError):
        queue.peek()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        ArrayQueue().dequeue()


def test_full_queue_rejects():
    queue = ArrayQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert list(queue) == [1, 2, 3]


def test_slots_not_reused_after_dequeue():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [2]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == [
        "Check queue(1/0): 1",
        "Add element at rear of queue!",
        "Add element at rear of queue!",
        "Add element at rear of queue!",
        "Front element: 10",
        "List queue: 10 20 30",
        "Remove front element succesfully!",
        "Front element: 20",
    ]