import random
from collections import deque

import pytest

from dsalgo.queue import CircularQueue, Deque


def test_enqueue_keeps_fifo_order_across_growth():
    q = CircularQueue(2)
    for item in "ABCD":
        q.enqueue(item)
    assert list(q) == ["A", "B", "C", "D"]
    assert len(q) == 4
    assert q.capacity >= len(q) + 1


def test_front_and_rear():
    q = CircularQueue()
    q.enqueue("A")
    q.enqueue("B")
    q.enqueue("C")
    assert q.front() == "A"
    assert q.rear() == "C"


def test_dequeue_returns_items_in_order():
    q = CircularQueue(2)
    for item in "ABCD":
        q.enqueue(item)
    assert [q.dequeue() for _ in range(3)] == ["A", "B", "C"]
    assert list(q) == ["D"]


def test_wraparound_after_dequeue_and_enqueue():
    q = CircularQueue(2)
    for item in "ABCD":
        q.enqueue(item)
    for _ in range(3):
        q.dequeue()
    letters = [chr(c) for c in range(ord("E"), ord("K") + 1)]
    for letter in letters:
        q.enqueue(letter)
    assert list(q) == ["D"] + letters
    assert str(q) == " ".join(["D"] + letters)


def test_matches_reference_deque_under_random_operations():
    rng = random.Random(1234)
    q = CircularQueue(3)
    model = deque()
    for step in range(500):
        if model and rng.random() < 0.4:
            assert q.dequeue() == model.popleft()
        else:
            q.enqueue(step)
            model.append(step)
        assert list(q) == list(model)
        assert len(q) == len(model)


def test_is_empty_and_is_full():
    q = CircularQueue(2)
    assert q.is_empty()
    q.enqueue(1)
    assert not q.is_empty()
    assert q.is_full()


def test_front_of_empty_queue_errors():
    q = CircularQueue()
    with pytest.raises(IndexError):
        q.front()
    assert len(q) == 0
    assert list(q) == []


def test_rear_of_empty_queue_errors():
    q = CircularQueue()
    with pytest.raises(IndexError):
        q.rear()
    assert len(q) == 0
    assert list(q) == []


def test_dequeue_of_empty_queue_errors():
    q = CircularQueue()
    with pytest.raises(IndexError):
        q.dequeue()
    assert len(q) == 0
    q.enqueue("A")
    assert list(q) == ["A"]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_debug_view_of_empty_queue():
    q = CircularQueue(2)
    lines = q.debug_view().split("\n")
    assert lines[0] == "Cap = 2, Size = 0"
    assert lines[-1] == " - " * 2


def test_debug_view_lists_items():
    q = CircularQueue(4)
    q.enqueue("A")
    q.enqueue("B")
    view = q.debug_view()
    assert " A " in view
    assert " B " in view
    assert view.split("\n")[0].endswith(f"Size = {len(q)}")


def test_deque_sequence():
    d = Deque(8)
    d.push_front("A")
    d.push_front("B")
    d.push_back("C")
    d.push_back("D")
    assert list(d) == ["B", "A", "C", "D"]
    assert d.pop_front() == "B"
    assert list(d) == ["A", "C", "D"]
    assert d.pop_back() == "D"
    assert list(d) == ["A", "C"]
    assert d.front() == "A"
    assert d.back() == "C"


def test_deque_push_front_grows():
    d = Deque(2)
    items = list(range(10))
    for item in items:
        d.push_front(item)
    assert list(d) == items[::-1]
    assert d.capacity > len(d)


def test_deque_pop_back_empty():
    d = Deque(4)
    with pytest.raises(IndexError):
        d.pop_back()