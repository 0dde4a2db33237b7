"""Josephus elimination played with a circular queue."""

from __future__ import annotations

from dsalgo.queue import CircularQueue


def josephus(n: int, k: int) -> tuple[list[int], int]:
    """Count off people 1..n in a circle, removing every k-th one.

    Returns the people in the order they were removed and the survivor.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    circle: CircularQueue[int] = CircularQueue(n + 1)
    for person in range(1, n + 1):
        circle.enqueue(person)
    executed: list[int] = []
    while len(circle) > 1:
        for _ in range(k - 1):
            circle.enqueue(circle.dequeue())
        executed.append(circle.dequeue())
    return executed, circle.front()