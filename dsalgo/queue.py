"""Circular queue and double-ended queue on a growing ring buffer."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """FIFO queue stored in a ring buffer that doubles when full.

    One slot is always left free, so a buffer of capacity ``c`` holds at
    most ``c - 1`` items. ``_front`` sits one slot before the first item
    and ``_rear`` on the last item.
    """

    def __init__(self, capacity: int = 2) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._buffer: list[T | None] = [None] * capacity
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the ring buffer."""
        return len(self._buffer)

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._front == self._rear

    def is_full(self) -> bool:
        """Return True if the next insertion needs the buffer to grow."""
        return (self._rear + 1) % self.capacity == self._front

    def __len__(self) -> int:
        return (self._rear - self._front) % self.capacity

    def _slots(self) -> Iterator[int]:
        capacity = self.capacity
        index = (self._front + 1) % capacity
        stop = (self._rear + 1) % capacity
        while index != stop:
            yield index
            index = (index + 1) % capacity

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the rear."""
        for index in self._slots():
            yield self._buffer[index]  # type: ignore[misc]

    def _check_not_empty(self, action: str) -> None:
        if self.is_empty():
            raise IndexError(f"{action} on an empty queue")

    def front(self) -> T:
        """Return the first item without removing it."""
        self._check_not_empty("front")
        return self._buffer[(self._front + 1) % self.capacity]  # type: ignore[return-value]

    def rear(self) -> T:
        """Return the last item without removing it."""
        self._check_not_empty("rear")
        return self._buffer[self._rear]  # type: ignore[return-value]

    def _resize(self) -> None:
        items = list(self)
        old_capacity = self.capacity
        self._buffer = [None] * (2 * old_capacity)
        self._buffer[1:1 + len(items)] = items
        self._front = 0
        self._rear = old_capacity - 1

    def enqueue(self, item: T) -> None:
        """Append ``item`` at the rear, growing the buffer if needed."""
        if self.is_full():
            self._resize()
        self._rear = (self._rear + 1) % self.capacity
        self._buffer[self._rear] = item

    def dequeue(self) -> T:
        """Remove and return the first item."""
        self._check_not_empty("dequeue")
        self._front = (self._front + 1) % self.capacity
        return self._buffer[self._front]  # type: ignore[return-value]

    def debug_view(self) -> str:
        """Return a picture of the buffer with the front and rear positions."""
        capacity = self.capacity
        lines = [f"Cap = {capacity}, Size = {len(self)}"]

        markers = []
        for i in range(capacity):
            if i == self._front:
                markers.append(" F ")
            elif i == self._rear:
                markers.append(" R ")
            else:
                markers.append("   ")
        lines.append("".join(markers))
        lines.append("".join(f"{i:2} " for i in range(capacity)))

        def cell(i: int) -> str:
            return f"{str(self._buffer[i]):>2} "

        front, rear = self._front, self._rear
        if front < rear:
            contents = (
                " - " * (front + 1)
                + "".join(cell(i) for i in range(front + 1, rear + 1))
                + " * " * (capacity - rear - 1)
            )
        elif front > rear:
            contents = (
                "".join(cell(i) for i in range(rear + 1))
                + " * " * (front - rear)
                + "".join(cell(i) for i in range(front + 1, capacity))
            )
        else:
            contents = " - " * capacity
        lines.append(contents)
        return "\n".join(lines)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Deque(CircularQueue[T]):
    """Double-ended queue on the same ring buffer."""

    def back(self) -> T:
        """Return the last item without removing it."""
        return self.rear()

    def push_front(self, item: T) -> None:
        """Insert ``item`` before the first item."""
        if self.is_full():
            self._resize()
        self._buffer[self._front] = item
        self._front = (self._front - 1) % self.capacity

    def push_back(self, item: T) -> None:
        """Append ``item`` after the last item."""
        self.enqueue(item)

    def pop_front(self) -> T:
        """Remove and return the first item."""
        return self.dequeue()

    def pop_back(self) -> T:
        """Remove and return the last item."""
        self._check_not_empty("pop_back")
        item = self._buffer[self._rear]
        self._rear = (self._rear - 1) % self.capacity
        return item  # type: ignore[return-value]