"""Last-in, first-out stack with a growing capacity."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """LIFO container whose capacity doubles when a push finds it full."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """Number of items that fit before the storage grows."""
        return self._capacity

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        if len(self._items) >= self._capacity:
            self._capacity = len(self._items) * 2
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing every character and popping them."""
    stack: Stack[str] = Stack()
    for char in text:
        stack.push(char)
    reversed_chars = []
    while not stack.is_empty():
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)