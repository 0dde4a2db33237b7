"""Elementary comparison sorts and small ordering helpers."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Sequence, TypeVar

T = TypeVar("T")
KeyFunc = Callable[[Any], Any]


def _identity(item: Any) -> Any:
    return item


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True if every element is no greater than the one after it."""
    return all(a <= b for a, b in zip(values, values[1:]))


def is_ordered(a: Any, b: Any) -> bool:
    """Return True if ``a`` may stand before ``b`` in ascending order."""
    return b >= a


def sort_pair(a: T, b: T) -> tuple[T, T]:
    """Return the two values in ascending order."""
    if a > b:
        return b, a
    return a, b


def min_index(values: Sequence[Any]) -> int:
    """Return the index of the first smallest element.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("min_index() of an empty sequence")
    best = 0
    for index, value in enumerate(values):
        if values[best] > value:
            best = index
    return best


def bubble_sort(values: MutableSequence[Any], key: KeyFunc | None = None) -> None:
    """Sort ``values`` in place by repeatedly swapping adjacent pairs.

    Stops early once a pass makes no swap. Equal keys keep their order.
    """
    key = key or _identity
    n = len(values)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if key(values[j]) > key(values[j + 1]):
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break


def insertion_sort(values: MutableSequence[Any], key: KeyFunc | None = None) -> None:
    """Sort ``values`` in place by shifting larger elements to the right.

    Equal keys keep their order.
    """
    key = key or _identity
    for i in range(1, len(values)):
        picked = values[i]
        picked_key = key(picked)
        j = i
        while j > 0 and key(values[j - 1]) > picked_key:
            values[j] = values[j - 1]
            j -= 1
        values[j] = picked


def selection_sort(values: MutableSequence[Any], key: KeyFunc | None = None) -> None:
    """Sort ``values`` in place by selecting the minimum of the unsorted part.

    Not stable. Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("selection_sort() of an empty sequence")
    key = key or _identity
    n = len(values)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if key(values[smallest]) > key(values[j]):
                smallest = j
        if key(values[smallest]) != key(values[i]):
            values[smallest], values[i] = values[i], values[smallest]