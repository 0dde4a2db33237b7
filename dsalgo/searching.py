"""Linear and binary search over sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a traced binary search.

    ``index`` is the position found, or -1. ``steps`` is the number of
    probes made, and ``trace`` holds ``(left, right, middle)`` per probe.
    """

    index: int
    steps: int
    trace: tuple[tuple[int, int, int], ...] = field(default=())

    @property
    def found(self) -> bool:
        return self.index >= 0


def count(values: Sequence[Any], target: Any) -> int:
    """Return how many elements of ``values`` equal ``target``."""
    return sum(1 for value in values if value == target)


def sequential_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of the first element equal to ``target``, or -1."""
    return next((i for i, value in enumerate(values) if value == target), -1)


def sorted_count(values: Sequence[Any], target: Any) -> int:
    """Count occurrences of ``target`` in a sorted sequence.

    Scans only the run that starts at the first match.
    """
    start = sequential_search(values, target)
    if start < 0:
        return 0
    run = 0
    for value in values[start:]:
        if value != target:
            break
        run += 1
    return run


def traced_binary_search(values: Sequence[Any], target: Any) -> SearchResult:
    """Binary-search a sorted sequence, recording every probe."""
    left, right = 0, len(values) - 1
    trace: list[tuple[int, int, int]] = []
    while left <= right:
        middle = (left + right) // 2
        trace.append((left, right, middle))
        probe = values[middle]
        if probe < target:
            left = middle + 1
        elif probe > target:
            right = middle - 1
        else:
            return SearchResult(middle, len(trace), tuple(trace))
    return SearchResult(-1, len(trace), tuple(trace))


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return the index of ``target`` in a sorted sequence, or -1."""
    return traced_binary_search(values, target).index


def recursive_binary_search(
    values: Sequence[Any],
    target: Any,
    left: int = 0,
    right: int | None = None,
) -> int:
    """Binary-search ``values[left:right + 1]`` recursively; return index or -1."""
    if right is None:
        right = len(values) - 1
    if left > right:
        return -1
    middle = (left + right) // 2
    probe = values[middle]
    if probe > target:
        return recursive_binary_search(values, target, left, middle - 1)
    if probe < target:
        return recursive_binary_search(values, target, middle + 1, right)
    return middle