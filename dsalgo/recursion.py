"""Small recursive and iterative routines."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, computed iteratively (F0 = 0, F1 = 1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def recursive_fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by plain double recursion."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n < 2:
        return n
    return recursive_fibonacci(n - 1) + recursive_fibonacci(n - 2)


def recursive_sum(values: Sequence[Any]) -> Any:
    """Sum ``values`` recursively from the back; an empty sequence sums to 0."""

    def _sum(n: int) -> Any:
        if n <= 0:
            return 0
        if n == 1:
            return values[0]
        return _sum(n - 1) + values[n - 1]

    return _sum(len(values))


def permutations(items: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield every ordering of ``items``, generated by swapping in place."""
    pool = list(items)

    def _permute(left: int) -> Iterator[tuple[Any, ...]]:
        if left >= len(pool) - 1:
            yield tuple(pool)
            return
        for i in range(left, len(pool)):
            pool[left], pool[i] = pool[i], pool[left]
            yield from _permute(left + 1)
            pool[left], pool[i] = pool[i], pool[left]

    yield from _permute(0)


def countdown(count: int) -> Iterator[int]:
    """Yield ``count``, ``count - 1``, ..., 1 recursively."""
    if count <= 0:
        return
    yield count
    yield from countdown(count - 1)