"""Sparse matrix that stores only its non-zero terms in row-major order."""

from __future__ import annotations

import bisect
from dataclasses import dataclass


@dataclass(frozen=True)
class MatrixTerm:
    """One non-zero entry of a sparse matrix."""

    row: int
    col: int
    value: float


def _format_number(value: float) -> str:
    return f"{value:g}"


def _position(term: MatrixTerm) -> tuple[int, int]:
    return term.row, term.col


class SparseMatrix:
    """Matrix of floats keeping only non-zero terms, sorted by (row, col).

    ``capacity`` is the number of terms reserved; it doubles when full.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, num_rows: int, num_cols: int, capacity: int) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.num_rows = num_rows
        self.num_cols = num_cols
        self._capacity = capacity
        self._terms: list[MatrixTerm] = []

    @property
    def capacity(self) -> int:
        """Number of terms that fit before the storage grows."""
        return self._capacity

    def terms(self) -> tuple[MatrixTerm, ...]:
        """Return the stored non-zero terms in row-major order."""
        return tuple(self._terms)

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.num_rows and 0 <= col < self.num_cols):
            raise IndexError(f"index ({row}, {col}) out of range")

    def set_value(self, row: int, col: int, value: float) -> None:
        """Store ``value`` at (row, col); a zero value is ignored."""
        self._check(row, col)
        if value == 0.0:
            return
        term = MatrixTerm(row, col, float(value))
        for index, existing in enumerate(self._terms):
            if (existing.row, existing.col) == (row, col):
                self._terms[index] = term
                return
        if len(self._terms) >= self._capacity:
            self._capacity = self._capacity * 2 if self._capacity else 1
        bisect.insort(self._terms, term, key=_position)

    def get_value(self, row: int, col: int) -> float:
        """Return the value at (row, col), zero when no term is stored."""
        self._check(row, col)
        for term in self._terms:
            if (term.row, term.col) == (row, col):
                return term.value
        return 0.0

    def transpose(self) -> SparseMatrix:
        """Return the transposed matrix, its terms again in row-major order."""
        result = SparseMatrix(self.num_cols, self.num_rows, self._capacity)
        for col in range(self.num_cols):
            result._terms.extend(
                MatrixTerm(term.col, term.row, term.value)
                for term in self._terms
                if term.col == col
            )
        return result

    def format_terms(self) -> str:
        """Return one ``(row, col, value)`` line per stored term."""
        return "\n".join(
            f"({t.row}, {t.col}, {_format_number(t.value)})" for t in self._terms
        )

    def __str__(self) -> str:
        return "\n".join(
            " ".join(
                _format_number(self.get_value(r, c)) for c in range(self.num_cols)
            )
            for r in range(self.num_rows)
        )

    def __repr__(self) -> str:
        return f"SparseMatrix({self.num_rows}, {self.num_cols}, {self._capacity})"