"""Dense two-dimensional matrix of floats stored in row-major order."""

from __future__ import annotations

from typing import Iterator


def _format_number(value: float) -> str:
    return f"{value:g}"


class Matrix:
    """A fixed-size matrix of floats, initialised to zero."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, num_rows: int, num_cols: int) -> None:
        if num_rows < 0 or num_cols < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.num_rows = num_rows
        self.num_cols = num_cols
        self._values = [0.0] * (num_rows * num_cols)

    def _offset(self, key: tuple[int, int]) -> int:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise TypeError("matrix indices must be a (row, col) pair") from None
        if not (0 <= row < self.num_rows and 0 <= col < self.num_cols):
            raise IndexError(f"index ({row}, {col}) out of range")
        return self.num_cols * row + col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self._values[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self._values[self._offset(key)] = float(value)

    def add(self, other: Matrix) -> Matrix:
        """Return the element-wise sum of two matrices of the same shape."""
        if (self.num_rows, self.num_cols) != (other.num_rows, other.num_cols):
            raise ValueError("cannot add matrices of different shapes")
        result = Matrix(self.num_rows, self.num_cols)
        result._values = [a + b for a, b in zip(self._values, other._values)]
        return result

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.num_rows == other.num_rows
            and self.num_cols == other.num_cols
            and self._values == other._values
        )

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        result = Matrix(self.num_cols, self.num_rows)
        for r, row in enumerate(self.rows()):
            for c, value in enumerate(row):
                result[c, r] = value
        return result

    def rows(self) -> list[tuple[float, ...]]:
        """Return the matrix contents as a list of row tuples."""
        return [tuple(row) for row in self._iter_rows()]

    def _iter_rows(self) -> Iterator[list[float]]:
        for start in range(0, self.num_rows * self.num_cols, self.num_cols or 1):
            yield self._values[start:start + self.num_cols]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(_format_number(value) for value in row) for row in self.rows()
        )

    def __repr__(self) -> str:
        return f"Matrix({self.num_rows}, {self.num_cols})"