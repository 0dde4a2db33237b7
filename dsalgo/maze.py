"""Grid maze explored by recursion or with an explicit stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from dsalgo.stack import Stack

WALL = "1"
OPEN = "0"
GOAL = "G"
VISITED = "v"

_DEFAULT_ROWS = (
    "111111111",
    "1S0000001",
    "111101011",
    "100000001",
    "101111111",
    "100000001",
    "111110111",
    "111000101",
    "1000000G1",
    "111111111",
)


@dataclass(frozen=True)
class Pos:
    """A (row, col) position in the maze."""

    row: int
    col: int

    def __add__(self, other: Pos) -> Pos:
        return Pos(self.row + other.row, self.col + other.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


# North, west, south, east.
_DIRECTIONS = (Pos(-1, 0), Pos(0, -1), Pos(1, 0), Pos(0, 1))


class Maze:
    """Rectangular grid of cells: '1' wall, '0' open, 'G' goal, 'v' visited."""

    def __init__(self, rows: Iterable[Iterable[str]]) -> None:
        grid = [list(row) for row in rows]
        if not grid or not grid[0]:
            raise ValueError("maze must not be empty")
        if any(len(row) != len(grid[0]) for row in grid):
            raise ValueError("maze rows must all have the same length")
        self._grid = grid

    @classmethod
    def default(cls) -> Maze:
        """Return the standard 10 by 9 maze with its start at (1, 1)."""
        return cls(_DEFAULT_ROWS)

    @property
    def num_rows(self) -> int:
        return len(self._grid)

    @property
    def num_cols(self) -> int:
        return len(self._grid[0])

    def _inside(self, pos: Pos) -> bool:
        return 0 <= pos.row < self.num_rows and 0 <= pos.col < self.num_cols

    def _cell(self, pos: Pos) -> str:
        if not self._inside(pos):
            raise IndexError(f"position {pos} outside the maze")
        return self._grid[pos.row][pos.col]

    def _mark(self, pos: Pos) -> None:
        self._grid[pos.row][pos.col] = VISITED

    def can_enter(self, pos: Pos) -> bool:
        """Return True if ``pos`` is inside the maze and open or the goal."""
        return self._inside(pos) and self._grid[pos.row][pos.col] in (OPEN, GOAL)

    def solve_recursive(self, start: Pos) -> bool:
        """Mark every cell reachable from ``start``; return True if the goal was reached."""
        self._cell(start)
        return self._explore(start)

    def _explore(self, pos: Pos) -> bool:
        if self._grid[pos.row][pos.col] == GOAL:
            return True
        self._mark(pos)
        found = False
        for step in _DIRECTIONS:
            nxt = pos + step
            if self.can_enter(nxt):
                found = self._explore(nxt) or found
        return found

    def solve_with_stack(self, start: Pos) -> list[Pos]:
        """Search depth-first with a stack and return the positions in visiting order.

        The search stops at the goal, which is then the last position returned.
        """
        self._cell(start)
        pending: Stack[Pos] = Stack()
        pending.push(start)
        visited: list[Pos] = []
        while not pending.is_empty():
            pos = pending.pop()
            visited.append(pos)
            if self._grid[pos.row][pos.col] == GOAL:
                break
            self._mark(pos)
            for step in _DIRECTIONS:
                nxt = pos + step
                if self.can_enter(nxt):
                    pending.push(nxt)
        return visited

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self._grid)

    def __repr__(self) -> str:
        return f"Maze({[''.join(row) for row in self._grid]!r})"