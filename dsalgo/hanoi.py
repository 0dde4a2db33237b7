"""Tower of Hanoi played on three stacks."""

from __future__ import annotations

from dsalgo.stack import Stack

Move = tuple[int, int, int]


class IllegalMoveError(Exception):
    """Raised when a move takes from an empty peg or covers a smaller disk."""


class Towers:
    """Three pegs with ``num_disks`` disks stacked on peg 0, largest at the bottom.

    Disks are numbered 1 (smallest) to ``num_disks`` (largest).
    """

    def __init__(self, num_disks: int = 3) -> None:
        if num_disks < 0:
            raise ValueError("number of disks must be non-negative")
        self.num_disks = num_disks
        self._pegs: tuple[Stack[int], ...] = tuple(Stack() for _ in range(3))
        for disk in range(num_disks, 0, -1):
            self._pegs[0].push(disk)

    def pegs(self) -> tuple[tuple[int, ...], ...]:
        """Return each peg's disks from bottom to top."""
        return tuple(tuple(peg) for peg in self._pegs)

    def _peg(self, index: int) -> Stack[int]:
        if not 0 <= index < len(self._pegs):
            raise IndexError(f"no peg {index}")
        return self._pegs[index]

    def move_disk(self, source: int, target: int) -> int:
        """Move the top disk from ``source`` to ``target``; return the disk."""
        src, dst = self._peg(source), self._peg(target)
        if src.is_empty():
            raise IllegalMoveError(f"peg {source} is empty")
        disk = src.top()
        if not dst.is_empty() and dst.top() < disk:
            raise IllegalMoveError(f"cannot place {disk} on {dst.top()}")
        src.pop()
        dst.push(disk)
        return disk

    def move_disks(self, n: int, source: int, temp: int, target: int) -> list[Move]:
        """Move the top ``n`` disks from ``source`` to ``target`` via ``temp``.

        Returns the moves made as ``(disk, source, target)`` tuples.
        """
        if n <= 0:
            return []
        moves = self.move_disks(n - 1, source, target, temp)
        moves.append((self.move_disk(source, target), source, target))
        moves.extend(self.move_disks(n - 1, temp, source, target))
        return moves

    def __str__(self) -> str:
        lines = ["# Towers"]
        lines.extend(f"{index}: {peg}" for index, peg in enumerate(self._pegs))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Towers(pegs={self.pegs()!r})"


def hanoi_moves(num_disks: int) -> list[Move]:
    """Return the moves that carry ``num_disks`` disks from peg 0 to peg 2."""
    return Towers(num_disks).move_disks(num_disks, 0, 1, 2)