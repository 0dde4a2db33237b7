"""Classic data structures and algorithms: sorting, searching, recursion,
matrices, polynomials, strings, stacks, queues and small puzzles built on them."""

__version__ = "0.1.0"

__all__ = [
    "compression",
    "expression",
    "hanoi",
    "josephus",
    "matrix",
    "maze",
    "mystring",
    "polynomial",
    "queue",
    "recursion",
    "searching",
    "sorting",
    "sparse_matrix",
    "sparse_polynomial",
    "stack",
]