# dsalgo

A small collection of classic data structures and algorithms, written
for clarity and study. Everything is plain Python with no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `dsalgo.sorting`: in-place `bubble_sort` (stops early once a pass makes no
  swap), `insertion_sort` and `selection_sort`. Each takes an optional `key`
  function. Bubble and insertion sort are stable; selection sort is not, and it
  raises `ValueError` for an empty list. Helpers: `is_sorted`, `is_ordered`,
  `sort_pair` and `min_index`.
- `dsalgo.searching`: `count`, `sequential_search` (index or -1),
  `sorted_count`, `binary_search`, `recursive_binary_search`, and
  `traced_binary_search`. The traced search returns a `SearchResult` with
  `index`, `steps`, `trace` (one `(left, right, middle)` tuple per probe) and
  `found`.
- `dsalgo.compression`: `letter_counts` returns the counts of the lowercase
  letters in alphabetical order. `compress_by_table` writes them as letter and
  count, so `"aaabbc"` becomes `"a3b2c1"`. `compress_by_sorting` sorts all
  characters and writes each run the same way.
- `dsalgo.recursion`: `fibonacci` (iterative), `recursive_fibonacci`,
  `recursive_sum`, `permutations` (a generator that swaps items in place) and
  `countdown`.
- `dsalgo.matrix`: `Matrix`, a dense matrix of floats. It is indexed as
  `m[row, col]` and supports `add` / `+`, `transpose`, `rows` and equality.
- `dsalgo.polynomial`: `Polynomial`, with a coefficient stored for every
  exponent up to `max_degree` (100 by default). It provides `new_term`,
  `coefficient`, `add`, `multiply` and `evaluate`. `multiply` requires equal
  maximum degrees.
- `dsalgo.sparse_polynomial`: `SparsePolynomial`, which keeps only non-zero
  `Term`s. Terms are expected to be added in ascending order of exponent.
- `dsalgo.sparse_matrix`: `SparseMatrix`, which keeps non-zero `MatrixTerm`s
  sorted by row and column. It provides `set_value`, `get_value`, `transpose`,
  `terms` and `format_terms`. Its `capacity` doubles when full.
- `dsalgo.mystring`: `MyString`, with `substr`, `concat`, `insert`, `find`,
  `resize` (which pads with NUL characters when growing) and `is_empty`.
- `dsalgo.stack`: `Stack`, a LIFO stack whose capacity doubles on demand, and
  `reverse_string`.
- `dsalgo.queue`: `CircularQueue`, a ring buffer that keeps one slot free and
  doubles when full. It provides `enqueue`, `dequeue`, `front`, `rear` and
  `debug_view`. `Deque` builds on it with `push_front`, `push_back`,
  `pop_front`, `pop_back` and `back`.
- `dsalgo.hanoi`: `Towers` and `hanoi_moves`. Moves are returned as
  `(disk, source, target)` tuples. An illegal move raises `IllegalMoveError`.
- `dsalgo.maze`: `Maze` and `Pos`. `Maze.default()` is a 10 by 9 maze.
  `solve_recursive` marks every reachable cell and returns whether the goal was
  reached. `solve_with_stack` returns the positions visited, ending at the goal
  if it was found.
- `dsalgo.josephus`: `josephus(n, k)` returns the order in which people are
  removed and the survivor.
- `dsalgo.expression`: `precedence`, `infix_to_postfix`, `eval_postfix` and
  `evaluate`. These work on expressions with one-digit operands and `+ - * /`.
  Division truncates toward zero.

## Examples

```python
from dsalgo.sorting import bubble_sort
from dsalgo.searching import binary_search
from dsalgo.polynomial import Polynomial

values = [5, 1, 4, 2, 8]
bubble_sort(values)
print(values)                     # [1, 2, 4, 5, 8]
print(binary_search(values, 4))   # 2

p = Polynomial(2)
p.new_term(1, 0)
p.new_term(1.5, 1)
p.new_term(2, 2)
print(p)                          # 1 + 1.5*x^1 + 2*x^2
print(p.evaluate(2.0))            # 12.0
```

```python
from dsalgo.expression import evaluate, infix_to_postfix
from dsalgo.josephus import josephus

print(infix_to_postfix("1+(1*2+3)*4"))  # 112*3+4*+
print(evaluate("1+(1*2+3)*4"))          # 21
print(josephus(7, 3))                   # ([3, 6, 2, 7, 5, 1], 4)
```

## What it does not do

The package is a library only. It installs no command-line program. Its
functions return results rather than printing them: the step-by-step
demonstrations are left to the caller, who can use values such as
`SearchResult.trace`, `CircularQueue.debug_view()` or the move lists from
`hanoi_moves`.