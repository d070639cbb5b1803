# algokit

A collection of classic algorithms in plain Python, with no third-party
dependencies. Every function takes ordinary Python values (lists, strings,
integers, tuples) and returns new values; inputs are left untouched.

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

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `count_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `bubble_sort`, `recursive_bubble_sort`, `selection_sort`, `shell_sort` |
| `algokit.conversions` | `decimal_to_binary`, `binary_to_decimal`, `decimal_to_hexadecimal`, `hexadecimal_to_decimal`, `decimal_to_octal`, `octal_to_decimal` |
| `algokit.strings` | `first_non_repeating`, `prefix_function`, `is_palindrome`, `reverse_string`, `reverse_words`, `string_hash`, `keep_letters`, `permutations`, `anagram_deletions`, `to_24_hour` |
| `algokit.arrays` | `max_activities`, `remove_duplicates`, `reverse_array`, `trapped_water`, `triplet_count`, `two_sum`, `equal_formation`, `equilibrium_index`, `max_subarray` (returning a `SubarraySum`), `merge_sorted`, `merge_k_sorted`, `rotate`, `sorted_union` |
| `algokit.numbers` | `josephus`, `fibonacci`, `nth_root`, `pascal_triangle`, `primes_up_to`, `power_mod`, `matrix_chain_order`, `knapsack` |
| `algokit.graphs` | `is_bipartite`, `prim_mst`, `bfs` |
| `algokit.backtracking` | `solve_maze`, `solve_sudoku`, `knights_tour`, `place_queens`, `hanoi_moves` |

## Examples

### Sorting

Each sort takes any iterable and returns a new sorted list. `count_sort` and
`radix_sort` accept only non-negative integers and raise `ValueError`
otherwise.

```python
from algokit.sorting import merge_sort, radix_sort

merge_sort([5, 2, 9, 1])              # [1, 2, 5, 9]
radix_sort([82, 901, 100, 12, 150])   # [12, 82, 100, 150, 901]
```

### Number bases

Non-positive numbers give an empty digit string. `binary_to_decimal` and
`octal_to_decimal` read the decimal digits of an integer as digits of the
other base.

```python
from algokit.conversions import decimal_to_hexadecimal, binary_to_decimal

decimal_to_hexadecimal(255)   # "FF"
binary_to_decimal(1011)       # 11
```

### Strings

```python
from algokit.strings import reverse_words, to_24_hour, prefix_function

reverse_words("Ikl like this code")   # "code this like Ikl"
to_24_hour("07:05:45PM")              # "19:05:45"
prefix_function("abcabcd")            # [0, 0, 0, 1, 2, 3, 0]
```

`to_24_hour` raises `ValueError` for text not of the form `hh:mm:ssAM` or
`hh:mm:ssPM`.

### Arrays

```python
from algokit.arrays import max_subarray, rotate, sorted_union

max_subarray([-2, -3, 4, -1, -2, 1, 5, -3])
# SubarraySum(total=7, start=2, end=6)

rotate([4, 5, 6, 7, 0, 1, 2], 3)      # [0, 1, 2, 4, 5, 6, 7]
sorted_union([5, 10, 15, 20, 25], [50, 40, 30, 20, 10])
# [5, 10, 15, 20, 25, 30, 40, 50]
```

`two_sum` and `equilibrium_index` return `None` when there is no answer;
`max_subarray` raises `ValueError` on empty input.

### Numbers

`fibonacci` and `power_mod` work modulo 1 000 000 007.

```python
from algokit.numbers import fibonacci, primes_up_to, nth_root

fibonacci(10)       # 55
primes_up_to(10)    # [2, 3, 5, 7]
nth_root(3, 11)     # about 2.22398
```

### Graphs

Vertices are numbered `0..vertices-1`; an edge outside that range raises
`ValueError`, as does a graph that `prim_mst` cannot span.

```python
from algokit.graphs import is_bipartite, prim_mst, bfs

is_bipartite(4, [(0, 1), (1, 2), (2, 3), (3, 0)])    # True
prim_mst(3, [(0, 1, 4), (1, 2, 1), (0, 2, 3)], 0)    # [(0, 1)... ] parent/vertex pairs
bfs([(1, 2), (1, 3), (2, 4)], 1)                     # [1, 2, 3, 4]
```

### Backtracking

```python
from algokit.backtracking import place_queens, hanoi_moves

place_queens(4)          # [1, 3, 0, 2]
hanoi_moves(2)           # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

`solve_maze`, `solve_sudoku`, `knights_tour` and `place_queens` return `None`
when no solution exists.

## What this package does not do

It is a library of functions only: there is no command-line program. It
offers no search routines over sorted sequences (binary or ternary search,
lower and upper bounds), no prefix tree, and no linked-list, stack or queue
classes; use the standard library (`bisect`, `collections.deque`) for those.