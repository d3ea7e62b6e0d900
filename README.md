# algokit

Classic algorithms written as small, plain Python functions. The package has
no runtime dependencies. It is meant for study and for everyday use on small
inputs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `numbered_grid`, `hourglass`, `snail` (spiral), `triangle`, `reshape_transposed`, `format_grid` |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `build_heap`, `heap_sort`, `rank_scores` |
| `algokit.searching` | `binary_search`, `nearest`, `find_string` (brute force), `rabin_karp` |
| `algokit.numbers` | `fibonacci`, `fibonacci_memo`, `gcd`, `lcm`, `is_prime`, `is_prime_sqrt`, `sieve`, `prime_factors` |
| `algokit.money` | `coin_count` (greedy change with 500/100/50/10 coins), `currency_breakdown` |
| `algokit.tree` | `Node`, `complete_tree`, `preorder`, `inorder`, `postorder` |
| `algokit.text` | `first_positions`, `repeat_characters`, `word_count`, `most_frequent_letter`, `write_text_file` |
| `algokit.traversal` | `bfs`, `dfs`, `topological_sort` (raises `CycleError`), `strongly_connected_components` |
| `algokit.paths` | `dijkstra` (distance matrix), `dijkstra_heap` (adjacency lists), `floyd_warshall`, `INF` |
| `algokit.disjoint_set` | `DisjointSet` with `find`, `union`, `connected`; `Edge` and `kruskal` |
| `algokit.flow` | `bipartite_matching`, `max_flow` (Edmonds–Karp) |

A few behaviours worth knowing:

- The sorting functions accept any iterable and return a new list; the input
  is left untouched.
- `binary_search` returns the index of the target or `None`; `find_string`
  returns the first index or `-1`; `rabin_karp` returns every match index.
- `nearest` raises `ValueError` for an empty input.
- `fibonacci(0) == 0`; `fibonacci_memo` takes `n >= 1` and keeps earlier
  results between calls.
- `most_frequent_letter` returns `"?"` when letters tie for the highest count.
- `dijkstra` and `floyd_warshall` expect a square matrix and use `INF`
  (`1_000_000_000`) for missing edges; they raise `ValueError` otherwise.
- `max_flow` takes a mapping from directed edges `(u, v)` to capacities.

## Examples

```python
from algokit.sorting import heap_sort
from algokit.numbers import gcd, lcm, prime_factors
from algokit.traversal import bfs
from algokit.disjoint_set import DisjointSet

heap_sort([2, 5, 4, 7, 6, 8, 1])   # [1, 2, 4, 5, 6, 7, 8]
gcd(10, 8), lcm(10, 8)             # (2, 40)
prime_factors(36)                  # [2, 2, 3, 3]

graph = {1: [2, 3], 2: [1, 4, 5], 3: [1, 6, 7]}
bfs(graph, 1)                      # [1, 2, 3, 4, 5, 6, 7]

ds = DisjointSet(range(1, 11))
ds.union(1, 2)
ds.union(2, 3)
ds.connected(1, 3)                 # True
```

The grid helpers return lists of rows. `format_grid` turns them into
tab-separated text:

```python
from algokit.arrays import snail, format_grid

print(format_grid(snail(5)))
```

## What the package does not do

There is no command-line program: everything is used by importing the
modules. Functions return values and raise exceptions on bad input; apart
from `write_text_file`, they do not print or touch files.