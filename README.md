# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Everything is a library: import the module you need and call it.

## What is inside

**Containers**

- `dsakit.dynamic_array`: `DynamicArray`, an array of `n` slots (each starting as
  `None`) with a strictly bounds-checked `at()` that raises `IndexError`,
  concatenation with `+`, `copy()` and `to_string(sep)`. `Student` is a small
  name/grade record that prints as `[Name: ..., Standard: ...]`.
- `dsakit.singly_linked_list`: `SinglyLinkedList`, a forward list with
  `push_front`, `pop_front`, `front`, `insert_after`, `erase_after`, `remove_if`,
  `sort`, `reverse`, `unique` and `copy`. Positions are zero-based indices. Also the
  `Citizen` record and the `eligible_voters` (age 18 or over) and
  `eligible_next_year` (age 17) filters.
- `dsakit.median`: `RunningMedian`, the median of a stream kept with two heaps;
  `get()` raises `ValueError` before anything is inserted.

**Trees**

- `dsakit.org_tree`: `OrgTree`, an organisation chart where each position has at
  most two subordinates. `add_subordinate` raises `PositionNotFoundError` or
  `TooManySubordinatesError`; `pre_order`, `in_order`, `post_order` return lists of
  positions and `level_order` returns one list per level.
- `dsakit.bst`: `BinarySearchTree` with `insert`, `find`, `search_path`, `in`,
  `inorder`, `successor` and `delete` (equal values go right).

**Probabilistic membership**

- `dsakit.bloom_filter`: `BloomFilter` over non-negative integers with three fixed
  hash functions; `lookup(key)` (or `key in bf`) may give false positives, never
  false negatives.

**Divide and conquer**

- `dsakit.searching`: `linear_search`, `binary_search` (on an ascending sequence).
- `dsakit.sorting`: `merge`, `merge_sort` (returns a new list), `quick_sort`
  (sorts in place).
- `dsakit.selection`: `find_median`, `partition_using_pivot` and
  `linear_time_select(items, i)`, the 1-based i-th smallest element by median of
  medians.

**Greedy algorithms**

- `dsakit.scheduling`: `waiting_times`, `average_waiting_time`, `shortest_job_first`.
- `dsakit.knapsack`: `KnapsackObject`, `fill_knapsack` (fractional knapsack; the
  last item is cut to fit) and `random_objects`.
- `dsakit.kruskal`: `DisjointSet` and `minimum_spanning_tree`.
- `dsakit.coloring`: `greedy_coloring` and `color_names`.

**Graphs**

- `dsakit.graph`: the directed, weighted edge-list `Graph` (vertices numbered from 1;
  `add_edge` raises `ValueError` for unknown vertices), `Edge`, and
  `create_reference_graph(weighted)`, an eight-vertex sample graph.
- `dsakit.traversal`: `breadth_first_search`, `depth_first_search`.
- `dsakit.shortest_paths`: `prim_mst` (vertices in settling order) and
  `dijkstra_shortest_path` (raises `ValueError` if the destination is unreachable).
- `dsakit.bellman_ford`: `WeightedEdge`, `relax_edges`, `has_negative_cycle`,
  `bellman_ford` (raises `NegativeCycleError`) and `format_distances`. Unreached
  vertices have distance `None`.
- `dsakit.johnson`: `dense_dijkstra`, `reweighting_potentials` and `johnson`, an
  all-pairs distance matrix with `None` for unreachable pairs.
- `dsakit.kosaraju`: `transpose` and `kosaraju` strongly connected components over
  adjacency lists.

**Dynamic programming and exhaustive search**

- `dsakit.subset_sum`: `all_subsets`, and brute-force, backtracking and memoized
  subset sum (the latter two require non-negative items).
- `dsakit.lcs`: `lcs_brute_force`, `common_subsequences` and `format_subsequences`.

## Examples

```python
from dsakit.median import RunningMedian

med = RunningMedian()
for value in (1, 5, 2, 10, 40):
    med.insert(value)
print(med.get())  # 5.0
```

```python
from dsakit.graph import create_reference_graph
from dsakit.shortest_paths import dijkstra_shortest_path

graph = create_reference_graph(True)
print(dijkstra_shortest_path(graph, 1, 6))  # [1, 2, 4, 6]
```

```python
from dsakit.bellman_ford import NegativeCycleError, bellman_ford

edges = [(0, 1, 3), (1, 2, 5), (1, 3, 10), (3, 2, -7), (2, 4, 2)]
print(bellman_ford(5, edges, 0))

try:
    bellman_ford(3, [(0, 1, 1), (1, 2, -2), (2, 1, 1)], 0)
except NegativeCycleError:
    print("negative cycle")
```

```python
from dsakit.kosaraju import kosaraju

adjacency = [[1, 3], [2, 4], [3, 5], [7], [2], [4, 6], [7, 2], [8], [3]]
print(kosaraju(adjacency))
```

```python
from dsakit.subset_sum import subset_sum_memoization

print(subset_sum_memoization([13, 79, 45, 29], 58))  # True
```

## What it does not include

There is no general-purpose hash table here (the Bloom filter is the only hashing
structure), no adjacency-matrix graph type, and no Fibonacci or factorial helpers.
The package has no command-line tool; it is used by importing its modules.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```