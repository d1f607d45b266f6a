# dsdrills

Compact implementations of classic data-structure exercises: binary search
trees, graphs, binary heaps, bounded-heap selection, recursion drills, and
stack/queue reshaping. Every function returns its result as a value instead of
printing it, so results can be reused and tested directly. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `dsdrills.bst`: binary search trees

Trees are made of `Node` objects (`val`, `left`, `right`). Values equal to a
node go into its right subtree. Functions that reshape the tree take the
current root and return the new one.

```python
from dsdrills.bst import build, contains, delete, inorder, height

root = build([50, 30, 70, 20, 40, 60, 80])
contains(root, 60)          # True
root = delete(root, 30)
inorder(root)               # [20, 40, 50, 60, 70, 80]
height(root)                # 3
```

- `insert(root, value)`, `build(values)`, `contains(root, key)`
- `delete(root, key)` removes one node; a node with two children takes the
  value of its in-order successor.
- `delete_all(root, key)` removes every node holding `key`, replacing each by
  its left subtree (its right subtree is dropped with it).
- `delete_duplicates(root)` drops a node whose direct child repeats its value:
  a repeated left child leaves the right subtree in its place, a repeated
  right child leaves the left subtree.
- `inorder(root)` and `preorder(root)` return lists of values.
- `total(root)`, `size(root)`, `height(root)` (0 for an empty tree).
- `maximum(root)` returns the largest value, but never less than 0.
- `nodes_at_level(root, current_level, level)` returns, in pre-order, the
  values at depth `level`, counting the root as depth `current_level`.
- `sample_tree()` returns a fixed three-level tree with 1 at the root,
  2 and 3 below it, and 4 to 7 as leaves.

### `dsdrills.graph`: adjacency graphs

Vertices are numbered `0 .. vertices - 1`; an out-of-range vertex raises
`IndexError` and a negative vertex count raises `ValueError`.

- `Graph(vertices)` keeps an unweighted neighbour list per vertex.
  `add_edge(src, dest, bidirectional=True)`, `has_path(src, dest)` (a
  depth-first reachability check), `dfs_order(start)` (depth-first visiting
  order, following neighbours in ascending order) and `lines()`, which gives
  one `"v->n , n , "` line per vertex.
- `WeightedGraph(vertices)` keeps `(neighbour, weight)` pairs;
  `add_edge(src, dest, weight, bidirectional=True)` and `lines()`, which gives
  one `"v->(n w)(n w)"` line per vertex.
- `WeightedMapGraph(vertices)` keeps a `{neighbour: weight}` map per vertex.
  Its `add_edge` records only the forward entry whatever `bidirectional` says,
  and setting the same pair again replaces the weight. `lines()` as above.

All three support `len()` for the vertex count.

### `dsdrills.heap`: binary heaps

- `MaxHeap` with `push`, `pop` (largest value) and `items()` (array order).
- `MinHeap` with `push`, `pop` (smallest value), `top` and `items()`.
- Both support `len()`; `pop` (and `MinHeap.top`) on an empty heap raise
  `IndexError`.
- `heapify(values, size, index)` sifts `values[index]` down in place within
  the 1-based max-heap `values[1..size]` (`values[0]` is not part of it).
- `build_max_heap(values)` returns the values rearranged into max-heap order.
- `heap_sort(values)` returns the values in ascending order.

### `dsdrills.kheap`: bounded-heap problems

- `kth_smallest(values, k=3)` and `kth_largest(values, k=3)`; with fewer than
  `k` values they return the largest or smallest value given. Empty input or
  `k < 1` raises `ValueError`.
- `sort_k_sorted(values, k=3)` sorts values that each lie at most `k` places
  from their sorted position.
- `max_heap_order(values)` returns the values largest first.

### `dsdrills.recursion`: recursion drills

`count_up(n)`, `count_down(n)`, `factorial(n)`, `sum_to(n)`, `greetings(n)`
(the string `"Good Morning"` repeated `n` times) and
`hanoi(n, source="A", spare="B", target="C")`, which returns the list of
`(from, to)` moves. A negative `n` raises `ValueError`.

```python
from dsdrills.recursion import hanoi

hanoi(2)   # [("A", "B"), ("A", "C"), ("B", "C")]
```

### `dsdrills.sequences`: stacks and queues

Stacks are sequences whose last element is the top; none of the functions
modify their input.

- `reverse_queue(queue)` returns a new `collections.deque` in reverse order.
- `push_bottom(stack, value)` returns a new stack with `value` at the bottom.
- `reverse_stack(stack)` returns a new stack with its former bottom on top.
- `top_down(stack)` returns the elements from top to bottom.

## What this package does not do

It is a library only: there is no command-line program, and nothing reads
input or prints results. Callers build the structures and pass values in
themselves.