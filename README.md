# dsakit

A small collection of classic data structures and algorithms in plain Python.
It has no runtime dependencies.

## Installation

```
pip install dsakit
```

## Data structures

- `dsakit.queues.Queue`: a queue filled at the right and emptied from either end, with `push` (returns the queue, so calls chain), `pop_left`, `pop_right`, `empty` and `len()`. Popping an empty queue raises `dsakit.queues.EmptyQueueError`, a subclass of `IndexError`.
- `dsakit.priority_queue.PriorityQueue`: a binary heap of `PriorityQueueItem(value, priority)` objects that pops the highest priority first. Each item's `index` field tracks its position in the heap (`-1` once popped). `update(item, value, priority)` changes an item in place and restores heap order; it raises `ValueError` for an item not in the queue. `push` raises `TypeError` for anything that is not a `PriorityQueueItem`, and `pop` raises `IndexError` when the queue is empty.
- `dsakit.min_heap.MinHeap`: a min-heap of ints, optionally built from an iterable. `push` raises `TypeError` for non-int values (including `bool`); `pop` returns the smallest value and raises `IndexError` when empty.
- `dsakit.stack.Stack`: a LIFO stack. `push` returns the stack; `pop` returns `None` when the stack is empty.
- `dsakit.hash_table.HashTable(size)`: a string-to-string table with `size` buckets, a character-sum hash and separate chaining. `set` stores or replaces a value, `get` returns the value or `None`, `delete` returns whether the key was present, and `in` tests membership. A non-positive size raises `ValueError`.
- `dsakit.graph.Graph`: an undirected adjacency-list graph. `add_node` and `add_edge` return the graph, so calls chain; `neighbors` returns a copy of a node's neighbours in insertion order, or `None` for an unknown node; `empty()` and `len()` report on the nodes.
- `dsakit.binary_tree.BinaryTreeNode(value, left=None, right=None)`: a binary tree node, with `pre_order_traversal`, `in_order_traversal` and `post_order_traversal`, each returning a list of values (empty for `None`).
- `dsakit.trie.Trie`: a prefix tree with `insert`, `search`, `starts_with` and `delete`. `delete` prunes the word's branch back to the nearest node holding another word.

## Algorithms

- `dsakit.search.bfs(graph, start)` and `dsakit.search.dfs(graph, start, visited=None)`: the nodes reachable from `start` in breadth-first or depth-first order. An empty graph gives `[]`; a start node that is not in a non-empty graph gives `[start]`. `dfs` skips nodes already in `visited` and adds the nodes it reaches to that set.
- `dsakit.permutations.permutations(nums)`: every ordering of a sequence, in swap-backtracking order. The input is left unchanged.
- `dsakit.merge_sort.merge_sort(arr)`: a new, stably sorted list.
- `dsakit.fibonacci`: `fib(n)` (plain recursion), `fib_memo(n, memo=None)` (caches results in `memo`) and `fib_bottom_up(n)` (iterative).
- `dsakit.jump_game`: the number of ways to climb `n` stairs taking one or two steps at a time, with `jump_recursive(n)` (cached recursion), `jump_recursive_memo(n, memo=None)` and `jump_bottom_up(n)` (0 for negative `n`).
- `dsakit.knapsack.fractional_knapsack(weights, values, capacity)`: the greedy fractional knapsack. Items may be taken in part; items of zero weight follow float arithmetic and can make the result infinite or NaN. Sequences of different lengths raise `ValueError`.

## Examples

```python
from dsakit.graph import Graph
from dsakit.search import bfs, dfs

graph = Graph()
graph.add_edge("A", "B").add_edge("A", "C").add_edge("B", "D").add_edge("C", "D").add_edge("D", "E")

bfs(graph, "A")  # ['A', 'B', 'C', 'D', 'E']
dfs(graph, "A")  # ['A', 'B', 'D', 'C', 'E']
```

```python
from dsakit.trie import Trie

trie = Trie()
trie.insert("apple")
trie.search("apple")     # True
trie.search("app")       # False
trie.starts_with("app")  # True
```

```python
from dsakit.priority_queue import PriorityQueue, PriorityQueueItem

pq = PriorityQueue()
low = PriorityQueueItem("low", 1)
pq.push(low)
pq.push(PriorityQueueItem("high", 3))
pq.update(low, "urgent", 10)
pq.pop().value  # 'urgent'
```

```python
from dsakit.knapsack import fractional_knapsack

fractional_knapsack([10, 20, 30], [60, 100, 120], 50)  # 240.0
```

```python
from dsakit.merge_sort import merge_sort
from dsakit.permutations import permutations

merge_sort([38, 27, 43, 3, 9, 82, 10])  # [3, 9, 10, 27, 38, 43, 82]
permutations([1, 2, 3])
# [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 2, 1], [3, 1, 2]]
```

## Running the tests

```
pip install -e ".[test]"
pytest
```