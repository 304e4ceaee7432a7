# dstructs

Generic data structures in pure Python. Most of them guard their state with a
lock by default, so one instance can be shared between threads. Pass
`thread_safe=False` when you do not need that and want to skip the locking.

## Installation

```
pip install dstructs
```

The package has no runtime dependencies.

## What is inside

| Module                 | Contents                                                   |
|------------------------|------------------------------------------------------------|
| `dstructs.sets`        | `Set`                                                      |
| `dstructs.heaps`       | `MinHeap`, `PriorityQueue`, `PriorityQueueItem`            |
| `dstructs.caches`      | `LRUCache`, `LFUCache`                                     |
| `dstructs.graph`       | `Graph` (directed, with BFS and DFS)                       |
| `dstructs.bst`         | `BST` (unbalanced binary search tree)                      |
| `dstructs.avl`         | `AVLTree`, `AVLNode`                                       |
| `dstructs.rbtree`      | `RBTree`, `RBNode`, `Color`                                |
| `dstructs.benchmarks`  | helpers for timing operations over random data             |

## Sets

```python
from dstructs.sets import Set

a = Set(thread_safe=False)
b = Set(thread_safe=False)
for n in (1, 2, 3):
    a.add(n)
for n in (2, 3, 4):
    b.add(n)

sorted(a.union(b))         # [1, 2, 3, 4]
sorted(a.intersection(b))  # [2, 3]
sorted(a.difference(b))    # [1]
len(a)                     # 3
2 in a                     # True
a.remove(42)               # removing a missing item does nothing
```

`items()` returns the members as a list in no particular order. The set
operations return a new `Set` with the same `thread_safe` setting as the set
they were called on.

## Heaps and priority queues

`MinHeap` orders items with a `less(a, b)` function; without one it uses `<`.

```python
from dstructs.heaps import MinHeap, PriorityQueue

heap = MinHeap(lambda a, b: a < b, thread_safe=False)
for n in (5, 3, 7, 1, 4):
    heap.push(n)
heap.peek()  # 1
len(heap)    # 5
[heap.pop() for _ in range(len(heap))]  # [1, 3, 4, 5, 7]
bool(heap)   # False
```

`pop()` and `peek()` on an empty heap raise `IndexError`.

`PriorityQueue` returns `(value, priority)` pairs, lowest priority number
first. A different order can be given with a `less` function that compares two
`PriorityQueueItem` objects:

```python
queue = PriorityQueue(thread_safe=False)
queue.enqueue("write report", 5)
queue.enqueue("fix build", 1)
queue.peek()     # ("fix build", 1)
queue.dequeue()  # ("fix build", 1)

highest_first = PriorityQueue(
    thread_safe=False, less=lambda a, b: a.priority > b.priority
)
```

`dequeue()` and `peek()` on an empty queue raise `IndexError`.

## Caches

```python
from dstructs.caches import LRUCache, LFUCache

lru = LRUCache(3)
lru.put("one", 1)
lru.put("two", 2)
lru.put("three", 3)
lru.get("one")        # 1, and "one" is now the most recently used
lru.put("four", 4)    # evicts "two"
"two" in lru          # False
lru.get("two", -1)    # -1

lfu = LFUCache(3)
lfu.put("one", 1)
lfu.put("two", 2)
lfu.put("three", 3)
lfu.get("one")
lfu.get("two")
lfu.put("four", 4)    # evicts "three", the least frequently used key
```

In `LFUCache` every `get` and every `put` of an existing key counts as a use;
among keys with the same count, the one that reached that count first is
evicted first. Both caches also have `remove(key)`, `clear()` and `len()`.

## Graphs

```python
from dstructs.graph import Graph

g = Graph(thread_safe=False)
for key, value in zip("ABCDE", range(1, 6)):
    g.add_node(key, value)
g.add_edge("A", "B")
g.add_edge("B", "C")
g.add_edge("A", "D")
g.add_edge("D", "E")

g.bfs("A")            # ["A", "B", "D", "C", "E"]
g.dfs("A")            # ["A", "B", "C", "D", "E"]
g.has_edge("A", "B")  # True
g.node_value("C")     # 3
g.bfs("X")            # [] for a start key that is not a node
```

Edges are directed and may point at keys that were never added as nodes.
Traversals visit neighbours in the order of their string form, so results are
repeatable. `remove_node` also drops every edge into and out of the node.
`nodes()`, `edges()` and `neighbors(key)` return lists.

## Search trees

```python
from dstructs.avl import AVLTree

tree = AVLTree()
for key in (5, 3, 7, 1, 9):
    tree.insert(key, key * 10)
tree.delete(3)

3 in tree                  # False
tree.search(7)             # 70
tree.get(3, None)          # None
tree.in_order_traversal()  # [10, 50, 70, 90]
```

`BST` has the same `insert`, `search`, `get`, `delete` and `in` operations but
does not rebalance. `RBTree` has `insert`, `search`, `delete` and `in`; its
`search` returns the `RBNode` holding the key, with `key`, `value` and `color`
attributes. In every tree, inserting an existing key replaces its value,
deleting a missing key does nothing, and `search` raises `KeyError` for a
missing key.

## Benchmark helpers

```python
from dstructs.benchmarks import BenchmarkConfig, Operation, run_benchmark
from dstructs.sets import Set

target = Set(thread_safe=False)
config = BenchmarkConfig(size=1000, seed=42)
result = run_benchmark(config, target.clear, Operation("add", target.add), iterations=5)
result.operations_per_second
```

`generate_random_data(kind, size, seed)` returns reproducible random `int`,
`float` or `str` values and raises `TypeError` for other kinds.
`run_concurrent_benchmark` runs `config.concurrency` threads over the data on
each pass, and `run_benchmark_suite` runs a list of operations in turn.
`default_config()` seeds from the current time.

## What the package does not provide

There are no linked-list types and no insertion-ordered or key-sorted map
types; Python's own `list`, `collections.deque` and `dict` cover most of those
needs. The package has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```