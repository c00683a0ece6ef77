# structkit

Classic data structures and graph algorithms in pure Python, with no runtime
dependencies. The structures keep the shape of their textbook counterparts:
explicit iterators where position matters, a comparison function where
ordering matters, and a pluggable hash function where bucket layout matters.

## Installation

```
pip install structkit
```

To run the test suite:

```
pip install "structkit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `structkit.vector` | `Vector`, a growable array that doubles its capacity; `BasicVector`, a fixed array built from a sequence; `VectorIterator`, a random-access position |
| `structkit.linked_list` | `LinkedList`, a doubly linked list with sentinel ends, and `ListIterator` |
| `structkit.fifo_queue` | `Queue`, a first-in first-out queue built on `LinkedList` |
| `structkit.priority_queue` | `PriorityQueue`, a binary heap ordered by a comparison function |
| `structkit.bst` | `BinarySearchTree`, an unbalanced key/value tree, plus `print_tree`, `print_level_by_level` and `viz_tree` |
| `structkit.hash_functions` | `polynomial_rolling_hash` and `fnv1a_hash`, both 64-bit string hashes |
| `structkit.primes` | `next_greater_prime`, lookup of prime bucket counts |
| `structkit.unordered_map` | `UnorderedMap`, a separately chained hash map, and `print_map` |
| `structkit.hash_demo` | `HashType`, `zero_hash`, `first_character_hash`, `select_hash`, `prompt_hash_type`, `AnimalDistribution`, `bucket_report` |
| `structkit.weighted_graph` | `WeightedGraph`, a directed graph storing one adjacency map per vertex |
| `structkit.graph_algorithms` | `dijkstras_algorithm`, `topological_sort`, `parse_graph`, `format_graph`, `format_vertex_list`, `relax`, `initialize_single_source`, `compute_indegrees` |

## Examples

### Vector and iterators

```python
from structkit.vector import Vector

v = Vector()
for n in (1, 2, 3):
    v.push_back(n)
it = v.insert(v.begin() + 1, 9)   # iterator to the new element
print(list(v))                    # [1, 9, 2, 3]
print(it.value())                 # 9
v.erase(v.begin(), v.begin() + 2)
print(list(v), v.capacity())      # [2, 3] 4
```

`Vector.at` and indexing check the position against the allocated
capacity, not the number of elements; they raise `IndexError` outside it.
`front`, `back` and `pop_back` raise `IndexError` on an empty vector.

### Linked list and queue

```python
from structkit.linked_list import LinkedList
from structkit.fifo_queue import Queue

items = LinkedList(3, "x")
items.push_front("a")
items.insert(items.end(), "z")
print(list(items), list(reversed(items)))

q = Queue()
q.push(1)
q.push(2)
print(q.front(), q.back(), len(q))   # 1 2 2
q.pop()
```

Two queues compare equal when they hold equal elements in the same order.

### Priority queue

`compare(a, b)` answers "does `a` come out after `b`?". With the default
`operator.lt` the largest value is on top; pass `operator.gt` to get the
smallest first.

```python
import operator
from structkit.priority_queue import PriorityQueue

min_pq = PriorityQueue(compare=operator.gt)
for n in (5, -3, 8, 0):
    min_pq.push(n)

while not min_pq.empty():
    print(min_pq.top())
    min_pq.pop()
```

`top` and `pop` raise `IndexError` on an empty queue.

### Binary search tree

```python
from structkit.bst import BinarySearchTree, print_tree, viz_tree

tree = BinarySearchTree()
for name, score in [("Teresa", 3), ("Carlos", 7), ("Nkemdi", 1)]:
    tree.insert(name, score)

print("Carlos" in tree)     # True
print(tree.find("Teresa"))  # 3
print(tree.min())           # ('Carlos', 7)
print(len(tree))            # 3
print_tree(tree)            # sideways, right subtree on top
viz_tree(tree)              # Graphviz "digraph Tree { ... }"
```

Inserting a key that is already present replaces its value. `find` and
`erase` raise `KeyError` for a missing key; `min`, `max` and `root` raise
`ValueError` on an empty tree.

### Hash map

```python
from structkit.hash_functions import fnv1a_hash
from structkit.unordered_map import UnorderedMap, print_map

table = UnorderedMap(bucket_count=30, hash_function=fnv1a_hash)
table.insert("Brave Otter", 1)     # (('Brave Otter', 1), True)
table["Quiet Heron"]               # missing key: inserted with value None
table["Quiet Heron"] = 5
print(table.bucket_count())        # 31, rounded up to a table prime
print(table.load_factor())
print(table.erase("Brave Otter"))  # 1
print_map(table)
```

`insert` never overwrites an existing entry; it returns the stored pair and
`False`. New entries go to the front of their bucket's chain, and iteration
visits buckets in ascending order. Without a `hash_function` the built-in
`hash` is used.

### Graphs

```python
from structkit.graph_algorithms import (
    dijkstras_algorithm, format_graph, parse_graph, topological_sort,
)

graph = parse_graph(
    "1: 2(4) → 4(3)\n"
    "2: 3(3)\n"
    "3: 4(1)\n"
    "4:",
    int,
)
print(format_graph(graph))
print(dijkstras_algorithm(graph, 1, 4))   # [1, 4]
print(topological_sort(graph))            # [1, 2, 3, 4]
```

The text format is one vertex per line: the label, a colon, then outgoing
edges written as `destination(weight)` separated by arrows. Reading stops at
the first empty line or unreadable label. `dijkstras_algorithm` returns the
vertices along a shortest path, `[]` when the destination is unreachable,
and raises `KeyError` when the start vertex is not in the graph. For a graph
with a cycle, `topological_sort` returns only the vertices that could be
ordered before the cycle.

## Command-line demos

```
structkit-pq-demo
```
Fills a max-heap and a min-heap with the same ten numbers and prints them in
the order they come out.

```
structkit-bst-demo
```
Builds a tree of fifteen names with random values and prints it sideways.

```
structkit-hash-demo [DATA_DIR]
```
Asks which hash function to use, fills an `UnorderedMap` with 10,000 random
"Adjective animal" names and prints a histogram of bucket sizes with the
size, bucket count, load factor and load variance. Word lists are read from
`DATA_DIR/adjectives.txt` and `DATA_DIR/animals.txt` (one word per line);
`DATA_DIR` defaults to `../data_files`.

```
structkit-graph-demo [GRAPH_FILE]
```
Reads a graph with integer vertex labels from the file (or uses a built-in
example), prints it, reads a start and an end vertex from standard input,
and prints the shortest path and a topological ordering.

## What it does not do

- The word lists for `structkit-hash-demo` are not shipped; supply your own
  `adjectives.txt` and `animals.txt`.
- `structkit-graph-demo` reads integer vertex labels only; for other labels
  call `parse_graph` with a different `vertex_type`.
- `BinarySearchTree` does no rebalancing, and `UnorderedMap` never rehashes:
  its bucket count is fixed at construction.