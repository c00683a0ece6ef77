"""Vectors, linked lists, queues, heaps, search trees, hash maps and weighted graphs."""

__version__ = "0.1.0"

__all__ = [
    "bst",
    "fifo_queue",
    "graph_algorithms",
    "hash_demo",
    "hash_functions",
    "linked_list",
    "primes",
    "priority_queue",
    "unordered_map",
    "vector",
    "weighted_graph",
]