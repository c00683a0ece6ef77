"""A directed graph with integer-weighted edges stored as adjacency maps."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, Iterator, Mapping

_ALL = object()


class WeightedGraph:
    """Directed, weighted graph: each vertex maps destinations to edge weights."""

    def __init__(self) -> None:
        self._graph: dict[Hashable, dict[Hashable, Any]] = {}

    def copy(self) -> WeightedGraph:
        """Return an independent graph with the same vertices and edges."""
        clone = WeightedGraph()
        clone._graph = {vertex: dict(edges) for vertex, edges in self._graph.items()}
        return clone

    def _adjacency(self, vertex: Hashable) -> dict[Hashable, Any]:
        try:
            return self._graph[vertex]
        except KeyError:
            raise KeyError(vertex) from None

    def empty(self, vertex: Hashable = _ALL) -> bool:
        """True when the graph has no vertices, or the vertex has no outgoing edges."""
        if vertex is _ALL:
            return not self._graph
        return not self._adjacency(vertex)

    def __len__(self) -> int:
        return len(self._graph)

    def size(self, vertex: Hashable = _ALL) -> int:
        """Number of vertices, or of outgoing edges of the given vertex."""
        if vertex is _ALL:
            return len(self._graph)
        return len(self._adjacency(vertex))

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._graph)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._graph

    def items(self) -> Iterator[tuple[Hashable, Mapping[Hashable, Any]]]:
        """Pairs of vertex and a read-only view of its adjacency map."""
        for vertex, edges in self._graph.items():
            yield vertex, MappingProxyType(edges)

    def at(self, vertex: Hashable) -> Mapping[Hashable, Any]:
        """Read-only view of the vertex's adjacency map; KeyError if absent."""
        return MappingProxyType(self._adjacency(vertex))

    def push_vertex(self, vertex: Hashable) -> bool:
        """Add a vertex; return False if it was already present."""
        if vertex in self._graph:
            return False
        self._graph[vertex] = {}
        return True

    def pop_vertex(self, vertex: Hashable) -> int:
        """Remove a vertex and every edge into it; return how many items went."""
        removed = 1 if self._graph.pop(vertex, _ALL) is not _ALL else 0
        for edges in self._graph.values():
            if edges.pop(vertex, _ALL) is not _ALL:
                removed += 1
        return removed

    def push_edge(self, source: Hashable, destination: Hashable, weight: Any) -> bool:
        """Add an edge; an existing edge keeps its weight and False is returned."""
        edges = self._adjacency(source)
        if destination in edges:
            return False
        edges[destination] = weight
        return True

    def pop_edge(self, source: Hashable, destination: Hashable) -> int:
        """Remove an edge; return the number of edges removed (0 or 1)."""
        edges = self._adjacency(source)
        return 0 if edges.pop(destination, _ALL) is _ALL else 1

    def clear(self, vertex: Hashable = _ALL) -> None:
        """Remove everything, or only the outgoing edges of the given vertex."""
        if vertex is _ALL:
            self._graph.clear()
        else:
            self._adjacency(vertex).clear()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedGraph):
            return NotImplemented
        return self._graph == other._graph

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"WeightedGraph({self._graph!r})"