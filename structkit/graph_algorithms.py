"""Shortest paths, topological ordering and text I/O for weighted graphs."""

from __future__ import annotations

import argparse
import heapq
import itertools
import math
import sys
from collections import deque
from pathlib import Path
from typing import Any, Callable, Hashable, Iterable, Iterator, Sequence

from structkit.weighted_graph import WeightedGraph

ARROW_SEPARATOR = " \u2192 "

INFINITY = math.inf

GRAPH_TEXT = (
    "1: 2(4) \u2192 4(3) \u2192 5(3)\n"
    "2: 3(3) \u2192 4(3) \u2192 7(6)\n"
    "3: 4(1)\n"
    "4: 6(6) \u2192 7(8)\n"
    "5:\n"
    "6: 5(5)\n"
    "7: 6(6)"
)


def relax(
    u: Hashable,
    v: Hashable,
    weight: Any,
    distances: dict[Hashable, Any],
    predecessors: dict[Hashable, Hashable | None],
) -> bool:
    """Shorten the distance to v through u if possible; return whether it changed."""
    candidate = distances[u] + weight
    if distances[v] > candidate:
        distances[v] = candidate
        predecessors[v] = u
        return True
    return False


def initialize_single_source(
    graph: WeightedGraph, initial_node: Hashable
) -> tuple[dict[Hashable, Any], dict[Hashable, Hashable | None]]:
    """Distances (infinite except 0 at the source) and empty predecessors."""
    if initial_node not in graph:
        raise KeyError(initial_node)
    distances: dict[Hashable, Any] = {vertex: INFINITY for vertex in graph}
    predecessors: dict[Hashable, Hashable | None] = {vertex: None for vertex in graph}
    distances[initial_node] = 0
    return distances, predecessors


def dijkstras_algorithm(
    graph: WeightedGraph, initial_node: Hashable, destination_node: Hashable
) -> list[Hashable]:
    """Vertices on a shortest path from initial to destination, or [] if none."""
    distances, predecessors = initialize_single_source(graph, initial_node)
    visited: set[Hashable] = set()
    order = itertools.count()
    heap: list[tuple[Any, int, Hashable]] = [(0, next(order), initial_node)]

    while heap:
        distance, _, u = heapq.heappop(heap)
        if u in visited or distance > distances[u]:
            continue
        visited.add(u)
        for v, weight in graph.at(u).items():
            if v in visited or v not in distances:
                continue
            if relax(u, v, weight, distances, predecessors):
                heapq.heappush(heap, (distances[v], next(order), v))

    path: deque[Hashable] = deque()
    node = destination_node
    seen = {node}
    while predecessors.get(node) is not None:
        path.appendleft(node)
        node = predecessors[node]
        if node in seen:
            raise ValueError("predecessor chain contains a cycle")
        seen.add(node)

    if path or initial_node == destination_node:
        path.appendleft(initial_node)
    return list(path)


def compute_indegrees(graph: WeightedGraph) -> dict[Hashable, int]:
    """Number of incoming edges of every vertex (and of every edge target)."""
    indegrees: dict[Hashable, int] = {vertex: 0 for vertex in graph}
    for _, edges in graph.items():
        for destination in edges:
            indegrees[destination] = indegrees.get(destination, 0) + 1
    return indegrees


def topological_sort(graph: WeightedGraph) -> list[Hashable]:
    """Vertices in topological order; with a cycle, only those ordered before it."""
    indegrees = compute_indegrees(graph)
    ready: deque[Hashable] = deque(v for v in graph if indegrees[v] == 0)
    ordering: list[Hashable] = []
    while ready:
        vertex = ready.popleft()
        ordering.append(vertex)
        for destination in graph.at(vertex):
            indegrees[destination] -= 1
            if indegrees[destination] == 0:
                ready.append(destination)
    return ordering


def format_graph(graph: WeightedGraph) -> str:
    """One line per vertex: ``v: d(w) → d(w)``, lines joined without a final newline."""
    lines = []
    for vertex, edges in graph.items():
        rendered = ARROW_SEPARATOR.join(f"{d}({w})" for d, w in edges.items())
        lines.append(f"{vertex}: {rendered}")
    return "\n".join(lines)


def _parse_edges(rest: str, vertex_type: Callable[[str], Any]) -> Iterator[tuple[Any, int]]:
    pos = 0
    while True:
        open_at = rest.find("(", pos)
        if open_at < 0:
            return
        close_at = rest.find(")", open_at)
        if close_at < 0:
            return
        vertex_tokens = rest[pos:open_at].split()
        weight_tokens = rest[open_at + 1 : close_at].split()
        if not vertex_tokens or not weight_tokens:
            return
        try:
            destination = vertex_type(vertex_tokens[0])
            weight = int(weight_tokens[0])
        except ValueError:
            return
        yield destination, weight
        pos = close_at + 1
        while pos < len(rest) and rest[pos].isspace():
            pos += 1
        while pos < len(rest) and not rest[pos].isspace():
            pos += 1


def parse_graph(text: str, vertex_type: Callable[[str], Any] = int) -> WeightedGraph:
    """Read a graph in the format written by format_graph.

    Reading stops at the first empty line or at a line whose vertex label
    cannot be read; edges stop at the first one that cannot be read.
    """
    graph = WeightedGraph()
    for line in text.splitlines():
        if not line:
            break
        label, _, rest = line.partition(":")
        tokens = label.split()
        if not tokens:
            break
        try:
            vertex = vertex_type(tokens[0])
        except ValueError:
            break
        graph.push_vertex(vertex)
        for destination, weight in _parse_edges(rest, vertex_type):
            graph.push_edge(vertex, destination, weight)
    return graph


def format_vertex_list(items: Iterable[Any], label: str) -> str:
    """``Start <label>: a → b :End <label>``."""
    body = ARROW_SEPARATOR.join(str(item) for item in items)
    return f"Start {label}: {body} :End {label}"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Print a graph, a shortest path between two vertices read from stdin, and a topological order."""
    parser = argparse.ArgumentParser(
        prog="graph-algorithms",
        description="Run Dijkstra's algorithm and a topological sort on a graph.",
    )
    parser.add_argument("graph_file", nargs="?", help="file holding the graph text")
    args = parser.parse_args(argv)

    if args.graph_file is None:
        text = GRAPH_TEXT
    else:
        text = Path(args.graph_file).read_text(encoding="utf-8")
    graph = parse_graph(text, int)

    out = sys.stdout
    out.write(format_graph(graph) + "\n")

    tokens = _tokens(sys.stdin)
    endpoints = []
    for prompt in ("Input Start Vertex Label for Dijkstra's: ",
                   "Input End Vertex Label for Dijkstra's: "):
        out.write(prompt)
        out.flush()
        token = next(tokens, None)
        if token is None:
            sys.stderr.write("missing vertex label\n")
            return 1
        try:
            endpoints.append(int(token))
        except ValueError:
            sys.stderr.write(f"invalid vertex label: {token}\n")
            return 1

    start, end = endpoints
    try:
        shortest = dijkstras_algorithm(graph, start, end)
    except KeyError:
        sys.stderr.write(f"unknown start vertex: {start}\n")
        return 1
    out.write(format_vertex_list(shortest, "Dijkstra's") + "\n")
    out.write(format_vertex_list(topological_sort(graph), "Topological Sort") + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())