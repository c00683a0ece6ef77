import io
import math

import pytest

from structkit.graph_algorithms import (
    ARROW_SEPARATOR,
    GRAPH_TEXT,
    INFINITY,
    compute_indegrees,
    dijkstras_algorithm,
    format_graph,
    format_vertex_list,
    initialize_single_source,
    main,
    parse_graph,
    relax,
    topological_sort,
)
from structkit.weighted_graph import WeightedGraph


@pytest.fixture
def sample():
    return parse_graph(GRAPH_TEXT)


def _path_weight(graph, path):
    return sum(graph.at(a)[b] for a, b in zip(path, path[1:]))


def test_parse_sample_structure(sample):
    assert list(sample) == [1, 2, 3, 4, 5, 6, 7]
    assert dict(sample.at(1)) == {2: 4, 4: 3, 5: 3}
    assert sample.empty(5)


def test_format_parse_round_trip(sample):
    assert parse_graph(format_graph(sample)) == sample


def test_format_small_graph():
    g = WeightedGraph()
    g.push_vertex(1)
    g.push_vertex(2)
    g.push_edge(1, 2, 4)
    g.push_edge(1, 3, 5)
    assert format_graph(g) == "1: 2(4) \u2192 3(5)\n2: "


def test_parse_stops_at_empty_line():
    g = parse_graph("1: 2(1)\n\n3: 1(2)")
    assert list(g) == [1]


def test_parse_stops_at_bad_vertex():
    g = parse_graph("1: 2(1)\nx: 1(2)\n3:")
    assert list(g) == [1]


def test_parse_string_vertices():
    g = parse_graph("a: b(2) -> c(3)\nb:", str)
    assert dict(g.at("a")) == {"b": 2, "c": 3}
    assert list(g) == ["a", "b"]


def test_initialize_single_source(sample):
    distances, predecessors = initialize_single_source(sample, 3)
    assert distances[3] == 0
    assert all(distances[v] == INFINITY for v in sample if v != 3)
    assert all(p is None for p in predecessors.values())
    with pytest.raises(KeyError):
        initialize_single_source(sample, 42)


def test_relax_updates_when_shorter():
    distances = {"u": 2, "v": math.inf}
    predecessors = {"u": None, "v": None}
    assert relax("u", "v", 3, distances, predecessors) is True
    assert distances["v"] == 2 + 3
    assert predecessors["v"] == "u"


def test_relax_keeps_shorter_distance():
    distances = {"u": 5, "v": 1}
    predecessors = {"u": None, "v": None}
    assert relax("u", "v", 3, distances, predecessors) is False
    assert distances["v"] == 1
    assert predecessors["v"] is None


def test_dijkstra_sample_path(sample):
    assert dijkstras_algorithm(sample, 1, 6) == [1, 4, 6]


def test_dijkstra_path_is_valid_and_minimal(sample):
    for dest in sample:
        path = dijkstras_algorithm(sample, 1, dest)
        assert path[0] == 1
        assert path[-1] == dest
        weight = _path_weight(sample, path)
        for other in sample:
            via = dijkstras_algorithm(sample, 1, other)
            if via and dest in sample.at(other):
                assert weight <= _path_weight(sample, via) + sample.at(other)[dest]


def test_dijkstra_same_node(sample):
    assert dijkstras_algorithm(sample, 5, 5) == [5]


def test_dijkstra_unreachable(sample):
    assert dijkstras_algorithm(sample, 5, 1) == []
    assert dijkstras_algorithm(sample, 1, 99) == []


def test_dijkstra_unknown_source(sample):
    with pytest.raises(KeyError):
        dijkstras_algorithm(sample, 99, 1)


def test_compute_indegrees_totals(sample):
    indegrees = compute_indegrees(sample)
    assert set(indegrees) == set(sample)
    assert sum(indegrees.values()) == sum(sample.size(v) for v in sample)
    assert indegrees[1] == 0


def test_topological_sort_respects_edges(sample):
    order = topological_sort(sample)
    assert sorted(order) == sorted(sample)
    position = {v: i for i, v in enumerate(order)}
    for v, edges in sample.items():
        for d in edges:
            assert position[v] < position[d]


def test_topological_sort_with_cycle_is_partial():
    g = parse_graph("1: 2(1)\n2: 1(1)\n3:")
    assert topological_sort(g) == [3]


def test_format_vertex_list():
    assert format_vertex_list([1, 2], "X") == "Start X: 1 \u2192 2 :End X"
    assert format_vertex_list([], "Y") == "Start Y:  :End Y"


def test_main_default_graph(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    graph = parse_graph(GRAPH_TEXT)
    assert out.startswith(format_graph(graph) + "\n")
    lines = out.splitlines()
    assert lines[-2].endswith(format_vertex_list(dijkstras_algorithm(graph, 1, 6), "Dijkstra's"))
    assert lines[-1] == format_vertex_list(topological_sort(graph), "Topological Sort")


def test_main_reads_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("1: 2(3)\n2:", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Start Dijkstra's: 1" + ARROW_SEPARATOR + "2 :End Dijkstra's" in out


def test_main_missing_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1