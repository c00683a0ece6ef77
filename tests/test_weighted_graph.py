import pytest

from structkit.weighted_graph import WeightedGraph


@pytest.fixture
def graph():
    g = WeightedGraph()
    for v in (1, 2, 3):
        g.push_vertex(v)
    g.push_edge(1, 2, 4)
    g.push_edge(1, 3, 5)
    g.push_edge(3, 2, 1)
    return g


def test_new_graph_is_empty():
    g = WeightedGraph()
    assert g.empty()
    assert len(g) == 0
    assert g.size() == 0


def test_push_vertex_reports_insertion():
    g = WeightedGraph()
    assert g.push_vertex("a") is True
    assert g.push_vertex("a") is False
    assert list(g) == ["a"]
    assert "a" in g
    assert "b" not in g


def test_push_edge_keeps_existing_weight(graph):
    assert graph.push_edge(1, 2, 99) is False
    assert graph.at(1)[2] == 4


def test_push_edge_from_missing_source_raises(graph):
    with pytest.raises(KeyError):
        graph.push_edge(42, 1, 1)


def test_vertex_size_and_empty(graph):
    assert graph.size(1) == len(graph.at(1))
    assert graph.empty(2)
    assert not graph.empty(1)
    with pytest.raises(KeyError):
        graph.size(42)
    with pytest.raises(KeyError):
        graph.empty(42)


def test_at_is_read_only(graph):
    view = graph.at(1)
    with pytest.raises(TypeError):
        view[3] = 7
    with pytest.raises(KeyError):
        graph.at(99)


def test_pop_vertex_removes_incoming_edges(graph):
    removed = graph.pop_vertex(2)
    assert removed == 3
    assert 2 not in graph
    assert all(2 not in edges for _, edges in graph.items())


def test_pop_missing_vertex_returns_zero(graph):
    assert graph.pop_vertex(77) == 0
    assert len(graph) == 3


def test_pop_edge(graph):
    assert graph.pop_edge(1, 2) == 1
    assert graph.pop_edge(1, 2) == 0
    assert 2 not in graph.at(1)
    with pytest.raises(KeyError):
        graph.pop_edge(9, 1)


def test_clear_vertex_keeps_other_edges(graph):
    graph.clear(1)
    assert graph.empty(1)
    assert dict(graph.at(3)) == {2: 1}
    assert len(graph) == 3


def test_clear_everything(graph):
    graph.clear()
    assert graph.empty()


def test_copy_is_independent(graph):
    clone = graph.copy()
    assert clone == graph
    clone.push_edge(2, 1, 8)
    clone.push_vertex(4)
    assert clone != graph
    assert graph.empty(2)
    assert 4 not in graph


def test_items_pairs_vertices_with_edges(graph):
    pairs = {v: dict(edges) for v, edges in graph.items()}
    assert pairs == {v: dict(graph.at(v)) for v in graph}