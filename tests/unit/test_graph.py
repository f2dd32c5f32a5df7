"""Unit tests for Graph."""

import pytest

from dsviz.components.graph import Graph


@pytest.fixture
def graph():
    """Graph with A->B, A->C, B->D, C->E, D->E."""
    g = Graph()
    for vertex_id in "ABCDE":
        g.add_vertex(vertex_id)
    for source, target in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "E")]:
        g.add_edge(source, target)
    return g


def test_bfs_order(graph):
    """Test breadth-first order follows edge insertion order."""
    assert graph.bfs("A") == ["A", "B", "C", "D", "E"]


def test_dfs_order(graph):
    """Test depth-first preorder."""
    assert graph.dfs("A") == ["A", "B", "D", "E", "C"]


def test_traversal_from_missing_vertex(graph):
    """Test traversals from an absent vertex return []."""
    assert graph.bfs("Z") == []
    assert graph.dfs("Z") == []


def test_traversal_ignores_unreachable():
    """Test disconnected vertices are not visited."""
    g = Graph()
    for vertex_id in "ABC":
        g.add_vertex(vertex_id)
    g.add_edge("A", "B")

    assert g.bfs("A") == ["A", "B"]
    assert g.dfs("C") == ["C"]


def test_cycle_terminates():
    """Test traversals stop on cycles and self-loops."""
    g = Graph()
    g.add_vertex("A")
    g.add_vertex("B")
    g.add_edge("A", "B")
    g.add_edge("B", "A")
    g.add_edge("A", "A")

    assert g.bfs("A") == ["A", "B"]
    assert g.dfs("B") == ["B", "A"]


def test_add_vertex_duplicate_and_label():
    """Test duplicate ids are rejected and labels default to the id."""
    g = Graph()
    assert g.add_vertex("A") is True
    assert g.add_vertex("A", "Again") is False
    assert g.add_vertex("B", "Bee") is True

    assert g.vertex_label("A") == "A"
    assert g.vertex_label("B") == "Bee"
    assert g.vertex_label("Z") is None


def test_add_edge_requires_endpoints():
    """Test add_edge fails when an endpoint is missing."""
    g = Graph()
    g.add_vertex("A")

    assert g.add_edge("A", "B") is False
    assert g.add_edge("B", "A") is False
    assert g.edge_count() == 0


def test_add_edge_overwrites_weight(graph):
    """Test a second add_edge replaces the weight."""
    graph.add_edge("A", "B", 5)

    assert graph.neighbors("A") == {"B": 5, "C": 1}
    assert graph.edge_count() == 5


def test_remove_vertex_drops_incident_edges(graph):
    """Test removing a vertex removes incoming and outgoing edges."""
    assert graph.remove_vertex("D") is True

    assert not graph.has_vertex("D")
    for edge in graph.edges():
        assert "D" not in (edge["source"], edge["target"])
    assert graph.neighbors("B") == {}
    assert graph.bfs("A") == ["A", "B", "C", "E"]
    assert graph.remove_vertex("D") is False


def test_remove_edge(graph):
    """Test remove_edge and its failure sentinel."""
    assert graph.remove_edge("A", "C") is True
    assert not graph.has_edge("A", "C")
    assert graph.remove_edge("A", "C") is False
    assert graph.remove_edge("Z", "A") is False


def test_graph_data(graph):
    """Test the render snapshot contains labels and edges."""
    data = graph.graph_data()

    assert [n["id"] for n in data["nodes"]] == ["A", "B", "C", "D", "E"]
    assert {"source": "A", "target": "B", "weight": 1} in data["edges"]
    assert len(data["edges"]) == 5
    assert len(graph) == 5
