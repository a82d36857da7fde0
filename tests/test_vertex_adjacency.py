"""
Tests for GraphVertexAdjacency and pyvertex.

Covered:
- default auto-create policy
- str() rendering in vertex insertion order
- pyvertex record
- invariant checks
"""

import pytest

from weightgraph import GraphVertexAdjacency, SetPolicy, UnknownVertexError, pyvertex


@pytest.fixture
def graph():
    return GraphVertexAdjacency(check_rep=True)


class TestGraphVertexAdjacency:
    """Behaviour specific to the vertex-adjacency representation"""

    def test_default_policy_is_auto_create(self, graph):
        assert graph.policy is SetPolicy.AUTO_CREATE

    def test_set_creates_missing_vertices(self, graph):
        assert graph.set("X", "Y", 5) == 0
        assert graph.vertices() == {"X", "Y"}
        assert graph.targets("X") == {"Y": 5}
        assert graph.sources("Y") == {"X": 5}

    def test_set_creates_only_missing_vertex(self, graph):
        graph.add("X")
        graph.set("X", "Y", 5)
        assert [vertex.label for vertex in graph.aVertex] == ["X", "Y"]

    def test_str_empty_graph(self, graph):
        assert str(graph) == ""

    def test_str_one_line_per_vertex(self, graph):
        graph.set("A", "B", 5)
        assert str(graph) == "A -> {'B': 5}\nB -> {}\n"

    def test_remove_strips_incoming_edges(self, graph):
        graph.set("A", "B", 5)
        graph.set("C", "B", 10)
        graph.remove("B")
        assert graph._get_vertex("A").get_edges() == {}
        assert graph._get_vertex("C").get_edges() == {}
        assert graph._get_vertex("B") is None

    def test_reject_policy_override(self):
        graph = GraphVertexAdjacency(policy=SetPolicy.REJECT, check_rep=True)
        with pytest.raises(UnknownVertexError):
            graph.set("X", "Y", 5)
        assert graph.vertices() == set()

    def test_repr(self, graph):
        graph.set("A", "B", 5)
        assert repr(graph) == "GraphVertexAdjacency(vertices=2, edges=1, policy=auto_create)"


class TestVertexAdjacencyInvariants:
    """Representation invariant checks"""

    def test_duplicate_label_detected(self, graph):
        graph.add("A")
        graph.aVertex.append(pyvertex("A"))
        with pytest.raises(AssertionError):
            graph._check_rep()

    def test_edge_to_unknown_vertex_detected(self, graph):
        graph.add("A")
        graph._get_vertex("A").set_edge("Z", 1)
        with pytest.raises(AssertionError):
            graph._check_rep()

    def test_checks_disabled(self):
        graph = GraphVertexAdjacency(check_rep=False)
        graph.aVertex.append(pyvertex("A"))
        graph._check_rep()


class TestPyVertex:
    """Vertex record"""

    def test_creation(self):
        vertex = pyvertex("A")
        assert vertex.label == "A"
        assert vertex.get_edges() == {}

    def test_set_edge_returns_previous_weight(self):
        vertex = pyvertex("A")
        assert vertex.set_edge("B", 5) == 0
        assert vertex.set_edge("B", 8) == 5
        assert vertex.get_edge_weight("B") == 8

    def test_set_edge_zero_removes(self):
        vertex = pyvertex("A")
        vertex.set_edge("B", 5)
        vertex.set_edge("C", 1)
        assert vertex.set_edge("B", 0) == 5
        assert vertex.get_edges() == {"C": 1}

    def test_remove_edge_returns_previous_weight(self):
        vertex = pyvertex("A")
        vertex.set_edge("B", 5)
        vertex.set_edge("C", 1)
        assert vertex.remove_edge("B") == 5
        assert vertex.remove_edge("B") == 0

    def test_missing_edge_weight_is_zero(self):
        assert pyvertex("A").get_edge_weight("B") == 0

    def test_get_edges_is_copy(self):
        vertex = pyvertex("A")
        vertex.set_edge("B", 5)
        edges = vertex.get_edges()
        edges["B"] = 100
        assert vertex.get_edge_weight("B") == 5

    def test_str(self):
        vertex = pyvertex("A")
        vertex.set_edge("B", 5)
        assert str(vertex) == "A: {'B': 5}"

    def test_label_is_read_only(self):
        with pytest.raises(AttributeError):
            pyvertex("A").label = "B"
