"""
Pytest configuration and shared fixtures.
"""

import pytest

from weightgraph import GraphEdgeList, GraphVertexAdjacency


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "contract: tests every representation must pass"
    )
    config.addinivalue_line(
        "markers", "unit: tests of a single class"
    )


@pytest.fixture(params=[GraphEdgeList, GraphVertexAdjacency], ids=["edge_list", "vertex_adjacency"])
def graph_class(request):
    """Each graph representation in turn"""
    return request.param


@pytest.fixture
def empty_graph(graph_class):
    """Empty graph with invariant checks switched on"""
    return graph_class(check_rep=True)


@pytest.fixture
def abc_graph(empty_graph):
    """
    Graph with vertices A, B, C and edges:

        A --5--> B <--10-- C
    """
    for label in ("A", "B", "C"):
        empty_graph.add(label)
    empty_graph.set("A", "B", 5)
    empty_graph.set("C", "B", 10)
    return empty_graph
