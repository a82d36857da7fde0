"""
weightgraph - Directed Weighted Graph Library

A Python library providing a directed, weighted graph abstract data type with
two interchangeable in-memory representations. Edge weights are positive
integers; setting a weight of 0 removes the edge.

Main Classes:
    Graph: Abstract contract shared by all representations
    GraphEdgeList: Vertex set plus insertion-ordered edge list
    GraphVertexAdjacency: Vertex objects owning their outgoing edges
    pyedge: Edge record used by GraphEdgeList
    pyvertex: Vertex record used by GraphVertexAdjacency

Example:
    >>> from weightgraph import GraphEdgeList
    >>> graph = GraphEdgeList()
    >>> graph.add("A")
    True
    >>> graph.add("B")
    True
    >>> graph.set("A", "B", 5)
    0
    >>> graph.targets("A")
    {'B': 5}
"""

__version__ = "0.1.0"
__author__ = "Chang Liao"

from weightgraph.classes.edge import pyedge
from weightgraph.classes.vertex import pyvertex
from weightgraph.classes.utils import to_weight_matrix
from weightgraph.core.graph import Graph, SetPolicy, UnknownVertexError
from weightgraph.core.edge_list import GraphEdgeList
from weightgraph.core.vertex_adjacency import GraphVertexAdjacency
from weightgraph.core.factory import create_graph

__all__ = [
    'Graph',
    'GraphEdgeList',
    'GraphVertexAdjacency',
    'SetPolicy',
    'UnknownVertexError',
    'create_graph',
    'pyedge',
    'pyvertex',
    'to_weight_matrix',
]
