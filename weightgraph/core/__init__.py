"""
Graph contract and its representations.

This module contains the abstract graph contract and the two concrete
representations that satisfy it.
"""

from .graph import Graph, SetPolicy, UnknownVertexError
from .edge_list import GraphEdgeList
from .vertex_adjacency import GraphVertexAdjacency
from .factory import create_graph

__all__ = [
    'Graph',
    'SetPolicy',
    'UnknownVertexError',
    'GraphEdgeList',
    'GraphVertexAdjacency',
    'create_graph',
]
