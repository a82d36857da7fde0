"""
Factory for selecting a graph representation at construction time.
"""

import logging
from typing import Optional

from .graph import Graph, SetPolicy
from .edge_list import GraphEdgeList
from .vertex_adjacency import GraphVertexAdjacency

logger = logging.getLogger(__name__)

REPRESENTATIONS = {
    "edge_list": GraphEdgeList,
    "vertex_adjacency": GraphVertexAdjacency,
}


def create_graph(representation: str = "edge_list",
                 policy: Optional[SetPolicy] = None,
                 check_rep: Optional[bool] = None) -> Graph:
    """
    Create an empty graph.

    Args:
        representation: "edge_list" or "vertex_adjacency"
        policy: Handling of unknown endpoints in set(). None keeps the
            representation's default (REJECT for edge_list, AUTO_CREATE for
            vertex_adjacency)
        check_rep: Run invariant checks after each mutation. None uses the
            module default

    Returns:
        An empty graph of the requested representation

    Raises:
        ValueError: If the representation name is unknown
    """
    graph_class = REPRESENTATIONS.get(representation)
    if graph_class is None:
        raise ValueError(f"Unknown graph representation '{representation}', "
                         f"expected one of {sorted(REPRESENTATIONS)}")

    if policy is None:
        graph = graph_class(check_rep=check_rep)
    else:
        graph = graph_class(policy=policy, check_rep=check_rep)

    logger.info(f"Created {graph_class.__name__} with policy {graph.policy.value}")
    return graph
