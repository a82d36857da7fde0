"""
Vertex record used by the vertex-adjacency graph representation.

Each vertex owns the mapping of its outgoing edges, keyed by target label.
Incoming edges are not indexed here.
"""

import logging
from typing import Dict, Hashable

logger = logging.getLogger(__name__)


class pyvertex:
    """
    Labeled vertex holding its outgoing edges.

    Attributes:
        label: Unique vertex label within its graph
    """

    def __init__(self, label: Hashable):
        self._label = label
        # target label -> weight
        self._edges: Dict[Hashable, int] = {}

    @property
    def label(self) -> Hashable:
        return self._label

    def set_edge(self, target: Hashable, weight: int) -> int:
        """
        Set the weight of the outgoing edge to target.

        Args:
            target: Target vertex label
            weight: New weight; 0 removes the edge

        Returns:
            Previous weight, or 0 if the edge did not exist
        """
        if weight == 0:
            return self.remove_edge(target)

        previous = self._edges.get(target, 0)
        self._edges[target] = weight
        return previous

    def remove_edge(self, target: Hashable) -> int:
        """
        Remove the outgoing edge to target.

        Returns:
            Previous weight, or 0 if there was no such edge
        """
        return self._edges.pop(target, 0)

    def get_edge_weight(self, target: Hashable) -> int:
        """Get the weight of the edge to target, 0 if absent."""
        return self._edges.get(target, 0)

    def get_edges(self) -> Dict[Hashable, int]:
        """Get a copy of the outgoing edge mapping."""
        return dict(self._edges)

    def check_rep(self) -> None:
        assert self._label is not None, "Vertex label cannot be None"
        for target, weight in self._edges.items():
            assert isinstance(weight, int) and weight > 0, \
                f"Stored weight {self._label} -> {target} must be a positive int, got {weight!r}"

    def __str__(self) -> str:
        return f"{self._label}: {self._edges}"

    def __repr__(self) -> str:
        return f"pyvertex({self._label!r})"
