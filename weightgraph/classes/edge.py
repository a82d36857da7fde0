"""
Edge record used by the edge-list graph representation.

An edge is a directed relation from a source label to a target label with a
positive integer weight. The endpoints are fixed at construction; only the
weight may change, and only through the owning graph.
"""

import logging
from typing import Hashable

logger = logging.getLogger(__name__)


class pyedge:
    """
    Directed, weighted edge between two vertex labels.

    Attributes:
        source: Label of the vertex the edge leaves
        target: Label of the vertex the edge enters
        weight: Positive integer weight
    """

    def __init__(self, source: Hashable, target: Hashable, weight: int):
        """
        Initialize an edge.

        Args:
            source: Source vertex label
            target: Target vertex label
            weight: Edge weight, must be positive while the edge is stored
        """
        self._source = source
        self._target = target
        self.weight = weight

    @property
    def source(self) -> Hashable:
        return self._source

    @property
    def target(self) -> Hashable:
        return self._target

    def connects(self, source: Hashable, target: Hashable) -> bool:
        """Check whether this edge runs from source to target."""
        return self._source == source and self._target == target

    def touches(self, label: Hashable) -> bool:
        """Check whether the label is either endpoint of this edge."""
        return self._source == label or self._target == label

    def check_rep(self) -> None:
        assert self._source is not None, "Edge source cannot be None"
        assert self._target is not None, "Edge target cannot be None"
        assert isinstance(self.weight, int) and self.weight > 0, \
            f"Stored edge weight must be a positive int, got {self.weight!r}"

    def __str__(self) -> str:
        return f"{self._source} -> {self._target} [weight={self.weight}]"

    def __repr__(self) -> str:
        return f"pyedge({self._source!r}, {self._target!r}, {self.weight!r})"
