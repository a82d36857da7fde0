"""
Graph contract shared by every representation.

A graph is a mutable set of uniquely labeled vertices plus a set of directed
edges with positive integer weights, at most one edge per ordered pair of
vertices. Setting an edge weight to 0 removes the edge, so 0 is never a
stored weight. Vertex labels must be immutable and hashable.

Every query returns an independent copy; callers never see live internal
state.
"""

import logging
import os
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Hashable, Iterable, Optional, Set

logger = logging.getLogger(__name__)


def read_check_rep_flag() -> bool:
    """Read the invariant-check default from WEIGHTGRAPH_CHECK_REP (off unless "1")."""
    return os.environ.get("WEIGHTGRAPH_CHECK_REP", "0") == "1"


# Default for representation-invariant checks, off outside test runs.
# Individual graphs may override with check_rep=.
iFlag_check_rep = read_check_rep_flag()


class SetPolicy(Enum):
    """How set() treats a source or target that is not yet a vertex."""
    REJECT = "reject"
    AUTO_CREATE = "auto_create"


class UnknownVertexError(ValueError):
    """Raised by set() under the reject policy when an endpoint is not a vertex."""

    def __init__(self, labels: Iterable[Hashable]):
        self.labels = tuple(labels)
        missing = ", ".join(repr(label) for label in self.labels)
        super().__init__(f"Source or target vertex not found: {missing}")


def resolve_check_rep(check_rep: Optional[bool]) -> bool:
    """Resolve a per-graph check_rep argument against the module default."""
    if check_rep is None:
        return iFlag_check_rep
    return bool(check_rep)


class Graph(ABC):
    """
    Directed, weighted graph with labeled vertices.

    Implementations:
        GraphEdgeList: vertex set plus insertion-ordered edge list
        GraphVertexAdjacency: vertex objects owning their outgoing edges
    """

    @abstractmethod
    def add(self, label: Hashable) -> bool:
        """
        Add a vertex.

        Args:
            label: Label of the new vertex

        Returns:
            True if the vertex was added, False if it was already present
        """

    @abstractmethod
    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        """
        Add, update or remove the edge from source to target.

        A positive weight inserts or updates the edge. A weight of 0 removes
        it. What happens when source or target is not a vertex depends on the
        graph's SetPolicy: REJECT raises UnknownVertexError, AUTO_CREATE adds
        the missing vertices for a positive weight.

        Args:
            source: Source vertex label
            target: Target vertex label
            weight: Non-negative integer weight

        Returns:
            Previous weight of the edge, or 0 if there was no such edge

        Raises:
            UnknownVertexError: Under REJECT, if either endpoint is missing
            ValueError: If weight is negative or not an integer, or a label is None
        """

    @abstractmethod
    def remove(self, label: Hashable) -> bool:
        """
        Remove a vertex and every edge into or out of it.

        Returns:
            True if the vertex existed, False otherwise
        """

    @abstractmethod
    def vertices(self) -> Set[Hashable]:
        """Get a copy of the set of vertex labels."""

    @abstractmethod
    def sources(self, target: Hashable) -> Dict[Hashable, int]:
        """
        Get the vertices with an edge into target.

        Returns:
            Mapping from source label to edge weight; empty if target has no
            incoming edges or is not a vertex
        """

    @abstractmethod
    def targets(self, source: Hashable) -> Dict[Hashable, int]:
        """
        Get the vertices with an edge out of source.

        Returns:
            Mapping from target label to edge weight; empty if source has no
            outgoing edges or is not a vertex
        """
