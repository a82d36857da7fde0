"""
Vertex-adjacency graph representation.

Vertices are kept as a list of pyvertex objects in insertion order, each
owning a mapping from target label to weight for its outgoing edges.
targets() reads a single vertex's mapping; sources() has to scan every
vertex because incoming edges are not indexed.
"""

import logging
from typing import Dict, Hashable, List, Optional, Set

from ..classes.vertex import pyvertex
from ..classes.utils import validate_label, validate_weight
from .graph import Graph, SetPolicy, UnknownVertexError, resolve_check_rep

logger = logging.getLogger(__name__)


class GraphVertexAdjacency(Graph):
    """
    Graph stored as vertex objects with per-vertex outgoing edge mappings.

    Defaults to SetPolicy.AUTO_CREATE: set() with a positive weight adds any
    missing endpoint before setting the edge. str() renders one line per
    vertex, e.g. "A -> {'B': 5}".
    """

    def __init__(self, policy: SetPolicy = SetPolicy.AUTO_CREATE, check_rep: Optional[bool] = None):
        """
        Initialize an empty graph.

        Args:
            policy: Handling of unknown endpoints in set()
            check_rep: Run invariant checks after each mutation. None uses the
                module default from weightgraph.core.graph
        """
        self.policy = SetPolicy(policy)
        self.iFlag_check_rep = resolve_check_rep(check_rep)

        self.aVertex: List[pyvertex] = []
        # label -> vertex, kept in step with aVertex
        self.label_to_vertex: Dict[Hashable, pyvertex] = {}

        self._check_rep()

    def _check_rep(self) -> None:
        if not self.iFlag_check_rep:
            return

        aLabel = set()
        for vertex in self.aVertex:
            assert vertex is not None, "Vertex should not be None"
            vertex.check_rep()
            assert vertex.label not in aLabel, f"Duplicate vertex {vertex.label!r}"
            aLabel.add(vertex.label)
            assert self.label_to_vertex.get(vertex.label) is vertex, \
                f"Vertex {vertex.label!r} missing from label index"
        assert len(self.label_to_vertex) == len(self.aVertex), "Label index out of sync"

        for vertex in self.aVertex:
            for target in vertex.get_edges():
                assert target in aLabel, f"Edge {vertex.label!r} -> {target!r} has an unknown target"

    def _get_vertex(self, label: Hashable) -> Optional[pyvertex]:
        """Internal accessor returning the live vertex, or None."""
        return self.label_to_vertex.get(label)

    def add(self, label: Hashable) -> bool:
        validate_label(label)
        if label in self.label_to_vertex:
            return False

        vertex = pyvertex(label)
        self.aVertex.append(vertex)
        self.label_to_vertex[label] = vertex
        logger.debug(f"Added vertex {label!r}")
        self._check_rep()
        return True

    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        validate_label(source)
        validate_label(target)
        weight = validate_weight(weight)

        missing = []
        for label in (source, target):
            if label not in self.label_to_vertex and label not in missing:
                missing.append(label)
        if missing:
            if self.policy is SetPolicy.REJECT:
                logger.warning(f"Rejected edge {source!r} -> {target!r}: unknown vertices {missing}")
                raise UnknownVertexError(missing)
            if weight == 0:
                return 0
            for label in missing:
                self.add(label)
            logger.debug(f"Auto-created vertices {missing} for edge {source!r} -> {target!r}")

        previous = self.label_to_vertex[source].set_edge(target, weight)
        if weight == 0:
            if previous:
                logger.debug(f"Removed edge {source!r} -> {target!r}")
        else:
            logger.debug(f"Set edge {source!r} -> {target!r} [weight={previous} -> {weight}]")
        self._check_rep()
        return previous

    def remove(self, label: Hashable) -> bool:
        vertex = self.label_to_vertex.pop(label, None)
        if vertex is None:
            return False

        self.aVertex.remove(vertex)
        nEdge_in = 0
        for other in self.aVertex:
            if other.remove_edge(label):
                nEdge_in += 1
        logger.debug(f"Removed vertex {label!r}, {len(vertex.get_edges())} outgoing "
                     f"and {nEdge_in} incoming edges")
        self._check_rep()
        return True

    def vertices(self) -> Set[Hashable]:
        return {vertex.label for vertex in self.aVertex}

    def sources(self, target: Hashable) -> Dict[Hashable, int]:
        aSource = {}
        for vertex in self.aVertex:
            weight = vertex.get_edge_weight(target)
            if weight != 0:
                aSource[vertex.label] = weight
        return aSource

    def targets(self, source: Hashable) -> Dict[Hashable, int]:
        vertex = self.label_to_vertex.get(source)
        if vertex is None:
            return {}
        return vertex.get_edges()

    def __len__(self) -> int:
        return len(self.aVertex)

    def __contains__(self, label: Hashable) -> bool:
        return label in self.label_to_vertex

    def __str__(self) -> str:
        return "".join(f"{vertex.label} -> {vertex.get_edges()}\n" for vertex in self.aVertex)

    def __repr__(self) -> str:
        nEdge = sum(len(vertex.get_edges()) for vertex in self.aVertex)
        return f"GraphVertexAdjacency(vertices={len(self.aVertex)}, edges={nEdge}, policy={self.policy.value})"
