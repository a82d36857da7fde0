"""
Edge-list graph representation.

Vertices are kept in a set of labels and edges in a list of pyedge records in
insertion order. Edge lookup, sources() and targets() are linear scans of the
edge list.
"""

import logging
from typing import Dict, Hashable, List, Optional, Set

from ..classes.edge import pyedge
from ..classes.utils import validate_label, validate_weight
from .graph import Graph, SetPolicy, UnknownVertexError, resolve_check_rep

logger = logging.getLogger(__name__)


class GraphEdgeList(Graph):
    """
    Graph stored as a vertex set plus an ordered list of edges.

    Defaults to SetPolicy.REJECT: set() on a label that was never added
    raises UnknownVertexError. str() renders one line per edge in insertion
    order, e.g. "A -> B [weight=5]".
    """

    def __init__(self, policy: SetPolicy = SetPolicy.REJECT, check_rep: Optional[bool] = None):
        """
        Initialize an empty graph.

        Args:
            policy: Handling of unknown endpoints in set()
            check_rep: Run invariant checks after each mutation. None uses the
                module default from weightgraph.core.graph
        """
        self.policy = SetPolicy(policy)
        self.iFlag_check_rep = resolve_check_rep(check_rep)

        self.aVertex: Set[Hashable] = set()
        self.aEdge: List[pyedge] = []

        self._check_rep()

    def _check_rep(self) -> None:
        if not self.iFlag_check_rep:
            return

        aPair = set()
        for edge in self.aEdge:
            edge.check_rep()
            assert edge.source in self.aVertex, f"Edge {edge} has an unknown source"
            assert edge.target in self.aVertex, f"Edge {edge} has an unknown target"
            pair = (edge.source, edge.target)
            assert pair not in aPair, f"Duplicate edge {edge.source} -> {edge.target}"
            aPair.add(pair)

    def _find_edge_index(self, source: Hashable, target: Hashable) -> Optional[int]:
        for i, edge in enumerate(self.aEdge):
            if edge.connects(source, target):
                return i
        return None

    def add(self, label: Hashable) -> bool:
        validate_label(label)
        if label in self.aVertex:
            return False

        self.aVertex.add(label)
        logger.debug(f"Added vertex {label!r}")
        self._check_rep()
        return True

    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        validate_label(source)
        validate_label(target)
        weight = validate_weight(weight)

        missing = []
        for label in (source, target):
            if label not in self.aVertex and label not in missing:
                missing.append(label)
        if missing:
            if self.policy is SetPolicy.REJECT:
                logger.warning(f"Rejected edge {source!r} -> {target!r}: unknown vertices {missing}")
                raise UnknownVertexError(missing)
            if weight == 0:
                # an edge cannot touch a missing vertex, so there is nothing to delete
                return 0
            for label in missing:
                self.add(label)
            logger.debug(f"Auto-created vertices {missing} for edge {source!r} -> {target!r}")

        index = self._find_edge_index(source, target)

        if index is None:
            if weight > 0:
                self.aEdge.append(pyedge(source, target, weight))
                logger.debug(f"Added edge {source!r} -> {target!r} [weight={weight}]")
            self._check_rep()
            return 0

        edge = self.aEdge[index]
        previous = edge.weight
        if weight == 0:
            del self.aEdge[index]
            logger.debug(f"Removed edge {source!r} -> {target!r}")
        else:
            edge.weight = weight
            logger.debug(f"Updated edge {source!r} -> {target!r} [weight={previous} -> {weight}]")
        self._check_rep()
        return previous

    def remove(self, label: Hashable) -> bool:
        if label not in self.aVertex:
            return False

        nEdge_before = len(self.aEdge)
        self.aEdge = [edge for edge in self.aEdge if not edge.touches(label)]
        self.aVertex.remove(label)
        logger.debug(f"Removed vertex {label!r} and {nEdge_before - len(self.aEdge)} edges")
        self._check_rep()
        return True

    def vertices(self) -> Set[Hashable]:
        return set(self.aVertex)

    def sources(self, target: Hashable) -> Dict[Hashable, int]:
        return {edge.source: edge.weight for edge in self.aEdge if edge.target == target}

    def targets(self, source: Hashable) -> Dict[Hashable, int]:
        return {edge.target: edge.weight for edge in self.aEdge if edge.source == source}

    def __len__(self) -> int:
        return len(self.aVertex)

    def __contains__(self, label: Hashable) -> bool:
        return label in self.aVertex

    def __str__(self) -> str:
        return "".join(f"{edge}\n" for edge in self.aEdge)

    def __repr__(self) -> str:
        return f"GraphEdgeList(vertices={len(self.aVertex)}, edges={len(self.aEdge)}, policy={self.policy.value})"
