"""
Utility functions for weightgraph.

This module provides helpers shared by both graph representations: weight
validation and a dense weight-matrix export for diagnostics.
"""

import logging
from typing import Any, Hashable, List, Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def validate_label(label: Any) -> Any:
    """
    Validate a vertex label passed to add() or set().

    Raises:
        ValueError: If the label is None
    """
    if label is None:
        raise ValueError("Vertex label cannot be None")
    return label


def validate_weight(weight: Any) -> int:
    """
    Validate an edge weight passed to a graph's set operation.

    Args:
        weight: Candidate weight

    Returns:
        The weight, unchanged

    Raises:
        ValueError: If the weight is not a non-negative integer
    """
    # bool is an int subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, (int, np.integer)):
        raise ValueError(f"Edge weight must be an integer, got {type(weight).__name__}")
    if weight < 0:
        raise ValueError(f"Edge weight must be non-negative, got {weight}")
    return int(weight)


def to_weight_matrix(graph: Any,
                     labels: Optional[Sequence[Hashable]] = None) -> Tuple[List[Hashable], np.ndarray]:
    """
    Export the graph's edges as a dense weight matrix.

    Rows are sources and columns are targets; a zero entry means no edge.
    Works with any graph exposing vertices() and targets().

    Args:
        graph: Graph to export
        labels: Optional row/column order. Defaults to the sorted vertex labels.
            Edges to labels outside this order are left out.

    Returns:
        Tuple of (labels in matrix order, int64 matrix of shape (n, n))
    """
    if labels is None:
        aLabel = sorted(graph.vertices())
    else:
        aLabel = list(labels)

    index = {label: i for i, label in enumerate(aLabel)}
    if len(index) != len(aLabel):
        raise ValueError("Matrix labels must be unique")

    matrix = np.zeros((len(aLabel), len(aLabel)), dtype=np.int64)
    nSkipped = 0
    for label in aLabel:
        row = index[label]
        for target, weight in graph.targets(label).items():
            col = index.get(target)
            if col is None:
                nSkipped += 1
                continue
            matrix[row, col] = weight

    if nSkipped:
        logger.debug(f"Skipped {nSkipped} edges to labels outside the matrix order")
    logger.debug(f"Exported weight matrix of shape {matrix.shape}")
    return aLabel, matrix
