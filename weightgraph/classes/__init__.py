"""
Element classes for graph representation.

This module contains the edge and vertex records used inside the graph
representations, plus shared helpers.
"""

from .edge import pyedge
from .vertex import pyvertex
from .utils import to_weight_matrix, validate_label, validate_weight

__all__ = [
    'pyedge',
    'pyvertex',
    'to_weight_matrix',
    'validate_label',
    'validate_weight',
]
