"""Weighted directed graph interface, errors and validation helpers."""

from .errors import (
    GraphError,
    InvalidArgumentError,
    InvalidVertexError,
    InvalidWeightError,
    RepInvariantError,
)
from .graph import Graph
from .validation import is_vertex_label, validate_vertex, validate_weight

__all__ = [
    "Graph",
    "GraphError",
    "InvalidArgumentError",
    "InvalidVertexError",
    "InvalidWeightError",
    "RepInvariantError",
    "is_vertex_label",
    "validate_vertex",
    "validate_weight",
]
