"""Concrete implementations of the Graph interface."""

from .edge_indexed import EdgeIndexedGraph, EdgeRecord
from .vertex_indexed import VertexIndexedGraph, VertexRecord

__all__ = [
    "EdgeIndexedGraph",
    "EdgeRecord",
    "VertexIndexedGraph",
    "VertexRecord",
]
