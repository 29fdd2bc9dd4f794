"""Interface for a mutable, weighted, directed graph.

Defines the `Graph` abstraction shared by every backing representation.
Vertices are labels of any hashable type; edges are directed and carry a
positive integer weight. A weight of 0 means "no edge", so setting an edge's
weight to 0 deletes it.
"""

from __future__ import annotations

import abc
import builtins
from typing import Generic, TypeVar

L = TypeVar("L")  # vertex label


class Graph(abc.ABC, Generic[L]):
    """A mutable, weighted, directed graph over vertex labels of type `L`.

    The graph is a set of vertices and a set of edges. Every edge endpoint is
    a vertex of the graph, and each ordered (source, target) pair carries at
    most one edge. Iteration order of anything returned is unspecified.

    Collections returned by queries are fresh snapshots: mutating them never
    affects the graph.

    Note: implementations are not thread-safe; share a graph across threads
    only behind external synchronization.
    """

    @abc.abstractmethod
    def add(self, vertex: L) -> bool:
        """Add a vertex to the graph.

        Args:
            vertex (L): Label of the vertex to add.

        Returns:
            bool: True if the vertex was added, False if it was already
                present (in which case the graph is unchanged).

        Raises:
            InvalidVertexError: If `vertex` is None or unhashable.
        """

    @abc.abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """Add, update or delete the edge from `source` to `target`.

        Both endpoints are added to the graph if absent, even when `weight` is
        0. A non-zero weight creates the edge or replaces its weight; a zero
        weight deletes the edge if it exists.

        Args:
            source (L): Label of the source vertex.
            target (L): Label of the target vertex.
            weight (int): The new weight, a non-negative integer.

        Returns:
            int: The previous weight of the edge, or 0 if there was no edge.

        Raises:
            InvalidVertexError: If `source` or `target` is None or unhashable.
            InvalidWeightError: If `weight` is negative or not an integer.
        """

    @abc.abstractmethod
    def remove(self, vertex: L) -> bool:
        """Remove a vertex and every edge into or out of it.

        Args:
            vertex (L): Label of the vertex to remove.

        Returns:
            bool: True if the vertex was present, False otherwise (in which
                case the graph is unchanged).
        """

    @abc.abstractmethod
    def vertices(self) -> builtins.set[L]:
        """Get all vertices in the graph.

        Returns:
            set[L]: A snapshot of the vertex labels.
        """

    @abc.abstractmethod
    def sources(self, target: L) -> dict[L, int]:
        """Get the vertices with an edge into `target`.

        Args:
            target (L): Label of the target vertex.

        Returns:
            dict[L, int]: Each source vertex mapped to the weight of its edge
                into `target`. Empty if there are none or `target` is absent.
        """

    @abc.abstractmethod
    def targets(self, source: L) -> dict[L, int]:
        """Get the vertices reached by an edge out of `source`.

        Args:
            source (L): Label of the source vertex.

        Returns:
            dict[L, int]: Each target vertex mapped to the weight of the edge
                from `source`. Empty if there are none or `source` is absent.
        """

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human-readable rendering of the vertices and weighted edges.

        The format is not stable and is not meant to be parsed.
        """
