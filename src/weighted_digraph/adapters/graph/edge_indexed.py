"""Edge-indexed implementation of the Graph interface.

The graph keeps a set of vertex labels next to a flat list of immutable
`EdgeRecord`s. No vertex owns an edge; edges are owned by the graph.
"""

from __future__ import annotations

import builtins
import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from weighted_digraph import config
from weighted_digraph.interfaces.graph import (
    Graph,
    RepInvariantError,
    is_vertex_label,
    validate_vertex,
    validate_weight,
)

L = TypeVar("L")  # vertex label

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EdgeRecord(Generic[L]):
    """An immutable directed edge with a positive weight."""

    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        validate_vertex(self.source)
        validate_vertex(self.target)
        validate_weight(self.weight, allow_zero=False)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class EdgeIndexedGraph(Graph[L]):
    """Graph backed by a vertex set and a list of edge records.

    At most one record exists per (source, target) pair. Changing a weight
    replaces the record rather than mutating it.

    Note: This implementation is not thread-safe.
    """

    def __init__(self, *, check_rep: bool | None = None) -> None:
        self._vertices: builtins.set[L] = set()
        self._edges: list[EdgeRecord[L]] = []
        self._check_rep_enabled = (
            config.check_rep_enabled() if check_rep is None else check_rep
        )
        self._after_mutation()

    # --- internals ---

    def _find_edge(self, source: L, target: L) -> EdgeRecord[L] | None:
        for edge in self._edges:
            if edge.source == source and edge.target == target:
                return edge
        return None

    def _after_mutation(self) -> None:
        if self._check_rep_enabled:
            self.check_rep()

    def check_rep(self) -> None:
        """Verify the representation invariant.

        - every edge endpoint is in the vertex set
        - every edge weight is positive
        - no two edges share a (source, target) pair

        Raises:
            RepInvariantError: If any condition fails.
        """
        pairs: builtins.set[tuple[L, L]] = set()
        for edge in self._edges:
            if edge.source not in self._vertices:
                raise RepInvariantError(f"edge {edge} has a missing source")
            if edge.target not in self._vertices:
                raise RepInvariantError(f"edge {edge} has a missing target")
            if edge.weight <= 0:
                raise RepInvariantError(f"edge {edge} has a non-positive weight")
            if (edge.source, edge.target) in pairs:
                raise RepInvariantError(f"edge {edge} duplicates an existing pair")
            pairs.add((edge.source, edge.target))

    # --- mutations ---

    def add(self, vertex: L) -> bool:
        validate_vertex(vertex)
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        logger.debug("Added vertex %r", vertex)
        self._after_mutation()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        validate_vertex(source)
        validate_vertex(target)
        validate_weight(weight)

        self._vertices.add(source)
        self._vertices.add(target)

        previous = 0
        if (existing := self._find_edge(source, target)) is not None:
            previous = existing.weight
            self._edges.remove(existing)
        if weight > 0:
            self._edges.append(EdgeRecord(source, target, weight))

        logger.debug(
            "Set edge %r -> %r to %d (was %d)", source, target, weight, previous
        )
        self._after_mutation()
        return previous

    def remove(self, vertex: L) -> bool:
        if not is_vertex_label(vertex) or vertex not in self._vertices:
            return False
        self._vertices.remove(vertex)
        self._edges = [
            edge
            for edge in self._edges
            if edge.source != vertex and edge.target != vertex
        ]
        logger.debug("Removed vertex %r", vertex)
        self._after_mutation()
        return True

    # --- queries ---

    def vertices(self) -> builtins.set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> dict[L, int]:
        return {
            edge.source: edge.weight for edge in self._edges if edge.target == target
        }

    def targets(self, source: L) -> dict[L, int]:
        return {
            edge.target: edge.weight for edge in self._edges if edge.source == source
        }

    def __str__(self) -> str:
        vertices = ", ".join(str(vertex) for vertex in self._vertices)
        edges = ", ".join(str(edge) for edge in self._edges)
        return f"Vertices: [{vertices}]\nEdges: [{edges}]"

    def __repr__(self) -> str:
        vertices, edges = len(self._vertices), len(self._edges)
        return f"EdgeIndexedGraph(vertices={vertices}, edges={edges})"
