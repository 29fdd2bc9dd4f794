"""Vertex-indexed implementation of the Graph interface.

Each vertex is stored as a `VertexRecord` that owns the mapping from its
targets to edge weights. Records only ever refer to other vertices by label.
"""

from __future__ import annotations

import builtins
import logging
from typing import Generic, TypeVar

from weighted_digraph import config
from weighted_digraph.interfaces.graph import (
    Graph,
    InvalidWeightError,
    RepInvariantError,
    is_vertex_label,
    validate_vertex,
    validate_weight,
)

L = TypeVar("L")  # vertex label

logger = logging.getLogger(__name__)


class VertexRecord(Generic[L]):
    """A vertex and its outgoing edges.

    Mutable. Stored weights are always positive; setting a zero weight removes
    the entry instead.
    """

    __slots__ = ("_label", "_edges")

    def __init__(self, label: L) -> None:
        validate_vertex(label)
        self._label = label
        self._edges: dict[L, int] = {}  # target: weight

    @property
    def label(self) -> L:
        return self._label

    def set_edge(self, target: L, weight: int) -> int:
        """Set the weight of the edge to `target`, removing the edge on 0.

        Returns:
            int: The previous weight, or 0 if there was no edge.
        """
        if weight == 0:
            return self._edges.pop(target, 0)
        previous = self._edges.get(target, 0)
        self._edges[target] = weight
        return previous

    def remove_edge(self, target: L) -> bool:
        return self._edges.pop(target, None) is not None

    def weight_to(self, target: L) -> int:
        return self._edges.get(target, 0)

    def targets(self) -> dict[L, int]:
        return dict(self._edges)  # defensive copy

    def __str__(self) -> str:
        edges = ", ".join(
            f"{target} ({weight})" for target, weight in self._edges.items()
        )
        return f"{self._label} -> {edges}"

    def __repr__(self) -> str:
        return f"VertexRecord({self._label!r}, {self._edges!r})"


class VertexIndexedGraph(Graph[L]):
    """Graph backed by a list of vertex records, each owning its out-edges.

    Lookups scan the record list, so `sources()` and `remove()` visit every
    vertex.

    Note: This implementation is not thread-safe.
    """

    def __init__(self, *, check_rep: bool | None = None) -> None:
        self._records: list[VertexRecord[L]] = []
        self._check_rep_enabled = (
            config.check_rep_enabled() if check_rep is None else check_rep
        )
        self._after_mutation()

    # --- internals ---

    def _find(self, vertex: object) -> VertexRecord[L] | None:
        for record in self._records:
            if record.label == vertex:
                return record
        return None

    def _find_or_create(self, vertex: L) -> VertexRecord[L]:
        if (record := self._find(vertex)) is None:
            record = VertexRecord(vertex)
            self._records.append(record)
        return record

    def _after_mutation(self) -> None:
        if self._check_rep_enabled:
            self.check_rep()

    def check_rep(self) -> None:
        """Verify the representation invariant.

        - no two records share a label
        - every stored weight is a positive int
        - every edge target is the label of some record

        Raises:
            RepInvariantError: If any condition fails.
        """
        labels: builtins.set[L] = set()
        for record in self._records:
            if record.label in labels:
                raise RepInvariantError(f"duplicate vertex {record.label!r}")
            labels.add(record.label)

        for record in self._records:
            for target, weight in record.targets().items():
                try:
                    validate_weight(weight, allow_zero=False)
                except InvalidWeightError as e:
                    raise RepInvariantError(
                        f"edge {record.label!r} -> {target!r} has weight {weight!r}"
                    ) from e
                if target not in labels:
                    raise RepInvariantError(
                        f"edge {record.label!r} -> {target!r} targets a missing vertex"
                    )

    # --- mutations ---

    def add(self, vertex: L) -> bool:
        validate_vertex(vertex)
        if self._find(vertex) is not None:
            return False
        self._records.append(VertexRecord(vertex))
        logger.debug("Added vertex %r", vertex)
        self._after_mutation()
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        validate_vertex(source)
        validate_vertex(target)
        validate_weight(weight)

        source_record = self._find_or_create(source)
        self._find_or_create(target)
        previous = source_record.set_edge(target, weight)
        logger.debug(
            "Set edge %r -> %r to %d (was %d)", source, target, weight, previous
        )
        self._after_mutation()
        return previous

    def remove(self, vertex: L) -> bool:
        if (record := self._find(vertex)) is None:
            return False
        self._records.remove(record)
        for other in self._records:
            other.remove_edge(vertex)
        logger.debug("Removed vertex %r", vertex)
        self._after_mutation()
        return True

    # --- queries ---

    def vertices(self) -> builtins.set[L]:
        return {record.label for record in self._records}

    def sources(self, target: L) -> dict[L, int]:
        if not is_vertex_label(target):
            return {}
        return {
            record.label: weight
            for record in self._records
            if (weight := record.weight_to(target)) > 0
        }

    def targets(self, source: L) -> dict[L, int]:
        if (record := self._find(source)) is None:
            return {}
        return record.targets()

    def __str__(self) -> str:
        return "\n".join(str(record) for record in self._records)

    def __repr__(self) -> str:
        edges = sum(len(record.targets()) for record in self._records)
        return f"VertexIndexedGraph(vertices={len(self._records)}, edges={edges})"
