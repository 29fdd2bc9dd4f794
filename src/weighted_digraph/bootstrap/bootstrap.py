"""Build empty graphs by representation name."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from weighted_digraph import config
from weighted_digraph.adapters.graph import EdgeIndexedGraph, VertexIndexedGraph

if TYPE_CHECKING:
    from weighted_digraph.interfaces.graph import Graph

logger = logging.getLogger(__name__)

REPRESENTATIONS: Mapping[str, type[Graph[Any]]] = MappingProxyType(
    {
        "vertex": VertexIndexedGraph,
        "edge": EdgeIndexedGraph,
    }
)


class UnknownRepresentationError(Exception):
    """Raised when asked for a graph representation that does not exist.

    Attributes:
        representation (str): The requested name.
        known (tuple[str, ...]): The names that are available.
    """

    def __init__(self, representation: str, known: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown graph representation '{representation}'; "
            f"expected one of {', '.join(known)}."
        )
        self.representation = representation
        self.known = known


def empty_graph(
    representation: str | None = None, *, check_rep: bool | None = None
) -> Graph[Any]:
    """Build a new, empty graph.

    Args:
        representation: `"vertex"` or `"edge"`. Defaults to the value of
            `config.get_default_representation()`.
        check_rep: Whether the graph verifies its representation invariant
            after every mutation. Defaults to `config.check_rep_enabled()`.

    Returns:
        A graph with no vertices.

    Raises:
        UnknownRepresentationError: If `representation` names no known
            implementation.
    """
    if representation is None:
        representation = config.get_default_representation()
    if (graph_type := REPRESENTATIONS.get(representation)) is None:
        raise UnknownRepresentationError(representation, tuple(REPRESENTATIONS))
    logger.debug("Building empty %s graph", graph_type.__name__)
    return graph_type(check_rep=check_rep)  # type: ignore[call-arg]
