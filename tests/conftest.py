"""Global pytest fixtures for weighted-digraph."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from weighted_digraph.adapters.graph import EdgeIndexedGraph, VertexIndexedGraph
from weighted_digraph.interfaces.graph import Graph

GraphFactory = Callable[[], Graph[Any]]

# pylint: disable=redefined-outer-name


@pytest.fixture(params=["vertex", "edge"])
def graph_factory(request: pytest.FixtureRequest) -> GraphFactory:
    """Return a zero-argument factory of empty graphs for the requested backend.

    Supported params:
      - `"vertex"` → `VertexIndexedGraph`
      - `"edge"` → `EdgeIndexedGraph`

    Both are built with representation-invariant checking on, so any internal
    inconsistency fails the test that caused it.
    """

    match request.param:
        case "vertex":
            return lambda: VertexIndexedGraph(check_rep=True)
        case "edge":
            return lambda: EdgeIndexedGraph(check_rep=True)
        case _:
            raise ValueError(f"unknown graph type: {request.param}")


@pytest.fixture
def graph(graph_factory: GraphFactory) -> Graph[Any]:
    """A fresh, empty graph for each test and each backend."""
    return graph_factory()
