"""Bootstrap (composition root) for weighted-digraph.

Maps representation names to the concrete adapters and builds empty graphs,
reading defaults from `weighted_digraph.config`.

Import rules:
- Callers that do not care which representation they get import *this*
  package rather than `weighted_digraph.adapters`.
- This package may import `weighted_digraph.adapters`,
  `weighted_digraph.interfaces` and `weighted_digraph.config`.
- Inner layers must not import `weighted_digraph.bootstrap`.
"""

from .bootstrap import REPRESENTATIONS, UnknownRepresentationError, empty_graph

__all__ = ["REPRESENTATIONS", "UnknownRepresentationError", "empty_graph"]
