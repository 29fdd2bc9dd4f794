"""Interfaces (application boundary) for weighted-digraph.

Defines framework-free contracts: the abstract `Graph` type, its error
taxonomy and the argument validation shared by every implementation.

Dependency rule: this package is independent; do not import from any other
`weighted_digraph.*` modules. It may be imported by `weighted_digraph.adapters`
and `weighted_digraph.bootstrap`.
"""
