"""Adapters (infrastructure) for weighted-digraph.

Provide concrete implementations of the interfaces in
`weighted_digraph.interfaces`, one subpackage per port.

Dependency rule: may import `weighted_digraph.interfaces` and
`weighted_digraph.config`; adapters must not import one another.
"""
