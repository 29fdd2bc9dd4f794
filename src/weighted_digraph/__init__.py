"""weighted-digraph

A mutable, weighted, directed graph abstract data type with two
interchangeable backing representations: vertex-indexed and edge-indexed.
Both honour the same observable contract, so callers can swap one for the
other without changing behaviour.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
