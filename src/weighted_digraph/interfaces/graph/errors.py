"""Errors raised by Graph implementations."""


class GraphError(Exception):
    """Base class for Graph errors."""


class InvalidArgumentError(GraphError, ValueError):
    """Base class for errors caused by a caller supplying a bad argument.

    Raised before any mutation takes place, so a graph that rejected a call
    is left exactly as it was.
    """


class InvalidVertexError(InvalidArgumentError):
    """Raised when a vertex label is required but the value cannot be one.

    `None` and unhashable values are not valid labels.

    Attributes:
        vertex (object): The rejected label.
    """

    def __init__(self, vertex: object):
        super().__init__(f"Invalid vertex label: {vertex!r}.")
        self.vertex = vertex


class InvalidWeightError(InvalidArgumentError):
    """Raised when an edge weight is negative or not an integer.

    Attributes:
        weight (object): The rejected weight.
        expected (str): What an acceptable weight looks like.
    """

    def __init__(self, weight: object, expected: str = "a non-negative integer"):
        super().__init__(f"Edge weight must be {expected}, got {weight!r}.")
        self.weight = weight
        self.expected = expected


class RepInvariantError(GraphError, AssertionError):
    """Raised when a graph's internal representation is inconsistent.

    This signals a bug in the implementation, never a caller mistake.

    Attributes:
        reason (str): Which part of the invariant failed.
    """

    def __init__(self, reason: str):
        super().__init__(f"Representation invariant violated: {reason}")
        self.reason = reason
