"""Argument checks shared by Graph implementations and their records."""

from .errors import InvalidVertexError, InvalidWeightError


def is_vertex_label(value: object) -> bool:
    """Whether `value` could be a vertex label.

    A label must be hashable all the way down (a tuple holding a list is
    not) and equal to itself (NaN is not), otherwise it could never be
    found again once stored.

    Queries and `remove()` accept any value; one that fails this check can
    never be in a graph.
    """
    if value is None:
        return False
    try:
        hash(value)
    except TypeError:
        return False
    return bool(value == value)  # pylint: disable=comparison-with-itself


def validate_vertex(vertex: object) -> None:
    """Reject values that cannot serve as a vertex label.

    Args:
        vertex: The candidate label.

    Raises:
        InvalidVertexError: If `vertex` is None, unhashable, or not equal
            to itself.
    """
    if not is_vertex_label(vertex):
        raise InvalidVertexError(vertex)


def validate_weight(weight: object, *, allow_zero: bool = True) -> None:
    """Reject values that cannot serve as an edge weight.

    `bool` is an `int` subclass but is not accepted as a weight.

    Args:
        weight: The candidate weight.
        allow_zero: Whether 0 (the "no edge" weight) is acceptable. Stored
            edges always carry a positive weight.

    Raises:
        InvalidWeightError: If `weight` is not an int, is negative, or is
            zero while `allow_zero` is False.
    """
    expected = "a non-negative integer" if allow_zero else "a positive integer"
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeightError(weight, expected)
    if weight < 0 or (weight == 0 and not allow_zero):
        raise InvalidWeightError(weight, expected)
