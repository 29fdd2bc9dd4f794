"""Configuration utilities for weighted-digraph.

This module centralizes the environment variables the library reads and the
small helpers that interpret them.
"""

import os

CHECK_REP_ENV = "WEIGHTED_DIGRAPH_CHECK_REP"
REPRESENTATION_ENV = "WEIGHTED_DIGRAPH_REPRESENTATION"

DEFAULT_REPRESENTATION = "vertex"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class InvalidSettingError(Exception):
    """Raised when an environment variable holds a value that cannot be used.

    Attributes:
        name (str): The environment variable name.
        value (str): The offending value.
    """

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r}")
        self.name = name
        self.value = value


def check_rep_enabled() -> bool:
    """Whether graphs verify their representation invariant after mutations.

    Reads `WEIGHTED_DIGRAPH_CHECK_REP`. When it is unset or empty the checks
    follow `__debug__`, so they are on unless Python runs with `-O`.

    Returns:
        True if invariant checking is enabled.

    Raises:
        InvalidSettingError: If the variable is set to something other than
            a recognised boolean word.
    """
    if not (raw := os.environ.get(CHECK_REP_ENV, "").strip()):
        return __debug__
    value = raw.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise InvalidSettingError(CHECK_REP_ENV, raw)


def get_default_representation() -> str:
    """Get the name of the graph representation to build by default.

    Returns:
        The lower-cased value of `WEIGHTED_DIGRAPH_REPRESENTATION`, or
        `"vertex"` if it is unset or empty. The name is not validated here.
    """
    if not (raw := os.environ.get(REPRESENTATION_ENV, "").strip()):
        return DEFAULT_REPRESENTATION
    return raw.lower()
