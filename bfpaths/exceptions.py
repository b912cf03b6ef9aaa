"""Exceptions raised by bfpaths.

Only structural problems are exceptions. An unreachable target or an improving
cycle is a normal outcome and is reported on the result object instead.
"""


class InvalidGraph(ValueError):
    """Raised when a graph snapshot breaks its structural invariants.

    Examples:
        * An edge references a node that does not exist
        * Two edges share the same ordered (source, target) pair
        * A node id is listed twice
        * An edge weight is not a finite real number
    """


class MissingEndpoints(ValueError):
    """Raised when the source or target is not designated or not in the graph."""
