"""Exception hierarchy for programming errors.

Expected outcomes (duplicates, missing endpoints, full storage) are never
raised; they surface as a ``False`` return plus a :class:`Rejection`.
"""

from __future__ import annotations


class SortGraphError(Exception):
    """Base class for all sortgraph errors."""


class SelfLoopError(SortGraphError, ValueError):
    """Raised when an edge is constructed from two equal vertices."""


class GraphTypeError(SortGraphError, TypeError):
    """Raised when a graph operation receives the wrong kind of argument."""


class CapacityError(SortGraphError):
    """Raised when inserting into a full :class:`SortedArray`."""
