"""Rejection reasons for graph mutations.

Every mutating graph operation returns a plain ``bool``. When it returns
False, the graph records one of these reasons in ``last_rejection``.
"""

from __future__ import annotations

from enum import StrEnum


class Rejection(StrEnum):
    """Closed set of reasons a mutation can be refused."""

    CAPACITY_EXHAUSTED = "CAPACITY_EXHAUSTED"
    DUPLICATE_VERTEX = "DUPLICATE_VERTEX"
    DUPLICATE_EDGE = "DUPLICATE_EDGE"
    MISSING_ENDPOINT = "MISSING_ENDPOINT"
    VERTEX_NOT_FOUND = "VERTEX_NOT_FOUND"
    EDGE_NOT_FOUND = "EDGE_NOT_FOUND"


REJECTION_MESSAGES: dict[Rejection, str] = {
    Rejection.CAPACITY_EXHAUSTED: "storage is at capacity",
    Rejection.DUPLICATE_VERTEX: "a vertex with this label already exists",
    Rejection.DUPLICATE_EDGE: "this edge already exists",
    Rejection.MISSING_ENDPOINT: "an endpoint is not a vertex of the graph",
    Rejection.VERTEX_NOT_FOUND: "no such vertex",
    Rejection.EDGE_NOT_FOUND: "no such edge",
}
