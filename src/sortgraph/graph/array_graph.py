"""ArrayGraph — graph storage over two sorted arrays.

Vertices are kept sorted by label and edges by their canonical
``(first, second)`` pair, both in :class:`SortedArray` storage with an
optional capacity ceiling. Membership checks are binary searches by value,
so a vertex equal to a stored one counts as present even when it is a
different object.

Every operation holds one reentrant lock for its whole duration, which
keeps compound operations like cascade deletion atomic for concurrent
callers.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from sortgraph.domain.edge import Edge
from sortgraph.domain.errors import GraphTypeError
from sortgraph.domain.rejections import Rejection
from sortgraph.domain.vertex import Vertex
from sortgraph.graph.base import Graph
from sortgraph.infrastructure.sorted_array import SortedArray

if TYPE_CHECKING:
    from sortgraph.config.models import GraphConfig

logger = logging.getLogger(__name__)

# Conventional fixed bounds for callers that want a hard ceiling.
LEGACY_MAX_VERTICES = 20
LEGACY_MAX_EDGES = 50


def _require(value: Any, kind: type) -> None:
    if not isinstance(value, kind):
        msg = f"Expected {kind.__name__}, got {type(value).__name__}"
        raise GraphTypeError(msg)


class ArrayGraph[F](Graph[F]):
    """Sorted, optionally bounded, undirected graph.

    Args:
        max_vertices: Vertex capacity, or None for unbounded.
        max_edges: Edge capacity, or None for unbounded.

    Attributes:
        last_rejection: Reason the most recent mutation was refused, or
            None if it succeeded.
    """

    def __init__(self, *, max_vertices: int | None = None, max_edges: int | None = None) -> None:
        self._vertices: SortedArray[Vertex[F]] = SortedArray(max_vertices)
        self._edges: SortedArray[Edge[F]] = SortedArray(max_edges)
        self._lock = threading.RLock()
        self.last_rejection: Rejection | None = None

    @classmethod
    def from_config(cls, config: GraphConfig) -> ArrayGraph[Any]:
        """Build an empty graph with the capacities from a ``[graph]`` section."""
        return cls(max_vertices=config.max_vertices, max_edges=config.max_edges)

    @property
    def max_vertices(self) -> int | None:
        return self._vertices.capacity

    @property
    def max_edges(self) -> int | None:
        return self._edges.capacity

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_vertex(self, v: Vertex[F]) -> bool:
        _require(v, Vertex)
        with self._lock:
            if self._vertices.is_full:
                return self._reject("add_vertex", v, Rejection.CAPACITY_EXHAUSTED)
            if self._vertices.find(v) is not None:
                return self._reject("add_vertex", v, Rejection.DUPLICATE_VERTEX)
            self._vertices.insert(v)
            return self._accept()

    def add_edge(self, e: Edge[F]) -> bool:
        _require(e, Edge)
        with self._lock:
            if self._edges.is_full:
                return self._reject("add_edge", e, Rejection.CAPACITY_EXHAUSTED)
            if self._edges.find(e) is not None:
                return self._reject("add_edge", e, Rejection.DUPLICATE_EDGE)
            if self._vertices.find(e.first) is None or self._vertices.find(e.second) is None:
                return self._reject("add_edge", e, Rejection.MISSING_ENDPOINT)
            self._edges.insert(e)
            return self._accept()

    def delete_edge(self, e: Edge[F]) -> bool:
        _require(e, Edge)
        with self._lock:
            index = self._edges.find(e)
            if index is None:
                return self._reject("delete_edge", e, Rejection.EDGE_NOT_FOUND)
            self._edges.remove_at(index)
            return self._accept()

    def delete_vertex(self, v: Vertex[F]) -> bool:
        _require(v, Vertex)
        with self._lock:
            index = self._vertices.find(v)
            if index is None:
                return self._reject("delete_vertex", v, Rejection.VERTEX_NOT_FOUND)
            removed = self._edges.remove_where(lambda e: e.touches(v))
            self._vertices.remove_at(index)
            logger.debug("Deleted vertex %s with %d incident edge(s)", v, len(removed))
            return self._accept()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def vertex_set(self) -> set[Vertex[F]]:
        with self._lock:
            return set(self._vertices)

    def edge_set(self) -> set[Edge[F]]:
        with self._lock:
            return set(self._edges)

    def vertices(self) -> list[Vertex[F]]:
        """Return all vertices in ascending label order."""
        with self._lock:
            return self._vertices.snapshot()

    def edges(self) -> list[Edge[F]]:
        """Return all edges in ascending ``(first, second)`` order."""
        with self._lock:
            return self._edges.snapshot()

    def has_vertex(self, v: Vertex[F]) -> bool:
        _require(v, Vertex)
        with self._lock:
            return self._vertices.find(v) is not None

    def has_edge(self, e: Edge[F]) -> bool:
        _require(e, Edge)
        with self._lock:
            return self._edges.find(e) is not None

    def incident_edges(self, v: Vertex[F]) -> list[Edge[F]]:
        """Return the sorted edges touching *v* (empty if *v* is absent)."""
        _require(v, Vertex)
        with self._lock:
            return [e for e in self._edges if e.touches(v)]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return (
            f"ArrayGraph(vertices={self.vertex_count()}/{self.max_vertices}, "
            f"edges={self.edge_count()}/{self.max_edges})"
        )

    # ------------------------------------------------------------------
    # Outcome bookkeeping
    # ------------------------------------------------------------------

    def _accept(self) -> bool:
        self.last_rejection = None
        return True

    def _reject(self, op: str, target: object, reason: Rejection) -> bool:
        self.last_rejection = reason
        logger.debug("Rejected %s %s: %s", op, target, reason)
        return False
