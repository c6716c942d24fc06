"""Graph — the abstract contract every graph implementation honors.

INVARIANT: A mutating call either succeeds (state changed, True returned)
or is rejected (no state change at all, False returned). Rejections are
expected outcomes and are never raised.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sortgraph.domain.edge import Edge
    from sortgraph.domain.vertex import Vertex


class Graph[F](ABC):
    """Undirected graph of uniquely-labeled vertices."""

    @abstractmethod
    def add_edge(self, e: Edge[F]) -> bool:
        """Add *e* if both endpoints are in the graph and *e* is not."""

    @abstractmethod
    def add_vertex(self, v: Vertex[F]) -> bool:
        """Add *v* unless a vertex with the same label is already present."""

    @abstractmethod
    def delete_edge(self, e: Edge[F]) -> bool:
        """Delete *e*, or return False if no such edge exists."""

    @abstractmethod
    def delete_vertex(self, v: Vertex[F]) -> bool:
        """Delete *v* and every edge incident to it, or return False if absent."""

    @abstractmethod
    def vertex_set(self) -> set[Vertex[F]]:
        """Return a copy of all vertices."""

    @abstractmethod
    def edge_set(self) -> set[Edge[F]]:
        """Return a copy of all edges."""
