"""BaseService — shared foundation for graph services.

Every service receives an :class:`ArrayGraph` at construction time and
translates its boolean outcomes into :class:`ServiceResult` values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sortgraph.domain.rejections import REJECTION_MESSAGES
from sortgraph.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from sortgraph.graph.array_graph import ArrayGraph


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class StatsService(BaseService):
            def density(self) -> ServiceResult:
                ...
    """

    def __init__(self, graph: ArrayGraph[Any]) -> None:
        self._graph = graph

    def _snapshot_data(self) -> dict[str, Any]:
        """Sorted, JSON-friendly view of the current graph contents."""
        vertices = self._graph.vertices()
        edges = self._graph.edges()
        return {
            "vertices": [str(v) for v in vertices],
            "edges": [[str(e.first), str(e.second)] for e in edges],
            "vertex_count": len(vertices),
            "edge_count": len(edges),
        }

    def _capacity_meta(self) -> dict[str, Any]:
        return {
            "max_vertices": self._graph.max_vertices,
            "max_edges": self._graph.max_edges,
        }

    def _rejected(self, op: str, target: str) -> ServiceResult:
        """Build a failed result from the graph's last rejection."""
        reason = self._graph.last_rejection
        code = str(reason) if reason else "REJECTED"
        message = REJECTION_MESSAGES.get(reason, "rejected") if reason else "rejected"
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=code,
                message=f"{target}: {message}",
                detail={"target": target},
            ),
            meta=self._capacity_meta(),
        )
