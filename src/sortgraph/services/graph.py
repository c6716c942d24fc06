"""GraphService — label-level graph mutations with structured results.

Accepts raw labels, builds the :class:`Vertex` / :class:`Edge` values,
and reports every refused mutation as a :class:`ServiceError` carrying
the :class:`Rejection` code.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sortgraph.domain.edge import Edge
from sortgraph.domain.errors import SelfLoopError
from sortgraph.domain.vertex import Vertex
from sortgraph.services.base import BaseService
from sortgraph.services.result import ServiceError, ServiceResult

SELF_LOOP = "SELF_LOOP"


class GraphService(BaseService):
    """Handles vertex and edge mutations plus snapshots."""

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, label: Any) -> ServiceResult:
        vertex = Vertex(label)
        if not self._graph.add_vertex(vertex):
            return self._rejected("add_vertex", str(vertex))
        return ServiceResult(
            ok=True,
            op="add_vertex",
            data={"vertex": str(vertex), "vertex_count": self._graph.vertex_count()},
        )

    def delete_vertex(self, label: Any) -> ServiceResult:
        """Delete a vertex and report the incident edges removed with it."""
        vertex = Vertex(label)
        incident = self._graph.incident_edges(vertex)
        if not self._graph.delete_vertex(vertex):
            return self._rejected("delete_vertex", str(vertex))
        return ServiceResult(
            ok=True,
            op="delete_vertex",
            data={
                "vertex": str(vertex),
                "removed_edges": [str(e) for e in incident],
                "vertex_count": self._graph.vertex_count(),
                "edge_count": self._graph.edge_count(),
            },
        )

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, a: Any, b: Any) -> ServiceResult:
        edge = self._edge("add_edge", a, b)
        if isinstance(edge, ServiceResult):
            return edge
        if not self._graph.add_edge(edge):
            return self._rejected("add_edge", str(edge))
        return ServiceResult(
            ok=True,
            op="add_edge",
            data={"edge": str(edge), "edge_count": self._graph.edge_count()},
        )

    def delete_edge(self, a: Any, b: Any) -> ServiceResult:
        edge = self._edge("delete_edge", a, b)
        if isinstance(edge, ServiceResult):
            return edge
        if not self._graph.delete_edge(edge):
            return self._rejected("delete_edge", str(edge))
        return ServiceResult(
            ok=True,
            op="delete_edge",
            data={"edge": str(edge), "edge_count": self._graph.edge_count()},
        )

    @staticmethod
    def _edge(op: str, a: Any, b: Any) -> Edge[Any] | ServiceResult:
        try:
            return Edge(Vertex(a), Vertex(b))
        except SelfLoopError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=SELF_LOOP,
                    message=str(exc),
                    detail={"target": f"({a} -> {b})"},
                ),
            )

    # ------------------------------------------------------------------
    # Whole-graph operations
    # ------------------------------------------------------------------

    def snapshot(self) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="snapshot",
            data=self._snapshot_data(),
            meta=self._capacity_meta(),
        )

    def build(
        self,
        vertices: Iterable[Any],
        edges: Iterable[tuple[Any, Any]],
    ) -> ServiceResult:
        """Insert *vertices* then *edges* in order, collecting refusals.

        Individual refusals do not fail the build; each one is listed in
        ``data["rejected"]`` and echoed as a warning.
        """
        rejected: list[dict[str, str]] = []
        steps: list[ServiceResult] = [self.add_vertex(label) for label in vertices]
        steps.extend(self.add_edge(a, b) for a, b in edges)
        for step in steps:
            if not step.ok and step.error is not None:
                rejected.append(
                    {
                        "op": step.op,
                        "target": step.error.detail.get("target", ""),
                        "code": step.error.code,
                    }
                )

        data = self._snapshot_data()
        data["rejected"] = rejected
        return ServiceResult(
            ok=True,
            op="build",
            data=data,
            warnings=[f"{r['op']} {r['target']} rejected: {r['code']}" for r in rejected],
            meta=self._capacity_meta(),
        )
