"""DemoService — the illustrative four-stage graph walk-through.

Stages:
  (i)   vertices a, d, f, b, c inserted out of order; edges (a,b), (b,c),
        (b,d), (d,f)
  (ii)  vertex g and edge (c,g) added
  (iii) vertex b inserted again, which has no effect
  (iv)  vertex d deleted, taking (b,d) and (d,f) with it
"""

from __future__ import annotations

from typing import Any

from sortgraph.domain.edge import Edge
from sortgraph.domain.vertex import Vertex
from sortgraph.services.base import BaseService
from sortgraph.services.result import ServiceResult


class DemoService(BaseService):
    """Runs the walk-through against the injected (normally empty) graph."""

    def run(self) -> ServiceResult:
        g = self._graph
        stages: list[dict[str, Any]] = []
        rejected: list[dict[str, str]] = []

        def attempt(op: str, target: Vertex[str] | Edge[str], ok: bool) -> None:
            if not ok:
                rejected.append({"op": op, "target": str(target), "code": str(g.last_rejection)})

        def record(name: str) -> None:
            stage = {"stage": name, **self._snapshot_data(), "rejected": list(rejected)}
            stages.append(stage)
            rejected.clear()

        a, b, c, d, f = (Vertex(label) for label in "abcdf")
        for v in (a, d, f, b, c):
            attempt("add_vertex", v, g.add_vertex(v))
        for e in (Edge(a, b), Edge(b, c), Edge(b, d), Edge(d, f)):
            attempt("add_edge", e, g.add_edge(e))
        record("i")

        vg = Vertex("g")
        attempt("add_vertex", vg, g.add_vertex(vg))
        cg = Edge(c, vg)
        attempt("add_edge", cg, g.add_edge(cg))
        record("ii")

        # Same label as b, different object.
        b_again = Vertex("b")
        attempt("add_vertex", b_again, g.add_vertex(b_again))
        record("iii")

        attempt("delete_vertex", d, g.delete_vertex(d))
        record("iv")

        return ServiceResult(
            ok=True,
            op="demo",
            data={"stages": stages},
            meta=self._capacity_meta(),
        )
