"""Tests for DemoService — the four-stage walk-through."""

from __future__ import annotations

from typing import Any

from sortgraph.graph.array_graph import ArrayGraph
from sortgraph.services.demo import DemoService


def _stages(graph: ArrayGraph[Any] | None = None) -> list[dict[str, Any]]:
    result = DemoService(graph if graph is not None else ArrayGraph()).run()
    assert result.ok
    assert result.op == "demo"
    return result.data["stages"]


class TestDemoStages:
    def test_stage_names(self) -> None:
        assert [s["stage"] for s in _stages()] == ["i", "ii", "iii", "iv"]

    def test_stage_one(self) -> None:
        first = _stages()[0]
        assert first["vertices"] == ["a", "b", "c", "d", "f"]
        assert first["edges"] == [["a", "b"], ["b", "c"], ["b", "d"], ["d", "f"]]
        assert first["rejected"] == []

    def test_stage_two_adds_g(self) -> None:
        second = _stages()[1]
        assert second["vertices"] == ["a", "b", "c", "d", "f", "g"]
        assert ["c", "g"] in second["edges"]

    def test_stage_three_duplicate_has_no_effect(self) -> None:
        stages = _stages()
        assert stages[2]["vertices"] == stages[1]["vertices"]
        assert stages[2]["edges"] == stages[1]["edges"]
        assert stages[2]["rejected"] == [
            {"op": "add_vertex", "target": "b", "code": "DUPLICATE_VERTEX"}
        ]

    def test_stage_four_cascade(self) -> None:
        last = _stages()[3]
        assert last["vertices"] == ["a", "b", "c", "f", "g"]
        assert last["edges"] == [["a", "b"], ["b", "c"], ["c", "g"]]


class TestDemoUnderCapacity:
    def test_capacity_rejections_are_recorded(self) -> None:
        stages = _stages(ArrayGraph(max_vertices=3))
        codes = {r["code"] for r in stages[0]["rejected"]}
        assert codes == {"CAPACITY_EXHAUSTED", "MISSING_ENDPOINT"}
        assert stages[0]["vertices"] == ["a", "d", "f"]
