"""Tests for the format_result dispatcher and OutputSettings."""

import json

from sortgraph.output.formatters import OutputSettings, format_result
from sortgraph.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.width is None


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(
            _ok("add_vertex", vertex="a"), settings=OutputSettings(json_output=True)
        )
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "add_vertex"
        assert data["data"]["vertex"] == "a"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_err(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["error"]["code"] == "ERR"


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok("add_vertex", vertex="a"))
        assert output.startswith("OK  add_vertex")
        assert "vertex: a" in output

    def test_quiet(self) -> None:
        assert format_result(_ok("build"), settings=OutputSettings(quiet=True)) == "OK: build"

    def test_quiet_error(self) -> None:
        output = format_result(_err("add_edge", "nope"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: add_edge — nope"
