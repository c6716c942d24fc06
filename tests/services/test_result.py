"""Tests for ServiceResult and ServiceError models."""

import json

import pytest
from pydantic import ValidationError

from sortgraph.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="snapshot")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="snapshot")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_round_trip_of_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="add_vertex",
            error=ServiceError(code="DUPLICATE_VERTEX", message="a: exists"),
        )
        payload = json.loads(result.model_dump_json())
        assert payload["error"]["code"] == "DUPLICATE_VERTEX"
        assert payload["error"]["detail"] == {}
