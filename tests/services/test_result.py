"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from rosterq.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="average", data={"average": 59.875})
        assert result.ok is True
        assert result.op == "average"
        assert result.data == {"average": 59.875}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID_ARGUMENT", message="Invalid page_size: 0")
        result = ServiceResult(ok=False, op="page", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="efficiency_counts",
            data={"counts": {"true": 5, "false": 3}},
            meta={"telemetry": {"name": "x", "duration_ms": 0.1}},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["counts"]["true"] == 5
        assert parsed["meta"]["telemetry"]["name"] == "x"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(
            code="INVALID_ARGUMENT",
            message="Invalid page_number: 0",
            detail={"argument": "page_number", "value": 0},
        )
        assert error.detail["argument"] == "page_number"
        assert error.detail["value"] == 0


class TestResultHelpers:
    def test_success_defaults_warnings_to_empty(self) -> None:
        result = ServiceResult.success("names", {"names": "[Ivan]"})
        assert result.ok is True
        assert result.data == {"names": "[Ivan]"}
        assert result.warnings == []
        assert result.error is None

    def test_success_keeps_warnings(self) -> None:
        result = ServiceResult.success("page", {"count": 0}, warnings=["past the end"])
        assert result.warnings == ["past the end"]

    def test_failure_collects_detail_keywords(self) -> None:
        result = ServiceResult.failure(
            "page",
            ErrorCode.INVALID_ARGUMENT,
            "Invalid page_size: 0",
            argument="page_size",
            value=0,
        )
        assert result.ok is False
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"
        assert result.error.detail == {"argument": "page_size", "value": 0}

    def test_failure_code_serializes_as_plain_string(self) -> None:
        result = ServiceResult.failure("page", ErrorCode.INVALID_ARGUMENT, "bad")
        parsed = json.loads(result.model_dump_json())
        assert parsed["error"]["code"] == "INVALID_ARGUMENT"
