"""Result envelope returned by every QueryService method.

Callers never see a raised domain error: a rejected request comes back as
``ok=False`` with a :class:`ServiceError` describing which argument failed.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure categories."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class ServiceError(BaseModel):
    """Why a query was rejected; ``detail`` holds the offending values."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one query.

    Attributes:
        ok: False only when the request itself was rejected.
        op: Query name, also the renderer dispatch key (``"page"``, ``"merged"``).
        data: Query payload, JSON-serializable.
        warnings: Conditions worth reporting that did not fail the query.
        error: Set exactly when ``ok`` is False.
        meta: Telemetry span tree when ``--verbose`` is active.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls, op: str, code: ErrorCode, message: str, **detail: Any
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
