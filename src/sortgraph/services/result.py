"""ServiceResult and ServiceError — the service-layer return contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI renders this type for humans (Rich) or machines (--json).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    For refused graph mutations ``code`` is a :class:`Rejection` value.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_edge"``).
        data: Operation-specific payload.
        warnings: Non-fatal issues, such as individual rejected steps of a build.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (capacities, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
