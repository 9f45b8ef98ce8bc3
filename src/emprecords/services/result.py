"""ServiceResult and ServiceError — the uniform service contract.

INVARIANT: All service-layer methods return ServiceResult.
Expected misses (an unknown id) are ``ServiceError(code="NOT_FOUND")``,
never exceptions; the action layer maps codes to status codes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_employee"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (paging, counts).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def not_found(op: str, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=NOT_FOUND, message=message, detail=detail),
    )
