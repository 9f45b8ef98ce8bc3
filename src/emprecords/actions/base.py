"""Action request/response types and the result-to-status mapping.

An action is an ``async`` function ``(ActionRequest, **arguments) ->
ActionResponse``. Every argument that is a payload is validated by the
pipeline before the action body runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from emprecords.services.result import CONFLICT, NOT_FOUND
from emprecords.validation.context import parse_route_int

if TYPE_CHECKING:
    from collections.abc import Mapping

    from emprecords.infrastructure.database.unit_of_work import UnitOfWork
    from emprecords.services.result import ServiceResult

_ERROR_STATUS = {NOT_FOUND: 404, CONFLICT: 409}


@dataclass
class ActionRequest:
    """Per-invocation data handed to an action: route values and storage."""

    uow: UnitOfWork
    route_values: Mapping[str, str] = field(default_factory=dict)

    def route_int(self, name: str) -> int | None:
        return parse_route_int(self.route_values, name)


class ActionResponse(BaseModel):
    """HTTP-style outcome of an action."""

    model_config = {"frozen": True}

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


def respond(result: ServiceResult, *, success_status: int = 200) -> ActionResponse:
    """Map a ServiceResult onto a response.

    ``NOT_FOUND`` → 404, ``CONFLICT`` → 409, any other error → 400.
    """
    if result.ok:
        if success_status == 204:
            return ActionResponse(status_code=204)
        body: dict[str, Any] = dict(result.data)
        if result.meta:
            body["meta"] = result.meta
        if result.warnings:
            body["warnings"] = list(result.warnings)
        return ActionResponse(status_code=success_status, body=body)

    error = result.error
    assert error is not None  # ok=False always carries an error
    return ActionResponse(
        status_code=_ERROR_STATUS.get(error.code, 400),
        body={"code": error.code, "message": error.message, **error.detail},
    )


def route_not_found(name: str, request: ActionRequest) -> ActionResponse:
    """Response for a route value that is missing or not an integer."""
    raw = request.route_values.get(name)
    return ActionResponse(
        status_code=404,
        body={"code": NOT_FOUND, "message": f"No record found with {name}: {raw}"},
    )
