"""Employee actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from emprecords.actions.base import ActionResponse, respond, route_not_found
from emprecords.domain.payloads import (
    CreateEmployeeRequest,
    GetAllEmployeesRequest,
    ReplaceBenefitsRequest,
    UpdateEmployeeRequest,
)
from emprecords.services.benefits import AssociationManager
from emprecords.services.employees import EmployeeService

if TYPE_CHECKING:
    from emprecords.actions.base import ActionRequest


async def list_employees(
    request: ActionRequest, *, query: GetAllEmployeesRequest | None = None
) -> ActionResponse:
    result = await EmployeeService(request.uow).list_employees(query or GetAllEmployeesRequest())
    return respond(result)


async def get_employee(request: ActionRequest) -> ActionResponse:
    employee_id = request.route_int("id")
    if employee_id is None:
        return route_not_found("id", request)
    return respond(await EmployeeService(request.uow).get_employee(employee_id))


async def create_employee(request: ActionRequest, *, body: CreateEmployeeRequest) -> ActionResponse:
    return respond(await EmployeeService(request.uow).create_employee(body), success_status=201)


async def update_employee(request: ActionRequest, *, body: UpdateEmployeeRequest) -> ActionResponse:
    employee_id = request.route_int("id")
    if employee_id is None:
        return route_not_found("id", request)
    return respond(await EmployeeService(request.uow).update_employee(employee_id, body))


async def delete_employee(request: ActionRequest) -> ActionResponse:
    employee_id = request.route_int("id")
    if employee_id is None:
        return route_not_found("id", request)
    return respond(
        await EmployeeService(request.uow).delete_employee(employee_id), success_status=204
    )


async def employee_benefits(request: ActionRequest) -> ActionResponse:
    employee_id = request.route_int("id")
    if employee_id is None:
        return route_not_found("id", request)
    return respond(await AssociationManager(request.uow).list_associations(employee_id))


async def replace_benefits(
    request: ActionRequest, *, body: ReplaceBenefitsRequest
) -> ActionResponse:
    """Replace the employee's benefits; responds with the full new link set."""
    employee_id = request.route_int("id")
    if employee_id is None:
        return route_not_found("id", request)
    result = await AssociationManager(request.uow).replace_associations(
        employee_id, body.benefit_ids, cost_overrides=body.cost_overrides
    )
    return respond(result)
