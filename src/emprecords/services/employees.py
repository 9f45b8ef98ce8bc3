"""EmployeeService — employee record CRUD.

Listing applies the name filters first and pages the filtered set, ordered by
id so that page boundaries are stable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select

from emprecords.infrastructure.database.schema import Employee
from emprecords.services._helpers import iso_utc, page_window
from emprecords.services.base import BaseService
from emprecords.services.result import ServiceResult, not_found

if TYPE_CHECKING:
    from emprecords.domain.payloads import (
        CreateEmployeeRequest,
        GetAllEmployeesRequest,
        UpdateEmployeeRequest,
    )

DEFAULT_RECORDS_PER_PAGE = 100

CONTACT_FIELDS = (
    "address1",
    "address2",
    "city",
    "state",
    "zip_code",
    "phone_number",
    "email",
)


def serialize_employee(employee: Employee) -> dict[str, Any]:
    return {
        "id": employee.id,
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "social_security_number": employee.social_security_number,
        **{name: getattr(employee, name) for name in CONTACT_FIELDS},
        "created_by": employee.created_by,
        "created_at": iso_utc(employee.created_at),
        "modified_by": employee.modified_by,
        "modified_at": iso_utc(employee.modified_at),
    }


class EmployeeService(BaseService):
    """Create, read, update and delete employees."""

    async def list_employees(self, request: GetAllEmployeesRequest) -> ServiceResult:
        op = "list_employees"
        offset, limit = page_window(
            request.page, request.records_per_page, DEFAULT_RECORDS_PER_PAGE
        )

        query = select(Employee)
        if request.first_name_contains:
            query = query.where(Employee.first_name.contains(request.first_name_contains))
        if request.last_name_contains:
            query = query.where(Employee.last_name.contains(request.last_name_contains))

        total = await self.session.scalar(select(func.count()).select_from(query.subquery()))
        rows = await self.session.scalars(query.order_by(Employee.id).offset(offset).limit(limit))
        items = [serialize_employee(employee) for employee in rows]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items},
            meta={
                "page": request.page or 1,
                "records_per_page": limit,
                "total": total or 0,
            },
        )

    async def get_employee(self, employee_id: int) -> ServiceResult:
        op = "get_employee"
        employee = await self.session.get(Employee, employee_id)
        if employee is None:
            return not_found(op, f"No employee found with ID: {employee_id}", id=employee_id)
        return ServiceResult(ok=True, op=op, data=serialize_employee(employee))

    async def create_employee(self, request: CreateEmployeeRequest) -> ServiceResult:
        op = "create_employee"
        employee = Employee(**request.model_dump())
        self._uow.add(employee)
        await self._uow.commit()
        return ServiceResult(ok=True, op=op, data=serialize_employee(employee))

    async def update_employee(
        self, employee_id: int, request: UpdateEmployeeRequest
    ) -> ServiceResult:
        """Replace the employee's contact fields with the request's values."""
        op = "update_employee"
        employee = await self.session.get(Employee, employee_id)
        if employee is None:
            return not_found(op, f"No employee found with ID: {employee_id}", id=employee_id)

        fields_changed: list[str] = []
        for name in CONTACT_FIELDS:
            value = getattr(request, name)
            if getattr(employee, name) != value:
                setattr(employee, name, value)
                fields_changed.append(name)

        await self._uow.commit()
        return ServiceResult(
            ok=True,
            op=op,
            data=serialize_employee(employee),
            meta={"fields_changed": fields_changed},
        )

    async def delete_employee(self, employee_id: int) -> ServiceResult:
        """Delete the employee; its benefit links go with it (FK cascade)."""
        op = "delete_employee"
        employee = await self.session.get(Employee, employee_id)
        if employee is None:
            return not_found(op, f"No employee found with ID: {employee_id}", id=employee_id)
        await self._uow.delete(employee)
        await self._uow.commit()
        return ServiceResult(ok=True, op=op, data={"id": employee_id})
