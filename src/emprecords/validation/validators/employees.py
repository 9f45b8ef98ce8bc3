"""Validators for employee payloads."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from emprecords.domain.payloads import (
    CreateEmployeeRequest,
    GetAllEmployeesRequest,
    UpdateEmployeeRequest,
)
from emprecords.infrastructure.database.schema import Employee
from emprecords.validation.rules import (
    context_rule,
    greater_than_or_equal,
    is_blank,
    less_than_or_equal,
    not_empty,
)
from emprecords.validation.validator import Validator

if TYPE_CHECKING:
    from emprecords.validation.context import RuleContext

MAX_RECORDS_PER_PAGE = 100


class CreateEmployeeValidator(Validator[CreateEmployeeRequest]):
    payload_type = CreateEmployeeRequest
    rules = {
        "first_name": (not_empty("First name is required."),),
        "last_name": (not_empty("Last name is required."),),
    }


async def keeps_existing_address(value: Any, _payload: Any, ctx: RuleContext) -> bool:
    """An employee that already has an address1 cannot have it blanked.

    Passes when the route carries no usable id or the employee does not exist;
    the handler reports the missing record.
    """
    employee_id = ctx.route_int("id")
    if employee_id is None:
        return True
    employee = await ctx.require_reader().get(Employee, employee_id)
    if employee is None or employee.address1 is None:
        return True
    return not is_blank(value)


class UpdateEmployeeValidator(Validator[UpdateEmployeeRequest]):
    payload_type = UpdateEmployeeRequest
    rules = {
        "address1": (
            context_rule(
                keeps_existing_address,
                "Address1 must not be empty as an address was already set on the employee.",
            ),
        ),
    }


PAGE_RULES = (greater_than_or_equal(1, "Page number must be set to a positive non-zero integer."),)
RECORDS_PER_PAGE_RULES = (
    greater_than_or_equal(1, "You must return at least one record."),
    less_than_or_equal(MAX_RECORDS_PER_PAGE, "You cannot return more than 100 records."),
)


class GetAllEmployeesValidator(Validator[GetAllEmployeesRequest]):
    payload_type = GetAllEmployeesRequest
    rules = {
        "page": PAGE_RULES,
        "records_per_page": RECORDS_PER_PAGE_RULES,
    }
