"""Tests for the employee validators, including the stored-address rule."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from emprecords.domain.payloads import (
    CreateEmployeeRequest,
    GetAllEmployeesRequest,
    UpdateEmployeeRequest,
)
from emprecords.infrastructure.database.unit_of_work import UnitOfWork
from emprecords.validation.context import RuleContext, StorageReader
from emprecords.validation.validators.employees import (
    CreateEmployeeValidator,
    GetAllEmployeesValidator,
    UpdateEmployeeValidator,
)

ADDRESS_MESSAGE = "Address1 must not be empty as an address was already set on the employee."

MakeEmployee = Callable[..., Awaitable[dict[str, Any]]]


def ctx_for(uow: UnitOfWork, employee_id: int | str | None) -> RuleContext:
    route = {} if employee_id is None else {"id": str(employee_id)}
    return RuleContext(route_values=route, reader=StorageReader(uow.session))


class TestCreateEmployeeValidator:
    async def test_names_required(self) -> None:
        outcome = await CreateEmployeeValidator().validate(
            CreateEmployeeRequest(first_name=" "), RuleContext()
        )
        assert outcome.errors == {
            "first_name": ["First name is required."],
            "last_name": ["Last name is required."],
        }

    async def test_optional_fields_may_be_absent(self) -> None:
        outcome = await CreateEmployeeValidator().validate(
            CreateEmployeeRequest(first_name="Ada", last_name="Byron"), RuleContext()
        )
        assert outcome.valid


class TestUpdateEmployeeValidator:
    async def test_blank_address_rejected_when_one_is_stored(
        self, make_employee: MakeEmployee, uow: UnitOfWork
    ) -> None:
        employee = await make_employee(address1="1 Main St")
        outcome = await UpdateEmployeeValidator().validate(
            UpdateEmployeeRequest(address1=None), ctx_for(uow, employee["id"])
        )
        assert outcome.errors == {"address1": [ADDRESS_MESSAGE]}

    async def test_whitespace_address_rejected_when_one_is_stored(
        self, make_employee: MakeEmployee, uow: UnitOfWork
    ) -> None:
        employee = await make_employee(address1="1 Main St")
        outcome = await UpdateEmployeeValidator().validate(
            UpdateEmployeeRequest(address1="   "), ctx_for(uow, employee["id"])
        )
        assert not outcome.valid

    async def test_new_address_accepted(
        self, make_employee: MakeEmployee, uow: UnitOfWork
    ) -> None:
        employee = await make_employee(address1="1 Main St")
        outcome = await UpdateEmployeeValidator().validate(
            UpdateEmployeeRequest(address1="2 Side St"), ctx_for(uow, employee["id"])
        )
        assert outcome.valid

    async def test_blank_address_accepted_when_none_stored(
        self, make_employee: MakeEmployee, uow: UnitOfWork
    ) -> None:
        employee = await make_employee()
        outcome = await UpdateEmployeeValidator().validate(
            UpdateEmployeeRequest(), ctx_for(uow, employee["id"])
        )
        assert outcome.valid

    @pytest.mark.parametrize("route_id", [None, "abc", 999])
    async def test_missing_or_unknown_id_is_vacuous(
        self, uow: UnitOfWork, route_id: int | str | None
    ) -> None:
        outcome = await UpdateEmployeeValidator().validate(
            UpdateEmployeeRequest(), ctx_for(uow, route_id)
        )
        assert outcome.valid


class TestGetAllEmployeesValidator:
    async def test_defaults_are_valid(self) -> None:
        outcome = await GetAllEmployeesValidator().validate(
            GetAllEmployeesRequest(), RuleContext()
        )
        assert outcome.valid

    async def test_paging_bounds(self) -> None:
        outcome = await GetAllEmployeesValidator().validate(
            GetAllEmployeesRequest(page=0, records_per_page=101), RuleContext()
        )
        assert outcome.errors == {
            "page": ["Page number must be set to a positive non-zero integer."],
            "records_per_page": ["You cannot return more than 100 records."],
        }

    async def test_zero_records_per_page(self) -> None:
        outcome = await GetAllEmployeesValidator().validate(
            GetAllEmployeesRequest(records_per_page=0), RuleContext()
        )
        assert outcome.errors == {"records_per_page": ["You must return at least one record."]}
