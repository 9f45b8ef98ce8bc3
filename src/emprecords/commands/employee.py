"""Command group: employee records and their benefits."""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

import click

from emprecords.commands._base import EmpGroup

if TYPE_CHECKING:
    from emprecords.commands._context import AppContext

_CONTACT_OPTIONS = (
    ("--address1", "Street address, line 1."),
    ("--address2", "Street address, line 2."),
    ("--city", "City."),
    ("--state", "State."),
    ("--zip-code", "Postal code."),
    ("--phone-number", "Phone number."),
    ("--email", "Email address."),
)


def contact_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply the shared contact-detail options to *func*."""
    for flag, help_text in reversed(_CONTACT_OPTIONS):
        func = click.option(flag, default=None, help=help_text)(func)
    return func


def _parse_override(raw: str) -> tuple[int, Decimal]:
    benefit_id, sep, cost = raw.partition("=")
    if not sep:
        msg = f"Expected BENEFIT_ID=COST, got {raw!r}"
        raise click.BadParameter(msg, param_hint="--override")
    try:
        return int(benefit_id), Decimal(cost)
    except (ValueError, InvalidOperation) as exc:
        msg = f"Expected BENEFIT_ID=COST, got {raw!r}"
        raise click.BadParameter(msg, param_hint="--override") from exc


@click.group(
    cls=EmpGroup,
    examples="""\
  emprecords employee create --first-name Ada --last-name Byron
  emprecords employee list --last-name-contains By
  emprecords employee set-benefits 1 --benefit 2 --benefit 3 --override 3=60""",
)
def employee() -> None:
    """Create, list, update and delete employees."""


@employee.command(
    "list",
    examples="""\
  emprecords employee list
  emprecords employee list --page 2 --per-page 25""",
)
@click.option("--page", type=int, default=None, help="Page number (starts at 1).")
@click.option("--per-page", type=int, default=None, help="Records per page (max 100).")
@click.option("--first-name-contains", default=None, help="Filter on first name.")
@click.option("--last-name-contains", default=None, help="Filter on last name.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    page: int | None,
    per_page: int | None,
    first_name_contains: str | None,
    last_name_contains: str | None,
) -> None:
    """List employees, filtered then paged, ordered by id."""
    from emprecords.actions.employees import list_employees
    from emprecords.domain.payloads import GetAllEmployeesRequest

    query = GetAllEmployeesRequest(
        page=page,
        records_per_page=per_page,
        first_name_contains=first_name_contains,
        last_name_contains=last_name_contains,
    )
    app.emit(app.run(list_employees, query=query))


@employee.command("show")
@click.argument("employee_id")
@click.pass_obj
def show(app: AppContext, employee_id: str) -> None:
    """Show one employee."""
    from emprecords.actions.employees import get_employee

    app.emit(app.run(get_employee, route_values={"id": employee_id}))


@employee.command(
    "create",
    examples="""\
  emprecords employee create --first-name Ada --last-name Byron --city London""",
)
@click.option("--first-name", default=None, help="First name (required).")
@click.option("--last-name", default=None, help="Last name (required).")
@click.option("--ssn", "social_security_number", default=None, help="Social security number.")
@contact_options
@click.pass_obj
def create(app: AppContext, **fields: str | None) -> None:
    """Create an employee."""
    from emprecords.actions.employees import create_employee
    from emprecords.domain.payloads import CreateEmployeeRequest

    app.emit(app.run(create_employee, body=CreateEmployeeRequest(**fields)))


@employee.command(
    "update",
    examples="""\
  emprecords employee update 1 --address1 "1 Main St" --city Springfield""",
)
@click.argument("employee_id")
@contact_options
@click.pass_obj
def update(app: AppContext, employee_id: str, **fields: str | None) -> None:
    """Replace an employee's contact details (omitted options are cleared)."""
    from emprecords.actions.employees import update_employee
    from emprecords.domain.payloads import UpdateEmployeeRequest

    app.emit(
        app.run(
            update_employee,
            route_values={"id": employee_id},
            body=UpdateEmployeeRequest(**fields),
        )
    )


@employee.command("delete")
@click.argument("employee_id")
@click.pass_obj
def delete(app: AppContext, employee_id: str) -> None:
    """Delete an employee and their benefit links."""
    from emprecords.actions.employees import delete_employee

    app.emit(app.run(delete_employee, route_values={"id": employee_id}))


@employee.command("benefits")
@click.argument("employee_id")
@click.pass_obj
def benefits(app: AppContext, employee_id: str) -> None:
    """List an employee's benefits with effective costs."""
    from emprecords.actions.employees import employee_benefits

    app.emit(app.run(employee_benefits, route_values={"id": employee_id}))


@employee.command(
    "set-benefits",
    examples="""\
  emprecords employee set-benefits 1 --benefit 2 --benefit 3
  emprecords employee set-benefits 1 --benefit 3 --override 3=60.00
  emprecords employee set-benefits 1          # clears all benefits""",
)
@click.argument("employee_id")
@click.option("--benefit", "benefit_ids", type=int, multiple=True, help="Benefit id (repeatable).")
@click.option(
    "--override",
    "overrides",
    multiple=True,
    help="Employee-specific cost as BENEFIT_ID=COST (repeatable).",
)
@click.pass_obj
def set_benefits(
    app: AppContext,
    employee_id: str,
    benefit_ids: tuple[int, ...],
    overrides: tuple[str, ...],
) -> None:
    """Replace an employee's complete benefit set."""
    from emprecords.actions.employees import replace_benefits
    from emprecords.domain.payloads import ReplaceBenefitsRequest

    body = ReplaceBenefitsRequest(
        benefit_ids=list(benefit_ids),
        cost_overrides=dict(_parse_override(raw) for raw in overrides),
    )
    app.emit(app.run(replace_benefits, route_values={"id": employee_id}, body=body))
