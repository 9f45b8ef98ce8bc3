"""Command group: the benefit catalogue."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import click

from emprecords.commands._base import EmpGroup

if TYPE_CHECKING:
    from emprecords.commands._context import AppContext


@click.group(
    cls=EmpGroup,
    examples="""\
  emprecords benefit add "Health" --base-cost 100
  emprecords benefit list""",
)
def benefit() -> None:
    """Manage the benefit catalogue."""


@benefit.command("add")
@click.argument("name")
@click.option("--base-cost", type=Decimal, default=None, help="Default cost of the benefit.")
@click.option("--description", default=None, help="Free-text description.")
@click.pass_obj
def add(app: AppContext, name: str, base_cost: Decimal | None, description: str | None) -> None:
    """Add a benefit to the catalogue."""
    from emprecords.actions.benefits import create_benefit
    from emprecords.domain.payloads import CreateBenefitRequest

    body = CreateBenefitRequest(name=name, base_cost=base_cost, description=description)
    app.emit(app.run(create_benefit, body=body))


@benefit.command("list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all benefits by name."""
    from emprecords.actions.benefits import list_benefits

    app.emit(app.run(list_benefits))
