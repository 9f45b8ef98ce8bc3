"""Benefits and the employee↔benefit association.

:class:`AssociationManager` owns the link table. Editing an employee's
benefits is a full replace: every existing link for the employee is deleted
and one fresh row is inserted per distinct selected benefit, all in one
commit. Input ids are de-duplicated first (order preserved), so the
``(employee_id, benefit_id)`` unique constraint is never hit by valid input;
if it is, the commit raises :class:`~emprecords.errors.ConstraintViolation`.

INVARIANT: effective cost = ``cost_override`` if set, else the benefit's
``base_cost``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import delete, select
from sqlalchemy.orm import selectinload

from emprecords.infrastructure.database.schema import Benefit, Employee, EmployeeBenefit
from emprecords.services._helpers import money
from emprecords.services.base import BaseService
from emprecords.services.result import CONFLICT, ServiceError, ServiceResult, not_found

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from emprecords.domain.payloads import CreateBenefitRequest

log = structlog.get_logger(__name__)


def effective_cost(link: EmployeeBenefit) -> Decimal:
    """The employee-specific override, falling back to the benefit's base cost."""
    if link.cost_override is not None:
        return link.cost_override
    return link.benefit.base_cost


def serialize_benefit(benefit: Benefit) -> dict[str, Any]:
    return {
        "id": benefit.id,
        "name": benefit.name,
        "description": benefit.description,
        "base_cost": money(benefit.base_cost),
    }


def serialize_link(link: EmployeeBenefit) -> dict[str, Any]:
    return {
        "benefit_id": link.benefit_id,
        "name": link.benefit.name,
        "base_cost": money(link.benefit.base_cost),
        "cost_override": money(link.cost_override),
        "effective_cost": money(effective_cost(link)),
    }


class AssociationManager(BaseService):
    """Replace-all-on-edit management of an employee's benefits."""

    async def list_associations(self, employee_id: int) -> ServiceResult:
        op = "list_associations"
        if await self.session.get(Employee, employee_id) is None:
            return not_found(op, f"No employee found with ID: {employee_id}", id=employee_id)
        links = await self._links_for(employee_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={"employee_id": employee_id, "benefits": [serialize_link(x) for x in links]},
        )

    async def replace_associations(
        self,
        employee_id: int,
        benefit_ids: Iterable[int],
        *,
        cost_overrides: Mapping[int, Decimal] | None = None,
    ) -> ServiceResult:
        """Make *benefit_ids* the employee's complete benefit set.

        Unknown employee or benefit ids produce a ``NOT_FOUND`` result and
        nothing is written.
        """
        op = "replace_associations"
        overrides = dict(cost_overrides or {})
        wanted = list(dict.fromkeys(benefit_ids))

        if await self.session.get(Employee, employee_id) is None:
            return not_found(op, f"No employee found with ID: {employee_id}", id=employee_id)

        benefits: dict[int, Benefit] = {}
        if wanted:
            rows = await self.session.scalars(select(Benefit).where(Benefit.id.in_(wanted)))
            benefits = {benefit.id: benefit for benefit in rows}
        missing = [benefit_id for benefit_id in wanted if benefit_id not in benefits]
        if missing:
            return not_found(
                op,
                f"No benefit found with ID: {', '.join(str(i) for i in missing)}",
                missing=missing,
            )

        await self.session.execute(
            delete(EmployeeBenefit).where(EmployeeBenefit.employee_id == employee_id)
        )
        self._uow.add_all(
            [
                EmployeeBenefit(
                    employee_id=employee_id,
                    benefit=benefits[benefit_id],
                    cost_override=overrides.get(benefit_id),
                )
                for benefit_id in wanted
            ]
        )
        await self._uow.commit()
        log.info("benefits_replaced", employee_id=employee_id, count=len(wanted))

        links = await self._links_for(employee_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={"employee_id": employee_id, "benefits": [serialize_link(x) for x in links]},
        )

    async def _links_for(self, employee_id: int) -> list[EmployeeBenefit]:
        rows = await self.session.scalars(
            select(EmployeeBenefit)
            .where(EmployeeBenefit.employee_id == employee_id)
            .options(selectinload(EmployeeBenefit.benefit))
            .order_by(EmployeeBenefit.id)
        )
        return list(rows)


class BenefitService(BaseService):
    """The benefit catalogue."""

    async def create_benefit(self, request: CreateBenefitRequest) -> ServiceResult:
        op = "create_benefit"
        name = (request.name or "").strip()
        taken = await self.session.scalar(select(Benefit.id).where(Benefit.name == name))
        if taken is not None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=CONFLICT,
                    message=f"A benefit named {name!r} already exists",
                    detail={"id": taken},
                ),
            )
        benefit = Benefit(name=name, description=request.description, base_cost=request.base_cost)
        self._uow.add(benefit)
        await self._uow.commit()
        return ServiceResult(ok=True, op=op, data=serialize_benefit(benefit))

    async def list_benefits(self) -> ServiceResult:
        op = "list_benefits"
        rows = await self.session.scalars(select(Benefit).order_by(Benefit.name))
        return ServiceResult(ok=True, op=op, data={"items": [serialize_benefit(b) for b in rows]})
