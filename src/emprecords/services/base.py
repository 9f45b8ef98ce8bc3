"""BaseService — foundation for the record services.

Every service receives the invocation's :class:`UnitOfWork`. Services own
their transaction boundary: they stage changes on ``self._uow`` and call
``await self._uow.commit()`` exactly once when the operation succeeds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from emprecords.infrastructure.database.unit_of_work import UnitOfWork


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class EmployeeService(BaseService):
            async def create_employee(self, request) -> ServiceResult:
                employee = Employee(...)
                self._uow.add(employee)
                await self._uow.commit()
                ...
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    @property
    def session(self) -> AsyncSession:
        return self._uow.session
