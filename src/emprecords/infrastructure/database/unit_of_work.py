"""UnitOfWork — one transactional boundary per action invocation.

Services add, change and delete entities through the wrapped
``AsyncSession`` and call :meth:`UnitOfWork.commit` when done. The commit
path always runs through the audit interceptor; storage failures roll the
whole unit back and surface as :class:`~emprecords.errors.CommitFault` or,
for integrity errors, :class:`~emprecords.errors.ConstraintViolation`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from emprecords.errors import CommitFault, ConstraintViolation

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from emprecords.infrastructure.database.audit import AuditInterceptor

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Request-scoped session plus an audited commit."""

    def __init__(self, session: AsyncSession, interceptor: AuditInterceptor) -> None:
        self.session = session
        self._commit = interceptor.wrap(session, session.commit)

    def add(self, entity: Any) -> None:
        self.session.add(entity)

    def add_all(self, entities: list[Any]) -> None:
        self.session.add_all(entities)

    async def delete(self, entity: Any) -> None:
        await self.session.delete(entity)

    async def commit(self) -> None:
        """Stamp pending auditable entities and write everything atomically."""
        try:
            await self._commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.error("Constraint violation at commit: %s", exc.orig)
            raise ConstraintViolation(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.error("Commit failed: %s", exc)
            raise CommitFault(str(exc)) from exc

    async def rollback(self) -> None:
        await self.session.rollback()
