"""Datastore — owns the engine and hands out audited units of work.

The Datastore is built once at startup with the process clock. Every action
invocation gets its own :class:`UnitOfWork` from :meth:`Datastore.unit_of_work`,
which closes the session afterwards and rolls back anything left uncommitted
when the block raises.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from emprecords.domain.auditing import AuthorResolver, system_author
from emprecords.infrastructure.database.audit import AuditInterceptor
from emprecords.infrastructure.database.engine import (
    create_db_engine,
    create_session_factory,
    init_database,
)
from emprecords.infrastructure.database.unit_of_work import UnitOfWork

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncEngine

    from emprecords.domain.clock import Clock

logger = logging.getLogger(__name__)


class Datastore:
    """Engine, session factory and audit interceptor for one process."""

    def __init__(
        self,
        url: str,
        clock: Clock,
        *,
        author: AuthorResolver = system_author,
        echo: bool = False,
    ) -> None:
        self.url = url
        self.engine: AsyncEngine = create_db_engine(url, echo=echo)
        self.interceptor = AuditInterceptor(clock, author=author)
        self._sessions = create_session_factory(self.engine)

    async def start(self) -> None:
        """Create the schema if it does not exist yet."""
        await init_database(self.engine)
        logger.debug("Datastore ready at %s", self.url)

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[UnitOfWork]:
        """Yield a fresh unit of work; uncommitted changes are discarded on error."""
        async with self._sessions() as session:
            uow = UnitOfWork(session, self.interceptor)
            try:
                yield uow
            except BaseException:
                await session.rollback()
                raise
