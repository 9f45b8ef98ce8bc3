"""Audit interceptor — stamps auditable entities as part of every commit.

The interceptor wraps a unit of work's commit function rather than hooking
ORM flush events, so stamping happens exactly once per commit call and is
visible in the call graph. The pending change set is read from the session:

- ``session.new`` entities get ``created_by`` / ``created_at``.
- ``session.dirty`` entities with net attribute changes get ``modified_by`` /
  ``modified_at``; their creation stamps are left alone.
- Everything else (reads, deletes, non-auditable rows) is untouched.

One ``clock.now()`` snapshot covers the whole batch, so every entity in a
commit carries the identical timestamp.

If the wrapped commit raises, stamps on newly added entities are reverted.
Persistent entities are expired by the rollback and reload from storage, so no
partially stamped state stays observable.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from emprecords.domain.auditing import Auditable, AuthorResolver, system_author

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from emprecords.domain.clock import Clock

logger = logging.getLogger(__name__)

CommitFn = Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class AuditBatch:
    """What one commit stamped."""

    timestamp: datetime
    author: str
    created: tuple[Auditable, ...] = ()
    modified: tuple[Auditable, ...] = ()

    def revert_created(self) -> None:
        """Clear creation stamps on entities that never reached storage."""
        for entity in self.created:
            entity.created_by = None
            entity.created_at = None


class AuditInterceptor:
    """Stamps audit metadata using an injected clock and author resolver."""

    def __init__(self, clock: Clock, *, author: AuthorResolver = system_author) -> None:
        self._clock = clock
        self._author = author

    @property
    def clock(self) -> Clock:
        return self._clock

    def stamp(self, session: AsyncSession) -> AuditBatch:
        """Stamp every pending auditable entity in *session*."""
        now = self._clock.now()
        author = self._author()

        created: list[Auditable] = []
        for entity in session.new:
            if isinstance(entity, Auditable):
                entity.created_by = author
                entity.created_at = now
                created.append(entity)

        deleted = set(session.deleted)
        modified: list[Auditable] = []
        for entity in session.dirty:
            if entity in deleted or not isinstance(entity, Auditable):
                continue
            if not session.is_modified(entity, include_collections=False):
                continue
            entity.modified_by = author
            entity.modified_at = now
            modified.append(entity)

        return AuditBatch(
            timestamp=now,
            author=author,
            created=tuple(created),
            modified=tuple(modified),
        )

    def wrap(self, session: AsyncSession, commit: CommitFn) -> CommitFn:
        """Return *commit* with audit stamping in front of it."""

        async def audited_commit() -> None:
            batch = self.stamp(session)
            try:
                await commit()
            except BaseException:
                batch.revert_created()
                raise
            if batch.created or batch.modified:
                logger.debug(
                    "Audit stamped %d created, %d modified at %s",
                    len(batch.created),
                    len(batch.modified),
                    batch.timestamp.isoformat(),
                )

        return audited_commit
