"""Async database engine setup.

SQLite (through aiosqlite) is the default persistence layer, with foreign
keys switched on per connection so the employee → link cascade and the
link → benefit restriction are enforced by storage. Any SQLAlchemy async URL
works; the pragma hook only fires for SQLite.

Sessions are created with ``autoflush=False``: pending inserts must stay in
``session.new`` until commit so the audit interceptor sees them.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from emprecords.infrastructure.database.schema import metadata


def create_db_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine; SQLite connections get ``foreign_keys=ON``."""
    engine = create_async_engine(url, echo=echo)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


async def init_database(engine: AsyncEngine) -> None:
    """Create all tables from :data:`schema.metadata`.

    Idempotent — safe to call on an existing database.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for one unit of work per invocation."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
