"""Async SQLAlchemy engine, ORM schema, audit interceptor and unit of work."""

from emprecords.infrastructure.database.audit import AuditBatch, AuditInterceptor
from emprecords.infrastructure.database.engine import (
    create_db_engine,
    create_session_factory,
    init_database,
)
from emprecords.infrastructure.database.schema import (
    AuditMixin,
    Base,
    Benefit,
    Employee,
    EmployeeBenefit,
    User,
    metadata,
)
from emprecords.infrastructure.database.unit_of_work import UnitOfWork

__all__ = [
    "AuditBatch",
    "AuditInterceptor",
    "AuditMixin",
    "Base",
    "Benefit",
    "Employee",
    "EmployeeBenefit",
    "UnitOfWork",
    "User",
    "create_db_engine",
    "create_session_factory",
    "init_database",
    "metadata",
]
