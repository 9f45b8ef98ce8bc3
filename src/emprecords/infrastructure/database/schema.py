"""SQLAlchemy ORM table definitions for the emprecords database.

``Employee`` and ``User`` opt into audit stamping through :class:`AuditMixin`,
which satisfies the structural :class:`~emprecords.domain.auditing.Auditable`
protocol. ``Benefit`` and ``EmployeeBenefit`` are never stamped.

Relationships default to ``lazy="raise"``: under asyncio an implicit lazy load
cannot run, so every read that needs a related row says so explicitly.
"""

from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    TypeDecorator,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class UTCDateTime(TypeDecorator[datetime]):
    """Store datetimes as naive UTC, hand them back timezone-aware.

    SQLite has no timezone support, so without this a value written as
    ``2022-01-01T00:00:00+00:00`` would read back naive.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            return value
        return value.astimezone(UTC).replace(tzinfo=None)

    def process_result_value(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is None:
            return None
        return value.replace(tzinfo=UTC)


class Base(DeclarativeBase):
    pass


class AuditMixin:
    """Audit columns; written only by the audit interceptor."""

    created_by: Mapped[str | None] = mapped_column(String(100))
    created_at: Mapped[datetime | None] = mapped_column(UTCDateTime())
    modified_by: Mapped[str | None] = mapped_column(String(100))
    modified_at: Mapped[datetime | None] = mapped_column(UTCDateTime())


class Employee(AuditMixin, Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    social_security_number: Mapped[str | None] = mapped_column(String(11))
    address1: Mapped[str | None] = mapped_column(String(200))
    address2: Mapped[str | None] = mapped_column(String(200))
    city: Mapped[str | None] = mapped_column(String(100))
    state: Mapped[str | None] = mapped_column(String(50))
    zip_code: Mapped[str | None] = mapped_column(String(20))
    phone_number: Mapped[str | None] = mapped_column(String(30))
    email: Mapped[str | None] = mapped_column(String(254))


class Benefit(Base):
    __tablename__ = "benefits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(String(500))
    base_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)


class EmployeeBenefit(Base):
    """Link row between an employee and a benefit.

    INVARIANT: (employee_id, benefit_id) is unique across all rows.
    """

    __tablename__ = "employee_benefits"
    __table_args__ = (
        UniqueConstraint("employee_id", "benefit_id", name="uq_employee_benefit"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[int] = mapped_column(
        ForeignKey("employees.id", ondelete="CASCADE"), nullable=False
    )
    benefit_id: Mapped[int] = mapped_column(
        ForeignKey("benefits.id", ondelete="RESTRICT"), nullable=False
    )
    cost_override: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))

    benefit: Mapped[Benefit] = relationship(lazy="raise")


class User(AuditMixin, Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str] = mapped_column(String(254), nullable=False, unique=True)
    user_name: Mapped[str | None] = mapped_column(String(254))
    first_name: Mapped[str | None] = mapped_column(String(100))
    last_name: Mapped[str | None] = mapped_column(String(100))
    profile_picture: Mapped[str | None] = mapped_column(String(500))
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    last_login_date: Mapped[datetime | None] = mapped_column(UTCDateTime())

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def display_name(self) -> str:
        return self.full_name or self.email or self.user_name or "Unknown User"


# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_employees_last_name", Employee.last_name)
Index("ix_employee_benefits_employee", EmployeeBenefit.employee_id)
Index("ix_users_is_active", User.is_active)

metadata = Base.metadata
