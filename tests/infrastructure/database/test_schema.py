"""Tests for database schema definitions."""

from datetime import UTC, datetime
from typing import Any

import pytest
from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from emprecords.infrastructure.database.schema import User, UTCDateTime, metadata


def _in_memory_engine() -> Engine:
    """In-memory SQLite engine with foreign keys on and all tables created."""
    engine = create_engine("sqlite:///:memory:")

    @event.listens_for(engine, "connect")
    def _fk_on(dbapi_conn: Any, _: Any) -> None:
        dbapi_conn.execute("PRAGMA foreign_keys=ON")

    metadata.create_all(engine)
    return engine


class TestSchemaCreation:
    def test_all_tables_created(self) -> None:
        table_names = set(inspect(_in_memory_engine()).get_table_names())
        assert {"employees", "benefits", "employee_benefits", "users"} <= table_names

    def test_create_all_is_idempotent(self) -> None:
        engine = _in_memory_engine()
        metadata.create_all(engine)

    def test_audit_columns_on_auditable_tables_only(self) -> None:
        inspector = inspect(_in_memory_engine())
        audit = {"created_by", "created_at", "modified_by", "modified_at"}
        for table in ("employees", "users"):
            assert audit <= {c["name"] for c in inspector.get_columns(table)}
        for table in ("benefits", "employee_benefits"):
            assert not audit & {c["name"] for c in inspector.get_columns(table)}


class TestConstraints:
    def _seed(self, engine: Engine) -> None:
        with engine.begin() as conn:
            conn.execute(text("INSERT INTO employees (id, first_name, last_name) VALUES (1, 'A', 'B')"))
            conn.execute(text("INSERT INTO benefits (id, name, base_cost) VALUES (1, 'Health', 100)"))
            conn.execute(
                text("INSERT INTO employee_benefits (employee_id, benefit_id) VALUES (1, 1)")
            )

    def test_employee_benefit_pair_is_unique(self) -> None:
        engine = _in_memory_engine()
        self._seed(engine)
        with pytest.raises(IntegrityError), engine.begin() as conn:
            conn.execute(
                text("INSERT INTO employee_benefits (employee_id, benefit_id) VALUES (1, 1)")
            )

    def test_deleting_employee_cascades_to_links(self) -> None:
        engine = _in_memory_engine()
        self._seed(engine)
        with engine.begin() as conn:
            conn.execute(text("DELETE FROM employees WHERE id = 1"))
            remaining = conn.execute(text("SELECT COUNT(*) FROM employee_benefits")).scalar()
        assert remaining == 0

    def test_linked_benefit_cannot_be_deleted(self) -> None:
        engine = _in_memory_engine()
        self._seed(engine)
        with pytest.raises(IntegrityError), engine.begin() as conn:
            conn.execute(text("DELETE FROM benefits WHERE id = 1"))

    def test_benefit_name_unique(self) -> None:
        engine = _in_memory_engine()
        self._seed(engine)
        with pytest.raises(IntegrityError), engine.begin() as conn:
            conn.execute(text("INSERT INTO benefits (name, base_cost) VALUES ('Health', 5)"))


class TestUTCDateTime:
    def test_aware_value_stored_naive_utc(self) -> None:
        column = UTCDateTime()
        stored = column.process_bind_param(datetime(2022, 1, 1, tzinfo=UTC), None)
        assert stored == datetime(2022, 1, 1)
        assert stored.tzinfo is None

    def test_read_back_is_aware(self) -> None:
        loaded = UTCDateTime().process_result_value(datetime(2022, 1, 1), None)
        assert loaded == datetime(2022, 1, 1, tzinfo=UTC)


class TestUser:
    def test_display_name_fallbacks(self) -> None:
        assert User(first_name="Ada", last_name="Byron").display_name == "Ada Byron"
        assert User(email="ada@example.com").display_name == "ada@example.com"
        assert User(user_name="ada").display_name == "ada"
        assert User().display_name == "Unknown User"
