"""Shared pytest fixtures for emprecords tests."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from datetime import UTC, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from emprecords.actions.benefits import create_benefit
from emprecords.actions.employees import create_employee
from emprecords.app import Application
from emprecords.config.settings import EmpSettings
from emprecords.domain.clock import FrozenClock
from emprecords.domain.payloads import CreateBenefitRequest, CreateEmployeeRequest
from emprecords.infrastructure.database.unit_of_work import UnitOfWork
from emprecords.infrastructure.datastore import Datastore

FROZEN_AT = datetime(2022, 1, 1, tzinfo=UTC)


class StepClock:
    """Test clock that can be moved forward between commits."""

    def __init__(self, start: datetime = FROZEN_AT) -> None:
        self.current = start

    def now(self) -> datetime:
        return self.current

    def set(self, instant: datetime) -> None:
        self.current = instant


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(FROZEN_AT)


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> EmpSettings:
    """Settings rooted in a temp directory, isolated from the environment."""
    for name in ("EMPRECORDS_CONFIG", "EMPRECORDS_DATABASE__URL", "EMPRECORDS_CLOCK__FROZEN_AT"):
        monkeypatch.delenv(name, raising=False)
    return EmpSettings.from_cli(root=tmp_path)


@pytest.fixture
async def app(settings: EmpSettings, clock: FrozenClock) -> AsyncIterator[Application]:
    """Started application on a fresh SQLite file with a frozen clock."""
    application = Application(settings, clock=clock)
    await application.start()
    try:
        yield application
    finally:
        await application.close()


@pytest.fixture
async def datastore(settings: EmpSettings, step_clock: StepClock) -> AsyncIterator[Datastore]:
    """Bare datastore driven by a movable clock."""
    store = Datastore(settings.database_url, step_clock)
    await store.start()
    try:
        yield store
    finally:
        await store.close()


@pytest.fixture
async def uow(app: Application) -> AsyncIterator[UnitOfWork]:
    async with app.datastore.unit_of_work() as unit:
        yield unit


@pytest.fixture
def make_employee(app: Application) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Factory creating an employee through the action layer."""

    async def _make(first_name: str = "Ada", last_name: str = "Byron", **fields: Any) -> dict[str, Any]:
        response = await app.invoke(
            create_employee,
            body=CreateEmployeeRequest(first_name=first_name, last_name=last_name, **fields),
        )
        assert response.status_code == 201, response.body
        return response.body

    return _make


@pytest.fixture
async def benefits(app: Application) -> dict[str, int]:
    """Health (100), Dental (50) and Vision (25); returns name -> id."""
    ids: dict[str, int] = {}
    for name, cost in (("Health", "100"), ("Dental", "50"), ("Vision", "25")):
        response = await app.invoke(
            create_benefit,
            body=CreateBenefitRequest(name=name, base_cost=Decimal(cost)),
        )
        assert response.status_code == 201, response.body
        ids[name] = response.body["id"]
    return ids
