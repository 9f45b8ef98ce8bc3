"""Application — startup wiring and the single entry point for actions.

The clock, validator registry, pipeline and datastore are all chosen once in
:class:`Application`'s constructor and never swapped afterwards. Every
:meth:`Application.invoke` call gets its own unit of work and runs through the
validation pipeline before the action body::

    app = Application(settings, clock=FrozenClock(datetime(2022, 1, 1)))
    await app.start()
    response = await app.invoke(
        create_employee, body=CreateEmployeeRequest(first_name="Ada", last_name="Byron")
    )
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from emprecords.actions.base import ActionRequest
from emprecords.domain.auditing import fixed_author
from emprecords.domain.clock import build_clock
from emprecords.infrastructure.datastore import Datastore
from emprecords.validation.pipeline import ValidationPipeline
from emprecords.validation.registry import default_registry

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from emprecords.actions.base import ActionResponse
    from emprecords.config.settings import EmpSettings
    from emprecords.domain.clock import Clock
    from emprecords.validation.registry import ValidatorRegistry

logger = logging.getLogger(__name__)


class Application:
    """Owns the process-wide collaborators and routes action invocations."""

    def __init__(
        self,
        settings: EmpSettings,
        *,
        clock: Clock | None = None,
        registry: ValidatorRegistry | None = None,
    ) -> None:
        self.settings = settings
        self.clock: Clock = clock if clock is not None else build_clock(settings.clock.frozen_at)
        self.registry = registry if registry is not None else default_registry()
        self.pipeline = ValidationPipeline(self.registry)
        self.datastore = Datastore(
            settings.database_url,
            self.clock,
            author=fixed_author(settings.audit.system_author),
            echo=settings.database.echo,
        )
        logger.debug("Application wired with %r and %d validators", self.clock, len(self.registry))

    async def start(self) -> None:
        await self.datastore.start()

    async def close(self) -> None:
        await self.datastore.close()

    async def invoke(
        self,
        action: Callable[..., Awaitable[ActionResponse]],
        *,
        route_values: Mapping[str, str] | None = None,
        **arguments: Any,
    ) -> ActionResponse:
        """Run *action* inside a fresh unit of work, validating payloads first."""
        async with self.datastore.unit_of_work() as uow:
            request = ActionRequest(uow=uow, route_values=dict(route_values or {}))
            return await self.pipeline.invoke(action, request, **arguments)
