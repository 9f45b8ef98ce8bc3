"""Validation pipeline — runs in front of every action handler.

For each body-bound argument (any :class:`~emprecords.domain.payloads.Payload`
instance) the pipeline resolves the registered validator, runs it against a
:class:`RuleContext` built from the request, and merges all messages into one
map. A non-empty map becomes a 400 response and the handler is never called.

The pipeline never mutates a payload and never writes storage.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from emprecords.actions.base import ActionResponse
from emprecords.domain.payloads import Payload
from emprecords.validation.context import RuleContext, StorageReader

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from emprecords.actions.base import ActionRequest
    from emprecords.validation.registry import ValidatorRegistry

    Handler = Callable[..., Awaitable[ActionResponse]]

logger = logging.getLogger(__name__)


class ValidationPipeline:
    """Resolve, validate, then either short-circuit or call the handler."""

    def __init__(self, registry: ValidatorRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ValidatorRegistry:
        return self._registry

    async def validate_arguments(
        self, arguments: dict[str, Any], ctx: RuleContext
    ) -> dict[str, list[str]]:
        """Validate every payload argument; return the merged error map."""
        errors: dict[str, list[str]] = {}
        for value in arguments.values():
            if not isinstance(value, Payload):
                continue
            validator = self._registry.resolve(type(value))
            if validator is None:
                continue
            outcome = await validator.validate(value, ctx)
            for name, messages in outcome.errors.items():
                errors.setdefault(name, []).extend(messages)
        return errors

    async def invoke(
        self, handler: Handler, request: ActionRequest, /, **arguments: Any
    ) -> ActionResponse:
        ctx = RuleContext(
            route_values=request.route_values,
            reader=StorageReader(request.uow.session),
        )
        errors = await self.validate_arguments(arguments, ctx)
        if errors:
            logger.debug(
                "Validation rejected %s: %s",
                getattr(handler, "__name__", repr(handler)),
                errors,
            )
            return ActionResponse(status_code=400, body=errors)
        return await handler(request, **arguments)
