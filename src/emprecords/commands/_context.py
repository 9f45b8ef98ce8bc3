"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands with
``@click.pass_obj``. Owns logging setup, drives actions through an
:class:`~emprecords.app.Application`, and centralises response emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import click

from emprecords.output.formatters import format_response

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from emprecords.actions.base import ActionResponse
    from emprecords.config.settings import EmpSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    No database is touched until a command actually runs an action, so
    ``--help`` and ``--version`` stay side-effect free.
    """

    def __init__(self, settings: EmpSettings) -> None:
        self.settings = settings

        from emprecords.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def run(
        self,
        action: Callable[..., Awaitable[ActionResponse]],
        *,
        route_values: Mapping[str, str] | None = None,
        **arguments: Any,
    ) -> ActionResponse:
        """Start the application, invoke one action, and shut down."""
        return asyncio.run(self._run(action, route_values=route_values, **arguments))

    def init_database(self) -> None:
        asyncio.run(self._init_database())

    async def _run(
        self,
        action: Callable[..., Awaitable[ActionResponse]],
        *,
        route_values: Mapping[str, str] | None,
        **arguments: Any,
    ) -> ActionResponse:
        from emprecords.app import Application

        app = Application(self.settings)
        try:
            await app.start()
            return await app.invoke(action, route_values=route_values, **arguments)
        finally:
            await app.close()

    async def _init_database(self) -> None:
        from emprecords.app import Application

        app = Application(self.settings)
        try:
            await app.start()
        finally:
            await app.close()

    def emit(self, response: ActionResponse) -> None:
        """Format and output a response with correct exit semantics.

        * 2xx: writes to stdout, returns normally.
        * Anything else: writes to stderr, exits with code 1.
        """
        output = format_response(response, json_output=self.settings.json_output)
        if response.ok:
            if output:
                click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
