"""Command: create the database schema."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from emprecords.commands._base import EmpCommand

if TYPE_CHECKING:
    from emprecords.commands._context import AppContext


@click.command(
    "init",
    cls=EmpCommand,
    examples="""\
  emprecords init
  emprecords -c ./emprecords.toml init
  EMPRECORDS_DATABASE__URL=sqlite+aiosqlite:///hr.db emprecords init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the database tables if they do not exist yet."""
    app.init_database()
    url = app.settings.database_url
    if app.settings.json_output:
        click.echo(json.dumps({"database": url}))
    else:
        click.echo(f"OK  database ready at {url}")
