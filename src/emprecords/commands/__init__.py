"""Subcommand modules for emprecords.

Provides register_commands(), which uses deferred imports to keep
``emprecords --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root group."""
    # --- Groups ---
    from emprecords.commands.benefit import benefit
    from emprecords.commands.employee import employee

    cli.add_command(employee)
    cli.add_command(benefit)

    # --- Standalone commands ---
    from emprecords.commands.init_cmd import init_cmd

    cli.add_command(init_cmd)
