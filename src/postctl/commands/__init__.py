"""Subcommand modules for postctl.

Provides register_commands() which uses deferred imports to keep
``postctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from postctl.commands.check import check
    from postctl.commands.export import export
    from postctl.commands.list_cmd import list_cmd
    from postctl.commands.new import new
    from postctl.commands.show import show

    cli.add_command(new)
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(check)
    cli.add_command(export)
