"""Subcommand modules for robosim.

Provides register_commands() which uses deferred imports to keep
``robosim --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from robosim.commands.check import check
    from robosim.commands.run import run

    cli.add_command(run)
    cli.add_command(check)
