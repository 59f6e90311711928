"""``robosim`` entry point: global flags, then ``run`` or ``check``."""

from __future__ import annotations

from typing import Any

import click

from robosim import __version__
from robosim.commands import register_commands
from robosim.commands._context import AppContext
from robosim.config.settings import RoboSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="robosim")
@click.option("--json", "json_output", is_flag=True, help="Print check results and errors as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One-line check results and errors.")
@click.option("-v", "--verbose", is_flag=True, help="Trace ignored and rejected commands.")
@click.option("--log-json", is_flag=True, help="Write log events to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="FILE",
    default=None,
    help="robosim.toml to use instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """Drive a toy robot around a bounded table with text commands.

    REPORT lines are the only thing written to stdout.
    """
    ctx.obj = AppContext(RoboSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
