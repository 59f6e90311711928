"""Command: validate a command script without running it."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from robosim.commands._base import RoboCommand
from robosim.commands.run import STDIN_MARKER

if TYPE_CHECKING:
    from robosim.commands._context import AppContext


@click.command(
    cls=RoboCommand,
    examples="""\
  robosim check commands.txt
  robosim --json check commands.txt
  cat commands.txt | robosim check -""",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path, allow_dash=True))
@click.pass_obj
def check(app: AppContext, file: Path) -> None:
    """Report malformed lines in FILE. Exits 1 if any are found."""
    from robosim.infrastructure.sources import open_source
    from robosim.services.check import check_script

    path = None if file == STDIN_MARKER else file
    try:
        result = check_script(open_source(path), lenient=app.lenient)
    except (OSError, UnicodeDecodeError) as exc:
        app.fail_io("check", exc, path)
        return
    app.emit(result)
