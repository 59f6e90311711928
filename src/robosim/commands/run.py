"""Command: run a robot simulation over a command script."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from robosim.commands._base import RoboCommand

if TYPE_CHECKING:
    from robosim.commands._context import AppContext

logger = logging.getLogger(__name__)

STDIN_MARKER = Path("-")


@click.command(
    cls=RoboCommand,
    examples="""\
  robosim run commands.txt
  printf 'PLACE 0,0,NORTH\\nMOVE\\nREPORT\\n' | robosim run
  robosim run --width 10 --height 10 commands.txt
  robosim -v --log-json run commands.txt""",
)
@click.argument(
    "file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path, allow_dash=True),
)
@click.option("--width", type=click.IntRange(min=1), default=None, help="Override board width.")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Override board height.")
@click.pass_obj
def run(app: AppContext, file: Path | None, width: int | None, height: int | None) -> None:
    """Simulate commands from FILE, or standard input when FILE is omitted or '-'.

    Each REPORT prints X,Y,F on stdout. Malformed lines are skipped.
    """
    from robosim.infrastructure.sources import open_source
    from robosim.services.simulation import Simulation

    path = None if file is None or file == STDIN_MARKER else file
    board = app.board(width=width, height=height)
    simulation = Simulation(board, output=click.echo, lenient=app.lenient)
    try:
        summary = simulation.run(open_source(path))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Run aborted", exc_info=True)
        app.fail_io("run", exc, path)
        return

    logger.debug(
        "Run finished on %dx%d board: %s",
        board.width,
        board.height,
        summary.to_dict(),
    )
