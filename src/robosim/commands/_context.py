"""State shared by ``robosim run`` and ``robosim check``.

The root group builds one :class:`AppContext` from the merged settings;
subcommands receive it through ``@click.pass_obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from robosim.config.logging import configure_logging
from robosim.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pathlib import Path

    from robosim.config.settings import RoboSettings
    from robosim.domain.board import Board
    from robosim.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: RoboSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def lenient(self) -> bool:
        return self.settings.parser.lenient

    def board(self, *, width: int | None = None, height: int | None = None) -> Board:
        """The configured board; ``--width``/``--height`` win over settings."""
        from robosim.domain.board import Board

        configured = self.settings.board
        return Board(width=width or configured.width, height=height or configured.height)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        A passing result goes to stdout, with any warnings as
        ``WARNING: ...`` lines on stderr (JSON output carries them
        inline instead). A failing result goes to stderr and exits 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def fail_io(self, op: str, exc: Exception, path: Path | None) -> None:
        """Report an unreadable script (missing, unreadable, not UTF-8) and exit 1."""
        from robosim.services.result import ServiceResult

        source = str(path) if path is not None else "<stdin>"
        self.emit(
            ServiceResult.failure(
                op,
                "IO_ERROR",
                f"An error has occurred reading {source}: {exc}",
                detail={"source": source},
            )
        )
