"""Buffered Rich console for human-readable results.

Results are rendered into a string buffer and handed back as text, so
:meth:`AppContext.emit` alone decides between stdout and stderr. Rich
emits no colour codes when the buffer is not a terminal, which covers
CliRunner and pipes. Markup parsing is off: rendered text includes raw
script lines, and ``[`` in a command line must print as itself.
"""

from __future__ import annotations

import io

from rich.console import Console
from rich.theme import Theme

RENDER_WIDTH = 100

ROBOSIM_THEME = Theme(
    {
        "robosim.ok": "bold green",
        "robosim.error": "bold red",
        "robosim.op": "bold cyan",
        "robosim.key": "dim",
        "robosim.line": "bold blue",
        "robosim.command": "bold",
    }
)


def buffered_console(width: int = RENDER_WIDTH) -> Console:
    return Console(
        file=io.StringIO(),
        theme=ROBOSIM_THEME,
        markup=False,
        highlight=False,
        width=width,
    )


def text_of(console: Console) -> str:
    """Everything printed to *console* so far, minus trailing newlines."""
    buffer = console.file
    assert isinstance(buffer, io.StringIO)
    return buffer.getvalue().rstrip("\n")
