"""Human-readable text for ``check`` results and fatal errors.

A passing check prints a status line and its line counts. Any failure
prints one ``ERROR`` line; a failed check adds a table of the rejected
lines so the user can find them in the script.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from robosim.output.console import buffered_console, text_of

if TYPE_CHECKING:
    from rich.console import Console

    from robosim.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console", bool], None]

_CHECK_COUNTS = ("count", "valid", "blank")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as plain or styled text, depending on the terminal."""
    console = buffered_console()
    if result.ok:
        _SUCCESS_RENDERERS[result.op](result, console, verbose)
    else:
        _render_failure(result, console, verbose)
    return text_of(console)


def render_quiet(result: ServiceResult) -> str:
    """One line for ``--quiet``: ``OK: op`` or ``ERROR: op: message``."""
    if result.ok:
        return f"OK: {result.op}"
    return f"ERROR: {result.op}: {_error_message(result)}"


def _error_message(result: ServiceResult) -> str:
    return result.error.message if result.error else "Unknown error"


def _headline(console: Console, label: Text, result: ServiceResult, message: str = "") -> None:
    parts = [label, Text(f"  {result.op}", style="robosim.op")]
    if message:
        parts.append(Text(f": {message}"))
    console.print(*parts, sep="")


def _pairs(console: Console, items: dict[str, Any], *, indent: int = 2) -> None:
    pad = " " * indent
    for key, value in items.items():
        console.print(Text(f"{pad}{key}: ", style="robosim.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if result.meta:
        console.print()
        console.print(Text("  meta:", style="dim"))
        _pairs(console, result.meta, indent=4)


def _malformed_table(entries: list[dict[str, Any]]) -> Table:
    table = Table(pad_edge=False)
    table.add_column("Line", style="robosim.line", justify="right", no_wrap=True)
    table.add_column("Command", style="robosim.command")
    table.add_column("Reason")
    for entry in entries:
        table.add_row(
            str(entry.get("line_no", "")),
            str(entry.get("line", "")),
            str(entry.get("reason", "")),
        )
    return table


def _render_failure(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, Text("ERROR", style="robosim.error"), result, _error_message(result))
    detail = result.error.detail if result.error else {}
    if detail.get("malformed"):
        console.print(_malformed_table(detail["malformed"]))
    if verbose:
        rest = {k: v for k, v in detail.items() if k != "malformed"}
        if rest:
            console.print(Text("  detail:", style="dim"))
            _pairs(console, rest, indent=4)
        _render_meta(console, result)


def _render_check(result: ServiceResult, console: Console, verbose: bool) -> None:
    _headline(console, Text("OK", style="robosim.ok"), result)
    _pairs(console, {k: result.data[k] for k in _CHECK_COUNTS if k in result.data})
    if verbose:
        _render_meta(console, result)


_SUCCESS_RENDERERS: dict[str, _Renderer] = {
    "check": _render_check,
}
