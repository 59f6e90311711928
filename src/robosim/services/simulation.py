"""Simulation loop: drive one robot from a stream of command lines.

INVARIANT: A malformed line never stops the loop. Only an ``OSError``
from the line source does, and the source is closed either way.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from robosim.domain.board import Board
from robosim.domain.parser import MalformedCommand, parse_command
from robosim.domain.robot import Robot
from robosim.infrastructure.sources import LineSource
from robosim.services.dispatch import dispatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MalformedLine:
    """A rejected input line and where it was found."""

    line_no: int
    line: str
    reason: str

    def to_dict(self) -> dict[str, object]:
        return {"line_no": self.line_no, "line": self.line, "reason": self.reason}


@dataclass
class Diagnostics:
    """Sink for malformed lines seen during a run or a check."""

    entries: list[MalformedLine] = field(default_factory=list)

    def record(self, line_no: int, error: MalformedCommand) -> None:
        self.entries.append(MalformedLine(line_no, error.line, error.reason))
        logger.debug("%s (line %d)", error.message, line_no)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class RunSummary:
    """Counters for a finished run."""

    lines: int = 0
    blank: int = 0
    applied: int = 0
    malformed: int = 0
    reports: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "lines": self.lines,
            "blank": self.blank,
            "applied": self.applied,
            "malformed": self.malformed,
            "reports": self.reports,
        }


class Simulation:
    """One robot on one board, fed line by line.

    Usage::

        sim = Simulation(Board(), output=click.echo)
        summary = sim.run(FileLineSource(path))
    """

    def __init__(
        self,
        board: Board,
        *,
        output: Callable[[str], None],
        diagnostics: Diagnostics | None = None,
        lenient: bool = False,
    ) -> None:
        self.robot = Robot(board)
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.summary = RunSummary()
        self._output = output
        self._lenient = lenient

    def run(self, source: LineSource) -> RunSummary:
        """Consume *source* until end of input, then close it."""
        try:
            while (line := source.next_line()) is not None:
                self.feed(line)
        finally:
            source.close()
        return self.summary

    def feed(self, line: str) -> str | None:
        """Process one raw line. Returns the report text it produced, if any."""
        self.summary.lines += 1
        if not line.strip():
            self.summary.blank += 1
            return None

        parsed = parse_command(line, lenient=self._lenient)
        if parsed.error is not None:
            self.summary.malformed += 1
            self.diagnostics.record(self.summary.lines, parsed.error)
            return None

        assert parsed.command is not None
        self.summary.applied += 1
        report = dispatch(parsed.command, self.robot)
        if report is not None:
            self.summary.reports += 1
            self._output(report)
        return report
