"""Apply one Command to a Robot."""

from __future__ import annotations

import logging
from typing import assert_never

from robosim.domain.commands import Command, Left, Move, Place, Report, Right
from robosim.domain.robot import Robot

logger = logging.getLogger(__name__)


def dispatch(command: Command, robot: Robot) -> str | None:
    """Execute *command* against *robot*.

    Returns the report line for an accepted REPORT, None otherwise.
    Ignored commands (unplaced robot, off-board target) are logged at
    debug level and otherwise have no effect.
    """
    match command:
        case Place(x=x, y=y, direction=direction):
            accepted = robot.place(x, y, direction)
        case Move():
            accepted = robot.move()
        case Left():
            accepted = robot.left()
        case Right():
            accepted = robot.right()
        case Report():
            report = robot.report()
            if report is None:
                logger.debug("Ignored %s: robot not placed", command.kind)
            return report
        case _:
            assert_never(command)

    if not accepted:
        logger.debug("Ignored %s", command.kind)
    return None
