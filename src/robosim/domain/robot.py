"""Robot position, facing, and the placed/unplaced state machine.

States:
- UNPLACED (initial): only a PLACE onto the board is accepted.
- PLACED: every command is accepted; PLACE may be reissued any time.

INVARIANT: The robot never leaves the board. PLACE and MOVE consult
``Board.contains`` at the point of mutation; an illegal target is a
silent no-op, never an error.
"""

from __future__ import annotations

from dataclasses import dataclass

from robosim.domain.board import Board
from robosim.domain.direction import Direction


@dataclass
class Robot:
    """A single robot on a shared, read-only board.

    Every operation returns True when it took effect and False when it
    was ignored.
    """

    board: Board
    x: int = 0
    y: int = 0
    direction: Direction = Direction.NORTH
    on_board: bool = False

    def place(self, x: int, y: int, direction: Direction) -> bool:
        if not self.board.contains(x, y):
            return False
        self.x, self.y = x, y
        self.direction = direction
        self.on_board = True
        return True

    def move(self) -> bool:
        if not self.on_board:
            return False
        dx, dy = self.direction.step
        target = (self.x + dx, self.y + dy)
        if not self.board.contains(*target):
            return False
        self.x, self.y = target
        return True

    def left(self) -> bool:
        if not self.on_board:
            return False
        self.direction = self.direction.left()
        return True

    def right(self) -> bool:
        if not self.on_board:
            return False
        self.direction = self.direction.right()
        return True

    def report(self) -> str | None:
        """Current state as ``X,Y,F``, or None while unplaced."""
        position = self.position
        if position is None:
            return None
        return format_position(*position, self.direction)

    @property
    def position(self) -> tuple[int, int] | None:
        """``(x, y)`` once placed, None before."""
        if not self.on_board:
            return None
        return self.x, self.y


def format_position(x: int, y: int, direction: Direction) -> str:
    """Render a position report line, e.g. ``0,1,NORTH``."""
    return f"{x},{y},{direction.value}"
