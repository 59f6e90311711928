"""Compass directions and rotation arithmetic.

Directions form a clockwise 4-cycle: NORTH -> EAST -> SOUTH -> WEST.
Rotation is index arithmetic modulo 4 over that ordering.
"""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Facing direction of the robot, declared in clockwise order."""

    NORTH = "NORTH"
    EAST = "EAST"
    SOUTH = "SOUTH"
    WEST = "WEST"

    def left(self) -> Direction:
        """Rotate 90 degrees counter-clockwise."""
        return _rotate(self, -1)

    def right(self) -> Direction:
        """Rotate 90 degrees clockwise."""
        return _rotate(self, 1)

    @property
    def step(self) -> tuple[int, int]:
        """Unit ``(dx, dy)`` offset for one move in this direction."""
        return STEPS[self]

    @classmethod
    def from_token(cls, token: str) -> Direction | None:
        """Look up a direction by ASCII name, case-insensitively. None if unknown."""
        if not token.isascii():
            return None
        try:
            return cls(token.upper())
        except ValueError:
            return None


CLOCKWISE: tuple[Direction, ...] = tuple(Direction)

STEPS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def _rotate(direction: Direction, steps: int) -> Direction:
    index = CLOCKWISE.index(direction)
    return CLOCKWISE[(index + steps) % len(CLOCKWISE)]
