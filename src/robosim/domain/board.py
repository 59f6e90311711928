"""Immutable rectangular grid bounds.

INVARIANT: ``Board.contains`` is the single legality predicate for
placement and movement. Nothing else decides whether a square is on
the table.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_WIDTH = 5
DEFAULT_HEIGHT = 5


class Board(BaseModel):
    """A ``width`` x ``height`` grid with its origin at ``(0, 0)``."""

    model_config = {"frozen": True}

    width: int = Field(default=DEFAULT_WIDTH, gt=0)
    height: int = Field(default=DEFAULT_HEIGHT, gt=0)

    def contains(self, x: int, y: int) -> bool:
        """True iff ``0 <= x < width`` and ``0 <= y < height``."""
        return 0 <= x < self.width and 0 <= y < self.height
