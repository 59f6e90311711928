"""The closed set of instructions a robot understands.

Five frozen variants tagged by ``kind``. The set is fixed; dispatch
matches on it exhaustively in :mod:`robosim.services.dispatch`.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from robosim.domain.direction import Direction


class Place(BaseModel):
    """Put the robot at ``(x, y)`` facing ``direction``."""

    model_config = {"frozen": True}

    kind: Literal["place"] = "place"
    x: int
    y: int
    direction: Direction


class Move(BaseModel):
    """Advance one square along the current facing."""

    model_config = {"frozen": True}

    kind: Literal["move"] = "move"


class Left(BaseModel):
    """Rotate 90 degrees counter-clockwise."""

    model_config = {"frozen": True}

    kind: Literal["left"] = "left"


class Right(BaseModel):
    """Rotate 90 degrees clockwise."""

    model_config = {"frozen": True}

    kind: Literal["right"] = "right"


class Report(BaseModel):
    """Announce the current position and facing."""

    model_config = {"frozen": True}

    kind: Literal["report"] = "report"


Command = Annotated[Place | Move | Left | Right | Report, Field(discriminator="kind")]

# Keyword -> variant for the argument-less commands.
BARE_COMMANDS: dict[str, type[Move | Left | Right | Report]] = {
    "MOVE": Move,
    "LEFT": Left,
    "RIGHT": Right,
    "REPORT": Report,
}
