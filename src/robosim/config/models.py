"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, robosim.toml only contains
overrides. An empty or missing file yields the reference 5x5 board with
strict parsing.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from robosim.domain.board import DEFAULT_HEIGHT, DEFAULT_WIDTH


class BoardConfig(BaseModel):
    """[board] section."""

    model_config = {"frozen": True}

    width: int = Field(default=DEFAULT_WIDTH, gt=0)
    height: int = Field(default=DEFAULT_HEIGHT, gt=0)


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    lenient: bool = False
