"""Tests for configuration section models."""

import pytest
from pydantic import ValidationError

from robosim.config.models import BoardConfig, ParserConfig


class TestBoardConfig:
    def test_defaults(self) -> None:
        cfg = BoardConfig()
        assert (cfg.width, cfg.height) == (5, 5)

    def test_rejects_zero(self) -> None:
        with pytest.raises(ValidationError):
            BoardConfig(width=0)


class TestParserConfig:
    def test_strict_by_default(self) -> None:
        assert ParserConfig().lenient is False
