"""Shared pytest fixtures and test helpers for robosim tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from robosim.domain.board import Board
from robosim.domain.robot import Robot


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def board() -> Board:
    """The reference 5x5 board."""
    return Board()


@pytest.fixture
def robot(board: Board) -> Robot:
    """An unplaced robot on the reference board."""
    return Robot(board)


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[..., Path]:
    """Write command lines to a file under tmp_path and return its path."""

    def _write(*lines: str, name: str = "commands.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config overrides in the env.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so a stray ``robosim.toml`` never leaks into a test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ROBOSIM_CONFIG", raising=False)
    monkeypatch.delenv("ROBOSIM_BOARD__WIDTH", raising=False)
    monkeypatch.delenv("ROBOSIM_BOARD__HEIGHT", raising=False)
    monkeypatch.delenv("ROBOSIM_PARSER__LENIENT", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Put the robosim logger back as it was (the CLI reconfigures it)."""
    logger = logging.getLogger("robosim")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
