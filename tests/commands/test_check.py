"""Tests for the check CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from robosim.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestCheckCommand:
    def test_clean_script(self, cli_runner: CliRunner, write_script: Callable[..., Path]) -> None:
        path = write_script("PLACE 0,0,NORTH", "MOVE", "REPORT")
        result = cli_runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "valid: 3" in result.stdout

    def test_json_output(self, cli_runner: CliRunner, write_script: Callable[..., Path]) -> None:
        path = write_script("PLACE 0,0,NORTH", "", "REPORT")
        result = cli_runner.invoke(cli, ["--json", "check", str(path)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "check"
        assert data["data"]["count"] == 3
        assert data["data"]["blank"] == 1

    def test_malformed_lines_fail(
        self, cli_runner: CliRunner, write_script: Callable[..., Path]
    ) -> None:
        path = write_script("FOO BAR", "PLACE 0,0,NORTH", "MOVE 2")
        result = cli_runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "2 malformed line(s)" in result.stderr
        assert "FOO BAR" in result.stderr
        assert "MOVE 2" in result.stderr

    def test_malformed_json(self, cli_runner: CliRunner, write_script: Callable[..., Path]) -> None:
        path = write_script("PLACE 0,0,UP")
        result = cli_runner.invoke(cli, ["--json", "check", str(path)])
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "MALFORMED_COMMANDS"
        assert payload["data"]["malformed"][0]["line_no"] == 1

    def test_quiet(self, cli_runner: CliRunner, write_script: Callable[..., Path]) -> None:
        path = write_script("PLACE 0,0,NORTH")
        result = cli_runner.invoke(cli, ["-q", "check", str(path)])
        assert result.stdout == "OK: check\n"

    def test_no_place_warning_on_stderr(
        self, cli_runner: CliRunner, write_script: Callable[..., Path]
    ) -> None:
        result = cli_runner.invoke(cli, ["check", str(write_script("MOVE"))])
        assert result.exit_code == 0
        assert "WARNING: No PLACE command" in result.stderr

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "-"], input="PLACE 1,1,EAST\n")
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["valid"] == 1

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "An error has occurred" in result.stderr
