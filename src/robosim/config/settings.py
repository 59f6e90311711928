"""Runtime settings for robosim.

Values are merged from, highest priority first:

1. global CLI flags (``--json``, ``-v``, ...)
2. ``ROBOSIM_*`` environment variables, ``__`` between section and key,
   e.g. ``ROBOSIM_BOARD__WIDTH=8``
3. ``robosim.toml``: the file named by ``--config`` or ``ROBOSIM_CONFIG``,
   otherwise the nearest one found walking up from the working directory
4. the defaults on :class:`BoardConfig` and :class:`ParserConfig`
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from robosim.config.models import BoardConfig, ParserConfig

CONFIG_FILENAME = "robosim.toml"
CONFIG_ENV_VAR = "ROBOSIM_CONFIG"


def locate_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """Pick the TOML file for this invocation, or None to run on defaults.

    A path given by ``--config`` (or else ``ROBOSIM_CONFIG``) must exist;
    naming a missing file is a usage error rather than a silent fallback.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        if not path.is_file():
            raise click.ClickException(f"Config file not found: {path}")
        return path

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feeds the ``[board]`` and ``[parser]`` tables of a robosim.toml."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._tables: dict[str, Any] = {}
        if toml_path is None:
            return
        try:
            with toml_path.open("rb") as fh:
                self._tables = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._tables.get(field_name), field_name, field_name in self._tables

    def __call__(self) -> dict[str, Any]:
        return self._tables


# Carries the chosen TOML path into settings_customise_sources.
_tls = threading.local()


class RoboSettings(BaseSettings):
    """Frozen settings object held by :class:`~robosim.commands._context.AppContext`."""

    model_config = {
        "frozen": True,
        "env_prefix": "ROBOSIM_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    board: BoardConfig = Field(default_factory=BoardConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> RoboSettings:
        """Build settings for one CLI invocation.

        Bad values (for example ``width = 0``) are reported as a
        ``click.ClickException`` naming the offending key.
        """
        toml_path = locate_config(config_path, start)
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            first = exc.errors()[0]
            where = ".".join(str(part) for part in first["loc"])
            raise click.ClickException(
                f"Invalid configuration for {where}: {first['msg']}"
            ) from exc
        finally:
            _tls.toml_path = None
