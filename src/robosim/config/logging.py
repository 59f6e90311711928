"""Log setup for the robosim CLI.

Everything robosim logs lives under the ``robosim`` logger and is written
to stderr, so stdout carries nothing but REPORT lines. ``-v`` lowers the
level to DEBUG, where ignored commands and rejected lines are traced;
``--log-json`` renders one JSON object per line instead of console text.

Only the ``robosim`` logger is configured. The root logger, and any
handlers an embedding application put there, are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "robosim"
_HANDLER_NAME = "robosim-stderr"

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route the ``robosim`` logger to stderr through structlog.

    Safe to call more than once: the handler from an earlier call is
    replaced, never duplicated.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    for stale in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(stale)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
