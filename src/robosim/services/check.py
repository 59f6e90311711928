"""Validate every line of a command script without running it."""

from __future__ import annotations

import logging

from robosim.domain.commands import Place
from robosim.domain.parser import parse_command
from robosim.infrastructure.sources import LineSource
from robosim.services.result import ServiceResult
from robosim.services.simulation import Diagnostics

logger = logging.getLogger(__name__)


def check_script(source: LineSource, *, lenient: bool = False) -> ServiceResult:
    """Parse every non-blank line of *source* and summarize the outcome.

    The result fails with ``MALFORMED_COMMANDS`` when any line is
    rejected by the grammar. A script with no PLACE command passes
    with a warning, since the robot would ignore everything in it.
    """
    diagnostics = Diagnostics()
    count = blank = valid = places = 0
    try:
        while (line := source.next_line()) is not None:
            count += 1
            if not line.strip():
                blank += 1
                continue
            parsed = parse_command(line, lenient=lenient)
            if parsed.error is not None:
                diagnostics.record(count, parsed.error)
                continue
            valid += 1
            if isinstance(parsed.command, Place):
                places += 1
    finally:
        source.close()

    malformed = [entry.to_dict() for entry in diagnostics.entries]
    data = {"count": count, "valid": valid, "blank": blank, "malformed": malformed}
    meta = {"lenient": lenient}
    logger.debug("Checked %d lines: %d valid, %d malformed", count, valid, len(malformed))

    if malformed:
        return ServiceResult.failure(
            "check",
            "MALFORMED_COMMANDS",
            f"{len(malformed)} malformed line(s)",
            detail={"malformed": malformed},
            data=data,
            meta=meta,
        )

    warnings: list[str] = []
    if valid and not places:
        warnings.append("No PLACE command: every command would be ignored")
    return ServiceResult(ok=True, op="check", data=data, warnings=warnings, meta=meta)
