"""Command grammar: one line of text to one Command value.

Grammar (keywords and direction words are case-insensitive)::

    PLACE <int>,<int>,<NORTH|SOUTH|EAST|WEST>
    MOVE
    LEFT
    RIGHT
    REPORT

Only ASCII text is accepted and surrounding whitespace is ignored. In
strict mode (the default) the keyword and the PLACE argument block are
separated by exactly one space and the block itself contains no
whitespace. Lenient mode accepts any run of whitespace after the
keyword and around the argument tokens.

INVARIANT: Parsing never raises. Failures come back as a
:class:`ParseResult` carrying a :class:`MalformedCommand`.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from robosim.domain.commands import BARE_COMMANDS, Command, Place
from robosim.domain.direction import Direction

# At most ten digits, the width of a 32-bit int.
_INTEGER = re.compile(r"[+-]?[0-9]{1,10}")
_WHITESPACE = re.compile(r"\s+")


class MalformedCommand(BaseModel):
    """A line that does not match the command grammar."""

    model_config = {"frozen": True}

    line: str
    reason: str

    @property
    def message(self) -> str:
        return f"Unknown command has been given [{self.line}]: {self.reason}"


class ParseResult(BaseModel):
    """Outcome of parsing one line: a command or a malformed-command error."""

    model_config = {"frozen": True}

    command: Command | None = None
    error: MalformedCommand | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, command: Command) -> ParseResult:
        return cls(command=command)

    @classmethod
    def failure(cls, line: str, reason: str) -> ParseResult:
        return cls(error=MalformedCommand(line=line, reason=reason))


def parse_command(line: str, *, lenient: bool = False) -> ParseResult:
    """Parse a single command line.

    Args:
        line: Raw input line. Leading/trailing whitespace is ignored.
        lenient: Tolerate extra whitespace inside the PLACE arguments.
    """
    text = line.strip()
    if not text:
        return ParseResult.failure(text, "empty command")
    if not text.isascii():
        return ParseResult.failure(text, "non-ASCII characters in command")

    if lenient:
        parts = _WHITESPACE.split(text, maxsplit=1)
        keyword = parts[0]
        rest = parts[1] if len(parts) > 1 else None
    else:
        keyword, sep, tail = text.partition(" ")
        rest = tail if sep else None

    keyword = keyword.upper()
    if keyword == "PLACE":
        return _parse_place(text, rest, lenient=lenient)

    bare = BARE_COMMANDS.get(keyword)
    if bare is None:
        return ParseResult.failure(text, f"unknown command {keyword!r}")
    if rest is not None:
        return ParseResult.failure(text, f"{keyword} takes no arguments")
    return ParseResult.success(bare())


def _parse_place(text: str, rest: str | None, *, lenient: bool) -> ParseResult:
    if not rest:
        return ParseResult.failure(text, "PLACE expects arguments X,Y,F")

    tokens = rest.split(",")
    if len(tokens) != 3:
        return ParseResult.failure(text, "PLACE expects exactly three arguments X,Y,F")
    if lenient:
        tokens = [token.strip() for token in tokens]

    x_token, y_token, facing_token = tokens
    for token in (x_token, y_token):
        if not _INTEGER.fullmatch(token):
            return ParseResult.failure(text, f"invalid coordinate {token!r}")

    direction = Direction.from_token(facing_token)
    if direction is None:
        return ParseResult.failure(text, f"unknown direction {facing_token!r}")

    return ParseResult.success(Place(x=int(x_token), y=int(y_token), direction=direction))
