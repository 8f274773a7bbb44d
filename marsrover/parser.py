"""Parsing of the plain-text mission description."""

from __future__ import annotations

import re

from .config import Config
from .rover import (
    Command,
    Coordinates,
    Direction,
    Plateau,
    Position,
    RoverInstruction,
    new_plateau,
    new_position,
)


class ParseError(Exception):
    """Base class for malformed mission input."""

    default_message = "invalid input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class InvalidFormatError(ParseError):
    default_message = "must have a plateau line first and pairs of rover lines"


class PlateauFormatError(ParseError):
    default_message = "wrong plateau element count, must be X Y"


class PositionFormatError(ParseError):
    default_message = "wrong rover position element count, must be x y direction"


class PlateauXError(ParseError):
    default_message = "invalid plateau width"


class PlateauYError(ParseError):
    default_message = "invalid plateau height"


class PositionXError(ParseError):
    default_message = "invalid position given for X coordinate"


class PositionYError(ParseError):
    default_message = "invalid position given for Y coordinate"


class InvalidDirectionError(ParseError):
    default_message = "invalid direction given, must be N, E, S, W"


class InvalidCommandError(ParseError):
    default_message = "invalid command character given, must be L, R, M"


_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_DIRECTIONS = {
    "N": Direction.N,
    "E": Direction.E,
    "S": Direction.S,
    "W": Direction.W,
}
_COMMAND_LETTERS = frozenset(command.value for command in Command)


def _to_int(text: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f'parsing "{text}": value out of range')
    return value


class Parser:
    """Turns mission text into a plateau and a list of rover instructions."""

    def parse(
        self, text: str, cfg: Config
    ) -> tuple[Plateau, list[RoverInstruction]]:
        """Parse one plateau line followed by a pair of lines per rover."""
        lines = text.strip().split("\n")
        if len(lines) < 3 or (len(lines) - 1) % 2:
            raise InvalidFormatError()

        plateau = parse_plateau_line(lines[0], cfg)
        instructions = [
            RoverInstruction(
                parse_position_line(position_line, plateau),
                parse_commands_line(commands_line),
            )
            for position_line, commands_line in zip(lines[1::2], lines[2::2])
        ]
        return plateau, instructions


def parse_plateau_line(line: str, cfg: Config) -> Plateau:
    """Parse an "X Y" line into a plateau no smaller than the configured minimum."""
    parts = line.split()
    if len(parts) != 2:
        raise PlateauFormatError(
            f"{PlateauFormatError.default_message}: "
            f"want 2 elements, got {len(parts)}"
        )

    try:
        max_x = _to_int(parts[0])
    except ValueError as err:
        raise PlateauXError(
            f"{PlateauXError.default_message}: {parts[0]} {err}"
        ) from err

    try:
        max_y = _to_int(parts[1])
    except ValueError as err:
        raise PlateauYError(
            f"{PlateauYError.default_message}: {parts[1]} {err}"
        ) from err

    return new_plateau(max_x, max_y, cfg.min_plateau_x, cfg.min_plateau_y)


def parse_position_line(line: str, plateau: Plateau) -> Position:
    """Parse an "x y D" line into a position on the plateau."""
    parts = line.split()
    if len(parts) != 3:
        raise PositionFormatError(
            f"{PositionFormatError.default_message}: "
            f"want 3 elements, got {len(parts)}"
        )

    try:
        x = _to_int(parts[0])
    except ValueError as err:
        raise PositionXError(f"{PositionXError.default_message}: {err}") from err

    try:
        y = _to_int(parts[1])
    except ValueError as err:
        raise PositionYError(f"{PositionYError.default_message}: {err}") from err

    direction = parse_direction(parts[2])
    return new_position(plateau, Coordinates(x, y), direction)


def parse_direction(text: str) -> Direction:
    """Parse a compass letter, ignoring case and surrounding whitespace."""
    try:
        return _DIRECTIONS[text.strip().upper()]
    except KeyError:
        raise InvalidDirectionError(
            f"{InvalidDirectionError.default_message}: given {text}"
        ) from None


def parse_commands_line(line: str) -> str:
    """Return the upper-cased command string, rejecting unknown letters."""
    commands = line.strip().upper()
    for index, char in enumerate(commands):
        if char not in _COMMAND_LETTERS:
            raise InvalidCommandError(
                f"{InvalidCommandError.default_message}: "
                f"character {ord(char)} at position {index}"
            )
    return commands