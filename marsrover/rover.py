"""Plateau, rover and mission control model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


class RoverError(Exception):
    """Base class for rover model errors."""

    default_message = "rover error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class PositionOutOfBoundsError(RoverError):
    default_message = "position must be more than 0 and within boundaries"


class DirectionUnknownError(RoverError):
    default_message = "direction must be one of N, E, S, W"


class RoverPositionIsNoneError(RoverError):
    default_message = "rover must not be nil"


class RoverCollisionError(RoverError):
    default_message = "path is blocked by another rover"


class RoverInstructionsError(RoverError):
    default_message = "rover error executing instruction"


class RoverCreatingError(RoverError):
    default_message = "rover could not be created"


class PlateauTooSmallError(RoverError):
    default_message = "plateau must be at least 2 * 2"


class PlateauIsNoneError(RoverError):
    default_message = "plateau must not be nil"


class Direction(Enum):
    """Compass heading of a rover."""

    UNKNOWN = 0
    N = 1
    E = 2
    S = 3
    W = 4

    def __str__(self) -> str:
        return "?" if self is Direction.UNKNOWN else self.name


_LEFT_OF = {
    Direction.N: Direction.W,
    Direction.W: Direction.S,
    Direction.S: Direction.E,
    Direction.E: Direction.N,
}
_RIGHT_OF = {value: key for key, value in _LEFT_OF.items()}
_STEP = {
    Direction.N: (0, 1),
    Direction.E: (1, 0),
    Direction.S: (0, -1),
    Direction.W: (-1, 0),
}


class Command(str, Enum):
    """Single-letter rover command."""

    MOVE = "M"
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Coordinates:
    """A grid point; no validation is applied."""

    x: int
    y: int


@dataclass(frozen=True)
class Plateau:
    """Rectangular area from (0, 0) to (max_x, max_y) inclusive."""

    max_x: int
    max_y: int

    def contains(self, coordinates: Coordinates) -> bool:
        """Return True if the coordinates lie within the plateau."""
        return 0 <= coordinates.x <= self.max_x and 0 <= coordinates.y <= self.max_y


def new_plateau(max_x: int, max_y: int, min_size_x: int, min_size_y: int) -> Plateau:
    """Create a plateau, refusing one smaller than the given minimums."""
    if max_x < min_size_x or max_y < min_size_y:
        raise PlateauTooSmallError(
            f"{PlateauTooSmallError.default_message}: "
            f"plateau must be at least {min_size_x} x {min_size_y}"
        )
    return Plateau(max_x, max_y)


@dataclass
class Position:
    """Location and heading of a rover."""

    coordinates: Coordinates
    direction: Direction

    def __str__(self) -> str:
        return f"{self.coordinates.x} {self.coordinates.y} {self.direction}"

    def validate(self, plateau: Plateau) -> None:
        """Raise PositionOutOfBoundsError if the position is off the plateau."""
        if not plateau.contains(self.coordinates):
            raise PositionOutOfBoundsError()


def _validate_direction(direction: Direction) -> None:
    if direction not in _STEP:
        raise DirectionUnknownError()


def new_position(
    plateau: Plateau, coordinates: Coordinates, direction: Direction
) -> Position:
    """Create a position that is on the plateau and has a known heading."""
    position = Position(coordinates, direction)
    position.validate(plateau)
    _validate_direction(direction)
    return position


@dataclass
class Rover:
    """A rover identified by number, holding its current position."""

    rover_id: int
    position: Position

    def __post_init__(self) -> None:
        if self.position is None:
            raise RoverPositionIsNoneError()

    def move(self) -> Position:
        """Return the position one step ahead, without moving the rover."""
        dx, dy = _STEP.get(self.position.direction, (0, 0))
        current = self.position.coordinates
        return replace(
            self.position, coordinates=Coordinates(current.x + dx, current.y + dy)
        )

    def turn_left(self) -> None:
        """Rotate 90 degrees to the left."""
        self.position.direction = _LEFT_OF.get(
            self.position.direction, self.position.direction
        )

    def turn_right(self) -> None:
        """Rotate 90 degrees to the right."""
        self.position.direction = _RIGHT_OF.get(
            self.position.direction, self.position.direction
        )


@dataclass
class RoverInstruction:
    """Starting position and command string for one rover."""

    initial_position: Position | None
    commands: str


@dataclass
class MissionControlInput:
    """All rover instructions for one mission, in launch order."""

    instructions: list[RoverInstruction] = field(default_factory=list)


class MissionControl:
    """Runs rovers one after another on a plateau, tracking occupied squares."""

    def __init__(
        self, plateau: Plateau, occupied: dict[Coordinates, int] | None = None
    ) -> None:
        if plateau is None:
            raise PlateauIsNoneError()
        self.plateau = plateau
        self.occupied: dict[Coordinates, int] = dict(occupied or {})

    def _check(self, coordinates: Coordinates) -> None:
        if not self.plateau.contains(coordinates):
            raise PositionOutOfBoundsError()
        if coordinates in self.occupied:
            raise RoverCollisionError()

    def run_rover(self, rover: Rover, commands: str) -> str:
        """Place the rover, apply its commands and return its final position.

        Moves that would leave the plateau or hit another rover are skipped;
        unknown command letters are ignored.
        """
        try:
            self._check(rover.position.coordinates)
        except (PositionOutOfBoundsError, RoverCollisionError) as err:
            raise type(err)(
                f"new rover with id {rover.rover_id} cannot be placed at "
                f"({rover.position}): {err}"
            ) from err

        self.occupied[rover.position.coordinates] = rover.rover_id

        for char in commands:
            if char == Command.LEFT:
                rover.turn_left()
            elif char == Command.RIGHT:
                rover.turn_right()
            elif char == Command.MOVE:
                current = rover.position.coordinates
                target = rover.move()
                try:
                    self._check(target.coordinates)
                except (PositionOutOfBoundsError, RoverCollisionError) as err:
                    logger.warning(
                        "Rover %d ignored move to (%s): %s",
                        rover.rover_id,
                        target,
                        err,
                    )
                    continue
                rover.position.coordinates = target.coordinates
                rover.position.direction = target.direction
                del self.occupied[current]
                self.occupied[target.coordinates] = rover.rover_id

        return str(rover.position)

    def execute(self, mission_input: MissionControlInput) -> list[str]:
        """Run every rover in order and return their final positions."""
        output: list[str] = []
        for rover_id, instruction in enumerate(mission_input.instructions, start=1):
            try:
                rover = Rover(rover_id, instruction.initial_position)
            except RoverError as err:
                raise RoverCreatingError(
                    f"{RoverCreatingError.default_message} {rover_id}: {err}"
                ) from err
            try:
                output.append(self.run_rover(rover, instruction.commands))
            except RoverError as err:
                raise RoverInstructionsError(
                    f"{RoverInstructionsError.default_message} {rover_id}: {err}"
                ) from err
        return output


@runtime_checkable
class MissionControlFactory(Protocol):
    """Anything that can build a MissionControl for a plateau."""

    def create(self, plateau: Plateau) -> MissionControl:
        """Return a mission control for the plateau."""


class DefaultMissionControlFactory:
    """Builds plain MissionControl instances."""

    def create(self, plateau: Plateau) -> MissionControl:
        return MissionControl(plateau)