"""The application: read input, parse it and run the mission."""

from __future__ import annotations

from typing import IO, Protocol

from .config import Config
from .parser import ParseError
from .rover import (
    MissionControlFactory,
    MissionControlInput,
    Plateau,
    RoverError,
    RoverInstruction,
)


class AppError(Exception):
    """Base class for failures of an application run."""

    default_message = "application error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class AppInputError(AppError):
    default_message = "error reading input"


class AppParsingError(AppError):
    default_message = "error parsing input"


class AppCreatingMissionControlError(AppError):
    default_message = "error creating mission control"


class AppExecMissionError(AppError):
    default_message = "error executing mission"


class _InputParser(Protocol):
    def parse(
        self, text: str, cfg: Config
    ) -> tuple[Plateau, list[RoverInstruction]]: ...


class App:
    """Wires a parser and a mission control factory to an input and an output."""

    def __init__(
        self,
        parser: _InputParser,
        factory: MissionControlFactory,
        reader: IO,
        output: IO[str],
        cfg: Config,
    ) -> None:
        self.parser = parser
        self.factory = factory
        self.reader = reader
        self.output = output
        self.cfg = cfg

    def run(self) -> None:
        """Run the mission and write the final rover positions to the output."""
        try:
            data = self.reader.read()
        except (OSError, ValueError) as err:
            raise AppInputError(f"{AppInputError.default_message}: {err}") from err
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data

        try:
            plateau, instructions = self.parser.parse(text, self.cfg)
        except (ParseError, RoverError) as err:
            raise AppParsingError(f"{AppParsingError.default_message}: {err}") from err

        try:
            mission_control = self.factory.create(plateau)
        except RoverError as err:
            raise AppCreatingMissionControlError(
                f"{AppCreatingMissionControlError.default_message}: {err}"
            ) from err

        try:
            positions = mission_control.execute(
                MissionControlInput(list(instructions))
            )
        except RoverError as err:
            raise AppExecMissionError(
                f"{AppExecMissionError.default_message}: {err}"
            ) from err

        print("info: Mission complete. Final rover positions:", file=self.output)
        for position in positions:
            print(position, file=self.output)