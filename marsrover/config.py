"""Runtime configuration and command-line flag handling."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum

DEFAULT_SERVER_ADDR = ":8080"
DEFAULT_MIN_SIZE_X = 2
DEFAULT_MIN_SIZE_Y = 2


class OpMode(Enum):
    """How the program is meant to operate."""

    UNKNOWN = 0
    CLI = 1
    WEBAPI = 2


class ConfigError(Exception):
    """Base class for configuration problems."""

    default_message = "invalid configuration"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class FlagsIncompatibleError(ConfigError):
    default_message = "cannot use -file and -webapi flags at the same time"


class PlateauDimensionsError(ConfigError):
    default_message = "plateau dimensions must be positive"


class ServerAddrError(ConfigError):
    default_message = (
        "server address required for WebAPI mode, leave empty for default address"
    )


@dataclass
class Config:
    """Settings that drive a run."""

    file_path: str = ""
    min_plateau_x: int = DEFAULT_MIN_SIZE_X
    min_plateau_y: int = DEFAULT_MIN_SIZE_Y
    op_mode: OpMode = OpMode.CLI
    srv_addr: str = ""

    @classmethod
    def default(cls) -> Config:
        """Return a command-line mode configuration with the default minimums."""
        return cls(
            min_plateau_x=DEFAULT_MIN_SIZE_X,
            min_plateau_y=DEFAULT_MIN_SIZE_Y,
            op_mode=OpMode.CLI,
        )

    def validate(self) -> None:
        """Raise a ConfigError if the settings are not usable."""
        if self.min_plateau_x < 1 or self.min_plateau_y < 1:
            raise PlateauDimensionsError(
                f"{PlateauDimensionsError.default_message}: "
                f"(got {self.min_plateau_x}x{self.min_plateau_y})"
            )
        if self.op_mode is OpMode.WEBAPI and not self.srv_addr:
            raise ServerAddrError()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(allow_abbrev=False)
    parser.add_argument(
        "-file",
        "--file",
        dest="file_path",
        default="",
        help="Input file. If not provided, reads from stdin.",
    )
    parser.add_argument(
        "-min-size-x",
        "--min-size-x",
        dest="min_plateau_x",
        type=int,
        default=DEFAULT_MIN_SIZE_X,
        help="Minimum size X for plateau (optional)",
    )
    parser.add_argument(
        "-min-size-y",
        "--min-size-y",
        dest="min_plateau_y",
        type=int,
        default=DEFAULT_MIN_SIZE_Y,
        help="Minimum size Y for plateau (optional)",
    )
    parser.add_argument(
        "-webapi",
        "--webapi",
        dest="webapi",
        action="store_true",
        help="run in webapi server mode",
    )
    parser.add_argument(
        "-addr",
        "--addr",
        dest="srv_addr",
        default=DEFAULT_SERVER_ADDR,
        help="port for webapi server",
    )
    return parser


def parse_flags(argv: list[str] | None = None) -> Config:
    """Build a validated Config from command-line arguments."""
    args = _build_parser().parse_args(argv)

    if args.webapi:
        if args.file_path:
            raise FlagsIncompatibleError()
        op_mode = OpMode.WEBAPI
    else:
        op_mode = OpMode.CLI

    cfg = Config(
        file_path=args.file_path,
        min_plateau_x=args.min_plateau_x,
        min_plateau_y=args.min_plateau_y,
        op_mode=op_mode,
        srv_addr=args.srv_addr,
    )
    cfg.validate()
    return cfg