"""Command-line entry point."""

from __future__ import annotations

import contextlib
import logging
import sys
from collections.abc import Iterator
from typing import IO

from .app import App, AppError, AppInputError
from .config import Config, ConfigError, parse_flags
from .parser import Parser
from .rover import DefaultMissionControlFactory

_USAGE = (
    "Usage: program -file <path> OR echo 'data' | program\n"
    "Options:\n"
    "  -min-size-x int  Minimum size X for plateau\n"
    "  -min-size-y int  Minimum size Y for plateau"
)


@contextlib.contextmanager
def open_input(cfg: Config) -> Iterator[IO[str]]:
    """Yield the configured input file, or piped standard input.

    Raises AppInputError if the file cannot be opened or nothing is piped in.
    """
    if cfg.file_path:
        try:
            handle = open(cfg.file_path, encoding="utf-8", errors="replace")
        except OSError as err:
            raise AppInputError(f"could not open file: {err}") from err
        with handle:
            yield handle
        return

    stdin = sys.stdin
    if stdin is None:
        raise AppInputError("could not stat stdin: standard input is not available")
    try:
        interactive = stdin.isatty()
    except (OSError, ValueError) as err:
        raise AppInputError(f"could not stat stdin: {err}") from err
    if interactive:
        print(_USAGE, file=sys.stderr)
        raise AppInputError("no input source provided")
    yield stdin


def run(reader: IO, cfg: Config, output: IO[str] | None = None) -> None:
    """Run a mission read from reader, writing results to output (stdout by default)."""
    app = App(
        Parser(),
        DefaultMissionControlFactory(),
        reader,
        sys.stdout if output is None else output,
        cfg,
    )
    app.run()


def main(argv: list[str] | None = None) -> None:
    """Parse flags, read the mission and print the final rover positions."""
    logging.basicConfig(
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )
    try:
        cfg = parse_flags(argv)
    except ConfigError as err:
        raise SystemExit(f"FATAL: {err}") from err

    with contextlib.ExitStack() as stack:
        try:
            reader = stack.enter_context(open_input(cfg))
        except AppInputError as err:
            raise SystemExit(f"FATAL: {err}") from err
        try:
            run(reader, cfg, sys.stdout)
        except AppError as err:
            raise SystemExit(f"FATAL: Application failed: {err}") from err


if __name__ == "__main__":
    main()