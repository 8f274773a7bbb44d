# marsrover

Drive a squad of rovers across a rectangular plateau. Each rover gets a
starting position and a string of commands. Rovers stay on the plateau and
never run into each other.

## Installation

```
pip install .
```

## Input format

The first line gives the upper-right corner of the plateau. The lower-left
corner is always `0 0`. After that come two lines for each rover:

1. Its starting position: `x y direction`. The direction is one of `N`, `E`, `S`, `W`.
2. Its commands: `L` turns left 90°, `R` turns right 90°, and `M` moves one square forward.

Directions and commands can be upper or lower case. Any other command letter
is rejected while the input is parsed.

```
5 5
1 2 N
LMLMLMLMM
3 3 E
MMRMMRMRRM
```

Rovers run one after another. If a move would take a rover off the plateau,
or onto a square where another rover is standing, that move is skipped. A
warning is logged and the rover carries on with its remaining commands. A
starting position off the plateau is a parse error. A rover placed on a square
that is already occupied makes the whole mission fail.

## Command line

Read the input from a file:

```
marsrover -file mission.txt
```

or pipe it in:

```
cat mission.txt | marsrover
```

`python -m marsrover.cli` runs the same command.

Output for the example above:

```
info: Mission complete. Final rover positions:
1 3 N
5 1 E
```

Options. Each can be written with one dash or two.

- `-file PATH`: read the mission from `PATH` instead of standard input.
- `-min-size-x N`, `-min-size-y N`: the smallest plateau to accept. Both default to 2 and must be at least 1.
- `-webapi`: sets the configuration's mode to `OpMode.WEBAPI`. It cannot be combined with `-file`.
- `-addr ADDR`: server address stored in the configuration. Defaults to `:8080`.

If there is no `-file` and nothing is piped in, a usage message is printed to
standard error. Every failure is reported on standard error as a line starting
with `FATAL:`, and the program exits with status 1.

## What it does not do

There is no web server. `-webapi` and `-addr` are read and validated into the
`Config`, but nothing serves requests. The program always reads a mission from
a file or standard input and prints the result.

## Library use

```python
from marsrover.config import Config
from marsrover.parser import Parser
from marsrover.rover import DefaultMissionControlFactory, MissionControlInput

cfg = Config.default()
plateau, instructions = Parser().parse("5 5\n1 2 N\nLMLMLMLMM", cfg)
mission_control = DefaultMissionControlFactory().create(plateau)
print(mission_control.execute(MissionControlInput(instructions)))  # ['1 3 N']
```

Modules:

- `marsrover.config`: `Config`, `OpMode` and `parse_flags(argv)`.
- `marsrover.parser`: `Parser` and the line helpers `parse_plateau_line`,
  `parse_position_line`, `parse_direction` and `parse_commands_line`.
- `marsrover.rover`: `Plateau`, `Position`, `Rover`, `MissionControl`,
  `DefaultMissionControlFactory`, and the constructors `new_plateau` and
  `new_position`, which validate their arguments.
- `marsrover.app`: `App`, which reads from a file object, parses the text,
  runs the mission and writes the result to an output stream.
- `marsrover.cli`: `main(argv=None)`, `run(reader, cfg, output=None)` and the
  `open_input(cfg)` context manager.

Errors are raised as exceptions. Configuration problems are subclasses of
`marsrover.config.ConfigError`. Parsing problems are subclasses of
`marsrover.parser.ParseError`. Rover and plateau problems are subclasses of
`marsrover.rover.RoverError`. `App.run` wraps each failure in a subclass of
`marsrover.app.AppError`: `AppInputError`, `AppParsingError`,
`AppCreatingMissionControlError` or `AppExecMissionError`.