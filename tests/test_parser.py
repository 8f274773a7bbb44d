import pytest

from marsrover.config import Config
from marsrover.parser import (
    InvalidCommandError,
    InvalidDirectionError,
    InvalidFormatError,
    Parser,
    PlateauFormatError,
    PlateauXError,
    PlateauYError,
    PositionFormatError,
    PositionXError,
    PositionYError,
    parse_commands_line,
    parse_direction,
    parse_plateau_line,
    parse_position_line,
)
from marsrover.rover import (
    Coordinates,
    Direction,
    Plateau,
    PlateauTooSmallError,
    PositionOutOfBoundsError,
    RoverInstruction,
    new_plateau,
    new_position,
)


def make_plateau(x, y):
    cfg = Config.default()
    return new_plateau(x, y, cfg.min_plateau_x, cfg.min_plateau_y)


def make_position(plateau, x, y, direction):
    return new_position(plateau, Coordinates(x, y), direction)


def make_instruction(plateau, x, y, direction, commands):
    return RoverInstruction(make_position(plateau, x, y, direction), commands)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("N", Direction.N),
        ("\tE", Direction.E),
        ("\tE   ", Direction.E),
        ("S", Direction.S),
        ("W", Direction.W),
        ("n", Direction.N),
    ],
)
def test_parse_direction(text, expected):
    assert parse_direction(text) == expected


def test_parse_direction_unknown():
    with pytest.raises(InvalidDirectionError, match="given XYZ"):
        parse_direction("XYZ")


def test_parse_position_line_nominal():
    plateau = make_plateau(10, 10)
    assert parse_position_line("5 5 N", plateau) == make_position(
        plateau, 5, 5, Direction.N
    )


@pytest.mark.parametrize(
    ("line", "error"),
    [
        ("5 5 N XYZ", PositionFormatError),
        ("5 5", PositionFormatError),
        ("XYZ 5 N", PositionXError),
        ("5 XYZ N", PositionYError),
        ("5 5 XYZ", InvalidDirectionError),
    ],
)
def test_parse_position_line_errors(line, error):
    with pytest.raises(error):
        parse_position_line(line, make_plateau(10, 10))


def test_parse_position_line_out_of_bounds():
    with pytest.raises(PositionOutOfBoundsError):
        parse_position_line("11 5 N", make_plateau(10, 10))


@pytest.mark.parametrize(
    ("line", "expected"),
    [("M", "M"), ("", ""), ("m", "M")],
)
def test_parse_commands_line(line, expected):
    assert parse_commands_line(line) == expected


def test_parse_commands_line_invalid():
    with pytest.raises(InvalidCommandError):
        parse_commands_line("?")


def test_parse_commands_line_strips_whitespace():
    assert parse_commands_line("  lmr\r") == "LMR"


def test_parse_plateau_line_nominal():
    assert parse_plateau_line("10 10", Config.default()) == make_plateau(10, 10)


@pytest.mark.parametrize(
    ("line", "error"),
    [
        ("10", PlateauFormatError),
        ("10 10 10", PlateauFormatError),
        ("XYZ 10", PlateauXError),
        ("10 XYZ", PlateauYError),
        ("1_0 10", PlateauXError),
    ],
)
def test_parse_plateau_line_errors(line, error):
    with pytest.raises(error):
        parse_plateau_line(line, Config.default())


def test_parse_plateau_line_respects_configured_minimum():
    with pytest.raises(PlateauTooSmallError):
        parse_plateau_line("1 10", Config.default())


def test_parse_nominal_problem_description():
    text = "\n5 5\n1 2 N\nLMLMLMLMM\n3 3 E\nMMRMMRMRRM"
    plateau, instructions = Parser().parse(text, Config.default())
    expected_plateau = make_plateau(5, 5)
    assert plateau == expected_plateau
    assert instructions == [
        make_instruction(expected_plateau, 1, 2, Direction.N, "LMLMLMLMM"),
        make_instruction(expected_plateau, 3, 3, Direction.E, "MMRMMRMRRM"),
    ]


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("\n5 5\n1 2 N", InvalidFormatError),
        ("\n5 X\n1 2 N\nLMLM", PlateauYError),
        ("\n5 5\n6 6 N\nLMLM", PositionOutOfBoundsError),
        ("\n5 5\n1 2 N\nLMXLM", InvalidCommandError),
        ("", InvalidFormatError),
        ("5 5\n1 2 N\nM\n3 3 E", InvalidFormatError),
    ],
)
def test_parse_errors(text, error):
    with pytest.raises(error):
        Parser().parse(text, Config.default())


def test_parse_accepts_crlf_lines():
    plateau, instructions = Parser().parse("5 5\r\n1 2 n\r\nm\r\n", Config.default())
    assert plateau == Plateau(5, 5)
    assert instructions == [
        RoverInstruction(make_position(plateau, 1, 2, Direction.N), "M")
    ]