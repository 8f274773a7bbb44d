import pytest

from marsrover.config import (
    DEFAULT_MIN_SIZE_X,
    DEFAULT_MIN_SIZE_Y,
    DEFAULT_SERVER_ADDR,
    Config,
    ConfigError,
    FlagsIncompatibleError,
    OpMode,
    PlateauDimensionsError,
    ServerAddrError,
    parse_flags,
)


def test_default_config_values():
    cfg = Config.default()
    assert cfg.min_plateau_x == DEFAULT_MIN_SIZE_X
    assert cfg.min_plateau_y == DEFAULT_MIN_SIZE_Y
    assert cfg.op_mode is OpMode.CLI
    assert cfg.file_path == ""


def test_default_config_is_valid():
    cfg = Config.default()
    cfg.validate()
    assert cfg == Config.default()


@pytest.mark.parametrize("min_x, min_y", [(0, 2), (2, 0), (-1, -1)])
def test_validate_rejects_non_positive_dimensions(min_x, min_y):
    cfg = Config(min_plateau_x=min_x, min_plateau_y=min_y)
    with pytest.raises(PlateauDimensionsError) as excinfo:
        cfg.validate()
    assert f"(got {min_x}x{min_y})" in str(excinfo.value)


def test_validate_webapi_requires_address():
    cfg = Config(op_mode=OpMode.WEBAPI, srv_addr="")
    with pytest.raises(ServerAddrError):
        cfg.validate()


def test_errors_share_base_class():
    cfg = Config(op_mode=OpMode.WEBAPI, srv_addr="")
    with pytest.raises(ConfigError):
        cfg.validate()


def test_parse_flags_defaults():
    cfg = parse_flags([])
    assert cfg.op_mode is OpMode.CLI
    assert cfg.srv_addr == DEFAULT_SERVER_ADDR
    assert cfg.srv_addr == ":8080"
    assert (cfg.min_plateau_x, cfg.min_plateau_y) == (
        DEFAULT_MIN_SIZE_X,
        DEFAULT_MIN_SIZE_Y,
    )


def test_parse_flags_file_and_sizes():
    cfg = parse_flags(["-file", "input.txt", "-min-size-x", "3", "-min-size-y", "4"])
    assert cfg.file_path == "input.txt"
    assert cfg.min_plateau_x == 3
    assert cfg.min_plateau_y == 4
    assert cfg.op_mode is OpMode.CLI


def test_parse_flags_double_dash_form():
    cfg = parse_flags(["--file=data.txt"])
    assert cfg.file_path == "data.txt"


def test_parse_flags_webapi_mode():
    cfg = parse_flags(["-webapi", "-addr", ":9000"])
    assert cfg.op_mode is OpMode.WEBAPI
    assert cfg.srv_addr == ":9000"


def test_parse_flags_webapi_with_file_incompatible():
    with pytest.raises(FlagsIncompatibleError):
        parse_flags(["-webapi", "-file", "input.txt"])


def test_parse_flags_invalid_dimensions():
    with pytest.raises(PlateauDimensionsError):
        parse_flags(["-min-size-x", "0"])


def test_parse_flags_webapi_empty_address():
    with pytest.raises(ServerAddrError):
        parse_flags(["-webapi", "-addr", ""])


def test_parse_flags_bad_integer_exits():
    with pytest.raises(SystemExit) as excinfo:
        parse_flags(["-min-size-x", "abc"])
    assert excinfo.value.code == 2