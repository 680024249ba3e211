import pytest

pytest.importorskip("PyQt5")

pytestmark = pytest.mark.usefixtures("qapp")

from virtual_joystick_controller.joystick_controller import JoystickMode
from virtual_joystick_controller.main import build_parser, parse_config


def test_parse_config_defaults() -> None:
    args, config = parse_config(build_parser(), [])
    assert config.mode is JoystickMode.ALL_AXIS
    assert config.back_to_zero is True
    assert config.background_color == "#003366"
    assert args.windowed is False
    assert args.verbose is False


def test_parse_config_options() -> None:
    args, config = parse_config(
        build_parser(),
        ["--mode", "X_AXIS_ONLY", "--no-back-to-zero", "--background", "black", "--windowed", "-v"],
    )
    assert config.mode is JoystickMode.X_AXIS_ONLY
    assert config.back_to_zero is False
    assert config.background_color == "black"
    assert args.windowed is True
    assert args.verbose is True


@pytest.mark.parametrize("argv", [["--mode", "diagonal"], ["--background", "not-a-color"]])
def test_parse_config_reports_invalid_values(argv, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        parse_config(build_parser(), argv)
    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err
