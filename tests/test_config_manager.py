import pytest

pytest.importorskip("PyQt5")

pytestmark = pytest.mark.usefixtures("qapp")

from virtual_joystick_controller.config_manager import (
    ConfigurationManager,
    JoystickControllerConfig,
    mode_choices,
    parse_mode,
)
from virtual_joystick_controller.joystick_controller import JoystickMode


@pytest.mark.parametrize(
    "name, mode",
    [
        ("all-axis", JoystickMode.ALL_AXIS),
        ("X_AXIS_ONLY", JoystickMode.X_AXIS_ONLY),
        (" y-axis-only ", JoystickMode.Y_AXIS_ONLY),
        ("none", JoystickMode.NO_AXIS),
        ("no_axis", JoystickMode.NO_AXIS),
        ("x", JoystickMode.X_AXIS_ONLY),
    ],
)
def test_parse_mode(name, mode) -> None:
    assert parse_mode(name) is mode


def test_parse_mode_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="all-axis"):
        parse_mode("diagonal")


def test_mode_choices_cover_every_mode() -> None:
    assert sorted(mode_choices()) == ["all-axis", "no-axis", "x-axis-only", "y-axis-only"]


def test_config_defaults() -> None:
    config = JoystickControllerConfig()
    assert config.mode is JoystickMode.ALL_AXIS
    assert config.back_to_zero is True
    assert config.background_color == "#003366"
    assert config.joystick_color == "#004d99"
    assert config.controller_color == "#FFFFFF"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mode": "all-axis"},
        {"background_color": "not-a-color"},
        {"controller_color": ""},
    ],
)
def test_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        JoystickControllerConfig(**kwargs)


def test_manager_emits_only_on_change(qapp) -> None:
    manager = ConfigurationManager()
    events = []
    manager.mode_changed.connect(lambda mode: events.append(("mode", mode)))
    manager.back_to_zero_changed.connect(lambda on: events.append(("back_to_zero", on)))
    manager.config_changed.connect(lambda: events.append(("config",)))

    manager.set_mode(JoystickMode.ALL_AXIS)
    manager.set_mode(JoystickMode.NO_AXIS)
    manager.set_back_to_zero(True)
    manager.set_back_to_zero(False)

    assert events == [
        ("mode", JoystickMode.NO_AXIS),
        ("config",),
        ("back_to_zero", False),
        ("config",),
    ]


def test_manager_colors(qapp) -> None:
    manager = ConfigurationManager()
    changes = []
    manager.colors_changed.connect(lambda: changes.append(True))

    manager.set_colors(controller="#ff0000")
    manager.set_colors(controller="#ff0000")

    assert manager.get_colors() == ("#003366", "#004d99", "#ff0000")
    assert changes == [True]

    with pytest.raises(ValueError):
        manager.set_colors(background="nope")
    assert manager.get_colors()[0] == "#003366"


def test_manager_rejects_invalid_mode(qapp) -> None:
    manager = ConfigurationManager()
    with pytest.raises(ValueError):
        manager.set_mode("x")


def test_get_config_returns_copy(qapp) -> None:
    manager = ConfigurationManager(JoystickControllerConfig(back_to_zero=False))
    config = manager.get_config()
    config.back_to_zero = True
    assert manager.is_back_to_zero_enabled() is False
