"""Configuration utilities for the virtual joystick controller."""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtGui import QColor

from .joystick_controller import JoystickMode


logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND_COLOR = "#003366"
DEFAULT_JOYSTICK_COLOR = "#004d99"
DEFAULT_CONTROLLER_COLOR = "#FFFFFF"

_MODE_ALIASES = {
    "none": JoystickMode.NO_AXIS,
    "x": JoystickMode.X_AXIS_ONLY,
    "y": JoystickMode.Y_AXIS_ONLY,
    "all": JoystickMode.ALL_AXIS,
}


def mode_choices() -> list[str]:
    return [mode.name.lower().replace("_", "-") for mode in JoystickMode]


def parse_mode(name: str) -> JoystickMode:
    """Parse 'all-axis', 'X_AXIS_ONLY', 'none'... into a JoystickMode."""
    key = (name or "").strip().lower().replace("-", "_")
    if key in _MODE_ALIASES:
        return _MODE_ALIASES[key]
    try:
        return JoystickMode[key.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown joystick mode '{name}', expected one of {mode_choices()}"
        ) from None


def _validate_color(value: str, label: str) -> None:
    if not isinstance(value, str) or not QColor.isValidColor(value):
        raise ValueError(f"{label} color '{value}' is not a valid color name")


@dataclass
class JoystickControllerConfig:
    """Container for the user editable joystick configuration."""

    mode: JoystickMode = JoystickMode.ALL_AXIS
    back_to_zero: bool = True
    background_color: str = DEFAULT_BACKGROUND_COLOR
    joystick_color: str = DEFAULT_JOYSTICK_COLOR
    controller_color: str = DEFAULT_CONTROLLER_COLOR

    def __post_init__(self):
        self.validate()

    def validate(self):
        if not isinstance(self.mode, JoystickMode):
            raise ValueError(f"Mode must be one of {mode_choices()}")

        _validate_color(self.background_color, "Background")
        _validate_color(self.joystick_color, "Joystick")
        _validate_color(self.controller_color, "Controller")


class ConfigurationManager(QObject):
    """Tracks configuration values and emits change notifications."""

    config_changed = pyqtSignal()
    mode_changed = pyqtSignal(object)
    back_to_zero_changed = pyqtSignal(bool)
    colors_changed = pyqtSignal()

    def __init__(self, config: Optional[JoystickControllerConfig] = None, parent=None):
        super().__init__(parent)
        self._config = replace(config) if config is not None else JoystickControllerConfig()

    def get_config(self) -> JoystickControllerConfig:
        return replace(self._config)

    def get_mode(self) -> JoystickMode:
        return self._config.mode

    def set_mode(self, mode: JoystickMode):
        if not isinstance(mode, JoystickMode):
            raise ValueError(f"Mode must be one of {mode_choices()}")

        if mode != self._config.mode:
            self._config.mode = mode
            logger.debug("Configured mode: %s", mode.name)
            self.mode_changed.emit(mode)
            self.config_changed.emit()

    def is_back_to_zero_enabled(self) -> bool:
        return self._config.back_to_zero

    def set_back_to_zero(self, enabled: bool):
        enabled = bool(enabled)
        if enabled != self._config.back_to_zero:
            self._config.back_to_zero = enabled
            self.back_to_zero_changed.emit(enabled)
            self.config_changed.emit()

    def get_colors(self) -> tuple[str, str, str]:
        return (
            self._config.background_color,
            self._config.joystick_color,
            self._config.controller_color,
        )

    def set_colors(
        self,
        background: Optional[str] = None,
        joystick: Optional[str] = None,
        controller: Optional[str] = None,
    ):
        background = self._config.background_color if background is None else background
        joystick = self._config.joystick_color if joystick is None else joystick
        controller = self._config.controller_color if controller is None else controller

        _validate_color(background, "Background")
        _validate_color(joystick, "Joystick")
        _validate_color(controller, "Controller")

        if (background, joystick, controller) != self.get_colors():
            self._config.background_color = background
            self._config.joystick_color = joystick
            self._config.controller_color = controller
            self.colors_changed.emit()
            self.config_changed.emit()
