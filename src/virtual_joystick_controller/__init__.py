"""Virtual joystick controller: pointer-driven joystick geometry and its Qt widget."""

from .joystick_controller import (
    ControllerSnapshot,
    JoystickController,
    JoystickMode,
    Point,
)

__all__ = ['ControllerSnapshot', 'JoystickController', 'JoystickMode', 'Point']
