"""Qt widgets for the virtual joystick controller."""

from .joystick_widget import JoystickWidget

__all__ = ['JoystickWidget']
