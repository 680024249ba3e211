from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple, assert_never


logger = logging.getLogger(__name__)


class JoystickMode(Enum):
    """Degree of freedom allowed to the controller knob."""
    NO_AXIS = auto()
    X_AXIS_ONLY = auto()
    Y_AXIS_ONLY = auto()
    ALL_AXIS = auto()


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


@dataclass
class Circle:
    center: Point = field(default_factory=Point)
    radius: int = 0


@dataclass(frozen=True)
class ControllerSnapshot:
    """Immutable view of the geometry and output, consumed on repaint."""
    width: int
    height: int
    center: Point
    joystick_radius: int
    controller_radius: int
    controller_position: Point
    x: int
    y: int
    mode: JoystickMode
    back_to_zero: bool


def to_signed_byte(v: int) -> int:
    """Reinterpret an integer as signed 8-bit (two's-complement wraparound)."""
    return ((int(v) + 128) % 256) - 128


def get_center(width: int, height: int) -> Point:
    return Point(width // 2, height // 2)


def get_radius(width: int, height: int) -> int:
    """Joystick radius for a widget of the given size, truncated at each step."""
    side = min(width, height)
    return side // 2 - side // 6


def contains(x: int, y: int, radius: int) -> bool:
    """True if (x, y) lies inside or on a circle of ``radius`` around the origin."""
    return x * x + y * y <= radius * radius


def translate_top_left_to_center(x: int, y: int, width: int, height: int) -> Tuple[int, int]:
    return (x - width // 2, y - height // 2)


class JoystickController:
    """
    Geometry and behavior of a single on-screen joystick.

    Responsibilities:
      - Track widget bounds, joystick/controller radii and the knob position
      - Map pointer press/move/release into knob position and output value
      - Notify listeners ("pressed", "value changed") and request redraws

    The host toolkit forwards its pointer and resize events here and reads
    ``snapshot()`` back when painting.
    """

    def __init__(self, request_redraw: Optional[Callable[[], None]] = None) -> None:
        self._request_redraw = request_redraw
        self._width = 0
        self._height = 0
        self._joystick = Circle()
        self._controller = Circle()
        self._controller_position = Point()
        self._x = 0
        self._y = 0
        self._back_to_zero = True
        self._mode = JoystickMode.ALL_AXIS
        self._pressed_listeners: List[Callable[[], None]] = []
        self._value_changed_listeners: List[Callable[[int, int], None]] = []

    # ---- listeners ----
    def add_pressed_listener(self, callback: Callable[[], None]) -> None:
        self._pressed_listeners.append(callback)

    def remove_pressed_listener(self, callback: Callable[[], None]) -> None:
        self._pressed_listeners.remove(callback)

    def add_value_changed_listener(self, callback: Callable[[int, int], None]) -> None:
        self._value_changed_listeners.append(callback)

    def remove_value_changed_listener(self, callback: Callable[[int, int], None]) -> None:
        self._value_changed_listeners.remove(callback)

    # ---- output value ----
    def x(self) -> int:
        return self._x

    def set_x(self, x: int) -> None:
        x = to_signed_byte(x)
        if x != self._x:
            self._x = x
            self._redraw()

    def y(self) -> int:
        return self._y

    def set_y(self, y: int) -> None:
        y = to_signed_byte(y)
        if y != self._y:
            self._y = y
            self._redraw()

    # ---- behavior flags ----
    def mode(self) -> JoystickMode:
        return self._mode

    def set_mode(self, mode: JoystickMode) -> None:
        if not isinstance(mode, JoystickMode):
            raise TypeError(f"Expected JoystickMode, got {mode!r}")
        logger.debug("Joystick mode set to %s", mode.name)
        self._mode = mode
        self._redraw()

    def back_to_zero(self) -> bool:
        return self._back_to_zero

    def set_back_to_zero(self, enable: bool) -> None:
        self._back_to_zero = bool(enable)
        logger.debug("Return to zero %s", "enabled" if self._back_to_zero else "disabled")

    # ---- geometry ----
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def center(self) -> Point:
        return get_center(self._width, self._height)

    def joystick_radius(self) -> int:
        return self._joystick.radius

    def controller_radius(self) -> int:
        return self._controller.radius

    def controller_position(self) -> Point:
        return self._controller_position

    def snapshot(self) -> ControllerSnapshot:
        return ControllerSnapshot(
            width=self._width,
            height=self._height,
            center=self.center(),
            joystick_radius=self._joystick.radius,
            controller_radius=self._controller.radius,
            controller_position=self._controller_position,
            x=self._x,
            y=self._y,
            mode=self._mode,
            back_to_zero=self._back_to_zero,
        )

    # ---- host events ----
    def on_resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

        center = get_center(width, height)
        radius = get_radius(width, height)
        self._joystick = Circle(center, radius)
        self._controller = Circle(center, radius // 2)
        self._controller_position = center
        logger.debug("Resized to %dx%d: joystick radius %d, controller radius %d",
                     width, height, radius, radius // 2)

    def on_pointer_down(self, x: int, y: int) -> None:
        cx, cy = translate_top_left_to_center(x, y, self._width, self._height)

        if contains(cx, cy, self._controller.radius):
            logger.debug("Controller pressed at (%d, %d)", cx, cy)
            for callback in list(self._pressed_listeners):
                callback()

        self._redraw()

    def on_pointer_move(self, x: int, y: int, primary_button_held: bool) -> None:
        if not primary_button_held:
            return

        cx, cy = translate_top_left_to_center(x, y, self._width, self._height)
        mode = self._mode

        if mode is JoystickMode.ALL_AXIS:
            self._move_all_axis(x, y, cx, cy)
        elif mode is JoystickMode.X_AXIS_ONLY:
            self._move_x_axis(x, cx)
        elif mode is JoystickMode.Y_AXIS_ONLY:
            self._move_y_axis(y, cy)
        elif mode is JoystickMode.NO_AXIS:
            pass
        else:
            assert_never(mode)

        # Reports the pointer, not the clamped knob.
        self._x = to_signed_byte(cx)
        self._y = to_signed_byte(cy)
        for callback in list(self._value_changed_listeners):
            callback(self._x, self._y)

        self._redraw()

    def on_pointer_up(self) -> None:
        if self._back_to_zero:
            self._controller_position = self.center()
            self._redraw()

    # ---- internal helpers ----
    def _move_all_axis(self, x: int, y: int, cx: int, cy: int) -> None:
        radius = self._joystick.radius
        if contains(cx, cy, radius):
            self._controller_position = Point(x, y)
            return

        center = self.center()
        distance = math.hypot(cx, cy)
        if distance == 0.0:
            self._controller_position = center
            return

        angle = math.acos(cx / distance)
        if cy > 0:
            angle = angle + (math.pi - angle) * 2.0
        # Screen y grows downwards.
        angle = -angle

        self._controller_position = Point(
            int(radius * math.cos(angle) + center.x),
            int(radius * math.sin(angle) + center.y),
        )

    def _move_x_axis(self, x: int, cx: int) -> None:
        radius = self._joystick.radius
        center = self.center()
        if -radius < cx < radius:
            new_x = x
        elif cx > 0:
            new_x = center.x + radius
        else:
            new_x = center.x - radius
        self._controller_position = Point(new_x, center.y)

    def _move_y_axis(self, y: int, cy: int) -> None:
        radius = self._joystick.radius
        center = self.center()
        if -radius < cy < radius:
            new_y = y
        elif cy > 0:
            new_y = center.y + radius
        else:
            new_y = center.y - radius
        self._controller_position = Point(center.x, new_y)

    def _redraw(self) -> None:
        if self._request_redraw is not None:
            self._request_redraw()
