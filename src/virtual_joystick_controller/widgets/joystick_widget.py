from __future__ import annotations
import logging
from typing import Optional, Tuple

# Qt
from PyQt5.QtCore import Qt, QPoint, QSize, pyqtSignal, pyqtSlot
from PyQt5.QtGui import QBrush, QColor, QPainter, QRadialGradient
from PyQt5.QtWidgets import QWidget

from ..config_manager import ConfigurationManager
from ..joystick_controller import ControllerSnapshot, JoystickController, JoystickMode


logger = logging.getLogger(__name__)


class JoystickWidget(QWidget):
    """
    Qt host for a JoystickController.
    - Forwards resize and mouse events to the controller.
    - Re-emits controller notifications as Qt signals.
    - Paints the joystick disc and the controller knob from the controller snapshot.
    """

    # Signals
    pressed = pyqtSignal()
    value_changed = pyqtSignal(int, int)    # raw pointer offset, signed 8-bit

    def __init__(self, config_manager: Optional[ConfigurationManager] = None, parent=None) -> None:
        super().__init__(parent)

        self._config_manager = config_manager or ConfigurationManager()
        self._controller = JoystickController(request_redraw=self.update)
        self._controller.add_pressed_listener(self.pressed.emit)
        self._controller.add_value_changed_listener(self.value_changed.emit)

        self.setAttribute(Qt.WA_TranslucentBackground)

        self._config_manager.mode_changed.connect(self._on_mode_changed)
        self._config_manager.back_to_zero_changed.connect(self._on_back_to_zero_changed)
        self._config_manager.colors_changed.connect(self._apply_colors)
        self._controller.set_mode(self._config_manager.get_mode())
        self._controller.set_back_to_zero(self._config_manager.is_back_to_zero_enabled())
        self._apply_colors()

        self._controller.on_resize(self.width(), self.height())

    # ---- public api ----
    def controller(self) -> JoystickController:
        return self._controller

    def config_manager(self) -> ConfigurationManager:
        return self._config_manager

    # QWidget.x()/y() keep their Qt meaning; the output value lives here.
    def value(self) -> Tuple[int, int]:
        return (self._controller.x(), self._controller.y())

    def set_value(self, x: int, y: int) -> None:
        self._controller.set_x(x)
        self._controller.set_y(y)

    def mode(self) -> JoystickMode:
        return self._controller.mode()

    def set_mode(self, mode: JoystickMode) -> None:
        self._config_manager.set_mode(mode)

    def back_to_zero(self) -> bool:
        return self._controller.back_to_zero()

    def set_back_to_zero(self, enable: bool) -> None:
        self._config_manager.set_back_to_zero(enable)

    def sizeHint(self) -> QSize:
        return QSize(200, 200)

    def minimumSizeHint(self) -> QSize:
        return QSize(60, 60)

    # ---- Qt events ----
    def resizeEvent(self, e) -> None:
        self._controller.on_resize(self.width(), self.height())
        super().resizeEvent(e)

    def mousePressEvent(self, e) -> None:
        self._controller.on_pointer_down(e.x(), e.y())

    def mouseMoveEvent(self, e) -> None:
        self._controller.on_pointer_move(e.x(), e.y(), e.buttons() == Qt.LeftButton)

    def mouseReleaseEvent(self, e) -> None:
        self._controller.on_pointer_up()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.setPen(Qt.NoPen)

        snap = self._controller.snapshot()
        self._draw_joystick(painter, snap)
        self._draw_controller(painter, snap)

    # ---- internal helpers ----
    def _draw_joystick(self, painter: QPainter, snap: ControllerSnapshot) -> None:
        center = QPoint(snap.center.x, snap.center.y)
        radius = snap.joystick_radius

        color = QColor(self._config_manager.get_colors()[1])
        gradient = QRadialGradient(snap.center.x, snap.center.y, max(1, radius))
        color.setAlpha(255)
        gradient.setColorAt(0.0, color)
        color.setAlpha(224)
        gradient.setColorAt(1.0, color)

        painter.setBrush(QBrush(gradient))
        painter.drawEllipse(center, radius, radius)

    def _draw_controller(self, painter: QPainter, snap: ControllerSnapshot) -> None:
        position = QPoint(snap.controller_position.x, snap.controller_position.y)
        radius = snap.controller_radius

        painter.setBrush(QBrush(QColor(self._config_manager.get_colors()[2])))
        painter.drawEllipse(position, radius, radius)

    @pyqtSlot(object)
    def _on_mode_changed(self, mode: JoystickMode) -> None:
        self._controller.set_mode(mode)

    @pyqtSlot(bool)
    def _on_back_to_zero_changed(self, enabled: bool) -> None:
        self._controller.set_back_to_zero(enabled)

    @pyqtSlot()
    def _apply_colors(self) -> None:
        _, joystick, controller = self._config_manager.get_colors()
        logger.debug("Joystick colors %s / %s", joystick, controller)
        self.update()
