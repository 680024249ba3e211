"""Main widget for the virtual joystick controller demo."""

from __future__ import annotations

from typing import Optional

from PyQt5.QtCore import pyqtSlot
from PyQt5.QtGui import QColor, QPalette
from PyQt5.QtWidgets import QVBoxLayout, QWidget

from .config_manager import ConfigurationManager
from .control_panels import JoystickControlPanel
from .widgets.joystick_widget import JoystickWidget


class JoystickMainWidget(QWidget):
    """
    Joystick plus its settings panel, sharing one ConfigurationManager.

    The panel writes to the manager; the manager's change signals drive
    both the joystick and the panel, so programmatic changes stay in sync.
    """

    def __init__(self, config_manager: Optional[ConfigurationManager] = None, parent=None):
        super().__init__(parent)
        self.setObjectName('JoystickMainWidget')

        self._config_manager = config_manager or ConfigurationManager()
        self._joystick = JoystickWidget(self._config_manager, self)
        self._panel = JoystickControlPanel(self._config_manager, self)

        layout = QVBoxLayout()
        layout.addWidget(self._joystick, 1)
        layout.addWidget(self._panel, 0)
        self.setLayout(layout)

        self._joystick.value_changed.connect(self._panel.show_value)
        self._config_manager.config_changed.connect(self._panel.sync_from_api)
        self._config_manager.colors_changed.connect(self._apply_background)

        self.setAutoFillBackground(True)
        self._apply_background()

    def joystick(self) -> JoystickWidget:
        return self._joystick

    def panel(self) -> JoystickControlPanel:
        return self._panel

    def config_manager(self) -> ConfigurationManager:
        return self._config_manager

    @pyqtSlot()
    def _apply_background(self) -> None:
        background, _, _ = self._config_manager.get_colors()
        self.setPalette(QPalette(QColor(background)))
