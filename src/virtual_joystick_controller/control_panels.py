from __future__ import annotations

from contextlib import contextmanager
from typing import Optional, Protocol

from PyQt5.QtCore import pyqtSlot
from PyQt5.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFrame,
    QGridLayout,
    QLabel,
    QWidget,
)

from .joystick_controller import JoystickMode


_MODE_LABELS = {
    JoystickMode.ALL_AXIS: "All axes",
    JoystickMode.X_AXIS_ONLY: "X axis only",
    JoystickMode.Y_AXIS_ONLY: "Y axis only",
    JoystickMode.NO_AXIS: "Locked",
}


@contextmanager
def blocked(widget):
    widget.blockSignals(True)
    try:
        yield widget
    finally:
        widget.blockSignals(False)


class JoystickSettingsAPI(Protocol):
    def get_mode(self) -> JoystickMode: ...
    def set_mode(self, mode: JoystickMode) -> None: ...
    def is_back_to_zero_enabled(self) -> bool: ...
    def set_back_to_zero(self, enabled: bool) -> None: ...


class JoystickControlPanel(QFrame):
    """Mode selector, return-to-zero toggle and a readout of the last value."""

    LABEL_MIN_WIDTH = 90

    def __init__(self, api: JoystickSettingsAPI, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._api = api
        self.setObjectName("control-panel")

        self._mode_combo = QComboBox(self)
        for mode, label in _MODE_LABELS.items():
            self._mode_combo.addItem(label, mode)
        self._back_to_zero_check = QCheckBox("Return to center on release", self)
        self._value_label = QLabel(self)

        mode_label = QLabel("Mode", self)
        mode_label.setMinimumWidth(self.LABEL_MIN_WIDTH)
        value_caption = QLabel("Value", self)
        value_caption.setMinimumWidth(self.LABEL_MIN_WIDTH)

        layout = QGridLayout()
        layout.addWidget(mode_label, 0, 0)
        layout.addWidget(self._mode_combo, 0, 1)
        layout.addWidget(self._back_to_zero_check, 1, 0, 1, 2)
        layout.addWidget(value_caption, 2, 0)
        layout.addWidget(self._value_label, 2, 1)
        self.setLayout(layout)

        self._mode_combo.currentIndexChanged.connect(self._on_mode_index_changed)
        self._back_to_zero_check.toggled.connect(self._on_back_to_zero_toggled)

        self.sync_from_api()
        self.show_value(0, 0)

    def sync_from_api(self) -> None:
        with blocked(self._mode_combo):
            self._mode_combo.setCurrentIndex(self._index_for_mode(self._api.get_mode()))
        with blocked(self._back_to_zero_check):
            self._back_to_zero_check.setChecked(self._api.is_back_to_zero_enabled())

    def mode_combo(self) -> QComboBox:
        return self._mode_combo

    def back_to_zero_check(self) -> QCheckBox:
        return self._back_to_zero_check

    def value_text(self) -> str:
        return self._value_label.text()

    @pyqtSlot(int, int)
    def show_value(self, x: int, y: int) -> None:
        self._value_label.setText(f"({x:+d}, {y:+d})")

    def _index_for_mode(self, mode: JoystickMode) -> int:
        for index in range(self._mode_combo.count()):
            if self._mode_combo.itemData(index) is mode:
                return index
        return -1

    def _on_mode_index_changed(self, index: int) -> None:
        mode = self._mode_combo.itemData(index)
        if mode is not None:
            self._api.set_mode(mode)

    def _on_back_to_zero_toggled(self, checked: bool) -> None:
        self._api.set_back_to_zero(checked)
