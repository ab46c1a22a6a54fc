# -*- coding: utf-8 -*-
"""Mechanism canvas: animation timer, painting, pan/zoom and handle drags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QElapsedTimer, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QWidget

from ..utils.constants import BACKGROUND
from ..utils.qt_safe import safe_event
from . import painter

if TYPE_CHECKING:
    from ..core.controller import EngineController

PAN_KEYS = {
    Qt.Key.Key_W.value: "W",
    Qt.Key.Key_A.value: "A",
    Qt.Key.Key_S.value: "S",
    Qt.Key.Key_D.value: "D",
}


class EngineView(QWidget):
    frameAdvanced = pyqtSignal()
    paramsEdited = pyqtSignal()

    def __init__(self, ctrl: "EngineController", parent=None):
        super().__init__(parent)
        self.ctrl = ctrl
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)
        self.setMinimumSize(320, 240)

        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_tick)

    def start(self):
        self._clock.start()
        self._timer.start(self.ctrl.settings.frame_interval_ms)

    def stop(self):
        self._timer.stop()

    def _on_tick(self):
        seconds = self._clock.restart() / 1000.0
        self.ctrl.tick(seconds)
        self.update()
        self.frameAdvanced.emit()

    def paintEvent(self, e):
        ctrl = self.ctrl
        cam = ctrl.camera
        p = QPainter(self)
        try:
            p.setRenderHint(QPainter.RenderHint.Antialiasing)
            p.fillRect(self.rect(), BACKGROUND)
            painter.draw_coordinates(p, cam)
            painter.draw_crankshaft(p, cam, ctrl.params)
            res = ctrl.result
            if res.is_valid:
                painter.draw_connecting_rod(p, cam, ctrl.params, res.value)
                painter.draw_piston(p, cam, ctrl.params, res.value)
            if ctrl.show_cylinder_guides:
                painter.draw_cylinder_guides(
                    p, cam, ctrl.params, ctrl.capture.radius,
                    active=ctrl.capture.active, hovered=ctrl.hovered,
                )
        finally:
            p.end()

    def resizeEvent(self, e):
        self.ctrl.camera.resize(e.size().width(), e.size().height())
        super().resizeEvent(e)

    @safe_event
    def mousePressEvent(self, e):
        if e.button() == Qt.MouseButton.LeftButton:
            pos = e.position()
            if self.ctrl.mouse_press((pos.x(), pos.y())) is not None:
                self.setCursor(Qt.CursorShape.ClosedHandCursor)
            e.accept(); return
        super().mousePressEvent(e)

    @safe_event
    def mouseMoveEvent(self, e):
        pos = e.position()
        if self.ctrl.mouse_move((pos.x(), pos.y())):
            self.paramsEdited.emit()
        elif self.ctrl.hovered is not None:
            self.setCursor(Qt.CursorShape.OpenHandCursor)
        else:
            self.unsetCursor()
        self.update()
        e.accept()

    @safe_event
    def mouseReleaseEvent(self, e):
        if e.button() == Qt.MouseButton.LeftButton:
            drag = self.ctrl.mouse_release()
            self.unsetCursor()
            if drag is not None and drag.changed:
                self.paramsEdited.emit()
            e.accept(); return
        super().mouseReleaseEvent(e)

    @safe_event
    def wheelEvent(self, e):
        dy = e.angleDelta().y()
        if dy:
            self.ctrl.wheel(dy / 120.0)
        e.accept()

    @safe_event
    def keyPressEvent(self, e):
        key = PAN_KEYS.get(e.key())
        if key is not None:
            if not e.isAutoRepeat():
                self.ctrl.key_down(key)
            e.accept(); return
        super().keyPressEvent(e)

    @safe_event
    def keyReleaseEvent(self, e):
        key = PAN_KEYS.get(e.key())
        if key is not None:
            if not e.isAutoRepeat():
                self.ctrl.key_up(key)
            e.accept(); return
        super().keyReleaseEvent(e)

    def focusOutEvent(self, e):
        # Key releases are lost while unfocused.
        self.ctrl.keys_down.clear()
        super().focusOutEvent(e)
