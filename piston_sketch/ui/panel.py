# -*- coding: utf-8 -*-
"""Side panel: mechanism dimensions, animation and live piston readout."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, List

from PyQt6.QtWidgets import (
    QCheckBox,
    QDoubleSpinBox,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..core.config import MAX_ANGLE_SPEED

if TYPE_CHECKING:
    from ..core.controller import EngineController


def _spin(lo: float, hi: float, step: float = 1.0, decimals: int = 2) -> QDoubleSpinBox:
    s = QDoubleSpinBox()
    s.setRange(lo, hi)
    s.setSingleStep(step)
    s.setDecimals(decimals)
    s.setKeyboardTracking(False)
    return s


class EnginePanel(QWidget):
    def __init__(self, ctrl: "EngineController", on_edit: Callable[[], None] = lambda: None):
        super().__init__()
        self.ctrl = ctrl
        self._on_edit = on_edit

        layout = QVBoxLayout(self)

        dims = QGroupBox("Mechanism (mm)")
        form = QFormLayout(dims)
        self.spin_radius = _spin(0.0, 10000.0)
        self.spin_rod = _spin(0.01, 10000.0)
        self.spin_ox = _spin(-100000.0, 100000.0)
        self.spin_oy = _spin(-100000.0, 100000.0)
        self.spin_dx = _spin(-100000.0, 100000.0)
        self.spin_dy = _spin(-100000.0, 100000.0)
        form.addRow("Crank radius", self.spin_radius)
        form.addRow("Rod length", self.spin_rod)
        form.addRow("Cylinder origin X", self.spin_ox)
        form.addRow("Cylinder origin Y", self.spin_oy)
        form.addRow("Cylinder direction X", self.spin_dx)
        form.addRow("Cylinder direction Y", self.spin_dy)
        layout.addWidget(dims)

        anim = QGroupBox("Animation")
        anim_form = QFormLayout(anim)
        self.spin_speed = _spin(-MAX_ANGLE_SPEED, MAX_ANGLE_SPEED, step=0.01, decimals=3)
        anim_form.addRow("Speed (rad/frame)", self.spin_speed)
        btns = QHBoxLayout()
        self.btn_play = QPushButton()
        self.btn_step = QPushButton("Step")
        btns.addWidget(self.btn_play)
        btns.addWidget(self.btn_step)
        anim_form.addRow(btns)
        self.chk_guides = QCheckBox("Show cylinder guides")
        anim_form.addRow(self.chk_guides)
        layout.addWidget(anim)

        state = QGroupBox("Piston")
        state_form = QFormLayout(state)
        self.lbl_angle = QLabel("--")
        self.lbl_crankpin = QLabel("--")
        self.lbl_piston = QLabel("--")
        self.lbl_travel = QLabel("--")
        self.lbl_warning = QLabel("")
        self.lbl_warning.setWordWrap(True)
        self.lbl_warning.setStyleSheet("color: rgb(200, 120, 0);")
        state_form.addRow("Crank angle", self.lbl_angle)
        state_form.addRow("Crankpin", self.lbl_crankpin)
        state_form.addRow("Position", self.lbl_piston)
        state_form.addRow("Travel", self.lbl_travel)
        state_form.addRow(self.lbl_warning)
        layout.addWidget(state)
        layout.addStretch(1)

        self._spins: List[QDoubleSpinBox] = [
            self.spin_radius, self.spin_rod, self.spin_ox, self.spin_oy, self.spin_dx, self.spin_dy,
        ]
        self.spin_radius.valueChanged.connect(lambda v: self._edit("crank_radius", v))
        self.spin_rod.valueChanged.connect(lambda v: self._edit("rod_length", v))
        self.spin_ox.valueChanged.connect(lambda v: self._edit_component("cylinder_origin", 0, v))
        self.spin_oy.valueChanged.connect(lambda v: self._edit_component("cylinder_origin", 1, v))
        self.spin_dx.valueChanged.connect(lambda v: self._edit_component("cylinder_direction", 0, v))
        self.spin_dy.valueChanged.connect(lambda v: self._edit_component("cylinder_direction", 1, v))
        self.spin_speed.valueChanged.connect(self._edit_speed)
        self.btn_play.clicked.connect(self.toggle_animation)
        self.btn_step.clicked.connect(self.step_animation)
        self.chk_guides.toggled.connect(self._toggle_guides)

        self.refresh_params()
        self.refresh_readout()

    # ---- edits ----
    def _edit(self, name: str, value):
        self.ctrl.set_value(name, value)
        self._on_edit()

    def _edit_component(self, name: str, index: int, value: float):
        self.ctrl.set_component(name, index, value)
        self._on_edit()

    def _edit_speed(self, v: float):
        self.ctrl.animator.speed = float(v)

    def _toggle_guides(self, checked: bool):
        self.ctrl.set_show_cylinder_guides(checked)
        self._on_edit()

    def toggle_animation(self):
        self.ctrl.animator.toggle()
        self.refresh_params()

    def step_animation(self):
        # One nominal frame regardless of pause state.
        self.ctrl.animator.advance()
        self.ctrl.solve()
        self._on_edit()

    # ---- sync from controller ----
    def refresh_params(self):
        p = self.ctrl.params
        widgets = self._spins + [self.spin_speed, self.chk_guides]
        for w in widgets:
            w.blockSignals(True)
        try:
            self.spin_radius.setValue(p.crank_radius)
            self.spin_rod.setValue(p.rod_length)
            self.spin_ox.setValue(p.cylinder_origin[0])
            self.spin_oy.setValue(p.cylinder_origin[1])
            self.spin_dx.setValue(p.cylinder_direction[0])
            self.spin_dy.setValue(p.cylinder_direction[1])
            self.spin_speed.setValue(self.ctrl.animator.speed)
            self.chk_guides.setChecked(self.ctrl.show_cylinder_guides)
        finally:
            for w in widgets:
                w.blockSignals(False)
        self.btn_play.setText("Pause" if self.ctrl.animator.running else "Play")

    def refresh_readout(self):
        p = self.ctrl.params
        deg = math.degrees(p.crank_angle) % 360.0
        self.lbl_angle.setText(f"{deg:.1f}°")
        cx, cy = p.crankpin()
        self.lbl_crankpin.setText(f"({cx:.2f}, {cy:.2f})")
        res = self.ctrl.result
        if not res.is_valid:
            self.lbl_piston.setText("unreachable")
            self.lbl_travel.setText("--")
            self.lbl_warning.setText("Connecting rod does not reach the cylinder.")
            return
        x, y = res.value
        self.lbl_piston.setText(f"({x:.2f}, {y:.2f})")
        t = self.ctrl.piston_travel()
        self.lbl_travel.setText(f"{t:.2f} mm")
        if self.ctrl.piston_behind_origin():
            self.lbl_warning.setText("Piston lies behind the cylinder origin.")
        else:
            self.lbl_warning.setText("")
