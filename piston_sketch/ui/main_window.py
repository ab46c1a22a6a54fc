# -*- coding: utf-8 -*-
"""Main window + menus."""

from __future__ import annotations

import logging
import math
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QDockWidget, QMainWindow, QStatusBar

from ..core.config import AppSettings
from ..core.controller import EngineController
from .panel import EnginePanel
from .plot_window import StrokePlotWindow
from .view import EngineView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: Optional[AppSettings] = None):
        super().__init__()
        self.settings = settings or AppSettings()
        self.setWindowTitle("Piston Sketch")
        self.ctrl = EngineController(self.settings, on_change=self.update_undo_redo_actions)

        self.view = EngineView(self.ctrl, self)
        self.setCentralWidget(self.view)
        self.dock = QDockWidget("Mechanism", self)
        self.panel = EnginePanel(self.ctrl, on_edit=self._params_edited)
        self.dock.setWidget(self.panel)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.dock)
        self.setStatusBar(QStatusBar())
        self._plot_window: Optional[StrokePlotWindow] = None

        self._build_menus()
        self.update_undo_redo_actions()

        self.view.frameAdvanced.connect(self._frame_advanced)
        self.view.paramsEdited.connect(self._params_edited)

        dock_width = self.dock.sizeHint().width()
        self.resize(self.settings.window_width + dock_width, self.settings.window_height)
        self.view.start()
        self.view.setFocus()
        logger.info("Main window ready (%d FPS target)", self.settings.target_fps)

    def _build_menus(self):
        mb = self.menuBar()

        m_edit = mb.addMenu("&Edit")
        self.act_undo = QAction("Undo", self)
        self.act_undo.setShortcut(QKeySequence.StandardKey.Undo)
        self.act_undo.triggered.connect(self.undo)
        self.act_redo = QAction("Redo", self)
        self.act_redo.setShortcut(QKeySequence.StandardKey.Redo)
        self.act_redo.triggered.connect(self.redo)
        m_edit.addAction(self.act_undo)
        m_edit.addAction(self.act_redo)

        m_view = mb.addMenu("&View")
        self.act_guides = QAction("Show Cylinder Guides", self)
        self.act_guides.setCheckable(True)
        self.act_guides.setChecked(self.ctrl.show_cylinder_guides)
        self.act_guides.setShortcut(QKeySequence("G"))
        self.act_guides.toggled.connect(self._set_guides)
        self.act_reset_view = QAction("Reset View", self)
        self.act_reset_view.setShortcut(QKeySequence("Home"))
        self.act_reset_view.triggered.connect(self.ctrl.reset_view)
        self.act_stroke_plot = QAction("Stroke Plot...", self)
        self.act_stroke_plot.triggered.connect(self.show_stroke_plot)
        m_view.addAction(self.act_guides)
        m_view.addAction(self.act_reset_view)
        m_view.addSeparator()
        m_view.addAction(self.act_stroke_plot)

        m_anim = mb.addMenu("&Animation")
        self.act_play = QAction("Play / Pause", self)
        self.act_play.setShortcut(QKeySequence("Space"))
        self.act_play.triggered.connect(self.panel.toggle_animation)
        self.act_step = QAction("Step", self)
        self.act_step.setShortcut(QKeySequence("."))
        self.act_step.triggered.connect(self.panel.step_animation)
        m_anim.addAction(self.act_play)
        m_anim.addAction(self.act_step)

    def update_undo_redo_actions(self):
        if not hasattr(self, "act_undo"):
            return
        cs = self.ctrl.commands
        self.act_undo.setEnabled(cs.can_undo())
        self.act_redo.setEnabled(cs.can_redo())
        ut = cs.undo_text()
        rt = cs.redo_text()
        self.act_undo.setText(f"Undo {ut}" if ut else "Undo")
        self.act_redo.setText(f"Redo {rt}" if rt else "Redo")

    def undo(self):
        self.ctrl.undo()
        self._params_edited()

    def redo(self):
        self.ctrl.redo()
        self._params_edited()

    def _set_guides(self, checked: bool):
        self.ctrl.set_show_cylinder_guides(checked)
        self._params_edited()

    def _params_edited(self):
        if self.act_guides.isChecked() != self.ctrl.show_cylinder_guides:
            self.act_guides.blockSignals(True)
            self.act_guides.setChecked(self.ctrl.show_cylinder_guides)
            self.act_guides.blockSignals(False)
        self.panel.refresh_params()
        self._frame_advanced()
        self.view.update()

    def _frame_advanced(self):
        self.panel.refresh_readout()
        p = self.ctrl.params
        deg = math.degrees(p.crank_angle) % 360.0
        res = self.ctrl.result
        if res.is_valid:
            state = f"piston at ({res.value[0]:.1f}, {res.value[1]:.1f})"
        else:
            state = "rod does not reach the cylinder"
        self.statusBar().showMessage(f"Crank {deg:6.1f}°   {state}")

    def show_stroke_plot(self):
        if self._plot_window is None:
            self._plot_window = StrokePlotWindow(self.ctrl)
        else:
            self._plot_window.plot()
        self._plot_window.show()
        self._plot_window.raise_()
        self._plot_window.activateWindow()

    def closeEvent(self, e):
        self.view.stop()
        if self._plot_window is not None:
            self._plot_window.close()
        super().closeEvent(e)
