# -*- coding: utf-8 -*-
"""Plot window for the piston stroke over one crank revolution.

The sweep is recomputed from the live mechanism whenever Refresh is pressed,
so it always matches what the canvas shows.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from ..core.stroke import StrokeSummary, summarize, sweep

if TYPE_CHECKING:
    from ..core.controller import EngineController


def format_summary(s: StrokeSummary) -> str:
    if s.reachable_fraction == 0.0:
        return "The connecting rod never reaches the cylinder."
    parts = [
        f"Stroke: {s.stroke:.2f} mm",
        f"TDC: {s.top_dead_centre:.2f} mm",
        f"BDC: {s.bottom_dead_centre:.2f} mm",
        f"Reachable: {s.reachable_fraction * 100:.0f}%",
    ]
    if s.behind_origin:
        parts.append("piston passes behind the cylinder origin")
    return "   ".join(parts)


class StrokePlotWindow(QMainWindow):
    def __init__(self, ctrl: "EngineController"):
        super().__init__()
        self.ctrl = ctrl
        self.setWindowTitle("Piston stroke")
        self.resize(900, 560)

        root = QWidget(self)
        self.setCentralWidget(root)
        layout = QVBoxLayout(root)

        row = QHBoxLayout()
        self.lbl_summary = QLabel("")
        self.btn_refresh = QPushButton("Refresh")
        row.addWidget(self.lbl_summary, 1)
        row.addWidget(self.btn_refresh)
        layout.addLayout(row)

        # Matplotlib canvas
        self.fig = Figure(figsize=(6, 4))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvas(self.fig)
        layout.addWidget(self.canvas, 1)

        self.btn_refresh.clicked.connect(self.plot)
        self.plot()

    def plot(self):
        sw = sweep(self.ctrl.params)
        summary = summarize(sw)
        deg = np.degrees(sw.angles)

        self.ax.clear()
        self.ax.plot(deg, sw.travel, label="Piston travel")
        if summary.behind_origin:
            self.ax.axhline(0.0, color="tab:orange", linestyle="--", linewidth=1, label="Cylinder origin")
        current = math.degrees(self.ctrl.params.crank_angle) % 360.0
        self.ax.axvline(current, color="gray", linewidth=1)
        self.ax.set_xlim(0.0, 360.0)
        self.ax.set_xlabel("Crank angle (deg)")
        self.ax.set_ylabel("Distance along cylinder (mm)")
        self.ax.legend(loc="upper right")
        self.ax.grid(True)
        self.canvas.draw_idle()
        self.lbl_summary.setText(format_summary(summary))
