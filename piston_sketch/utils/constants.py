# -*- coding: utf-8 -*-
"""UI constants and colors."""

from PyQt6.QtGui import QColor

BACKGROUND = QColor(245, 245, 245)
AXES = QColor(0, 0, 0, 25)
CRANKSHAFT = QColor(50, 50, 200)
CONNECTING_ROD = QColor(200, 50, 50)
PISTON = QColor(50, 200, 50)
GUIDE = QColor(150, 150, 175)
GUIDE_HOVER = QColor(125, 125, 215)
GUIDE_ACTIVE = QColor(100, 100, 255)
WARNING = QColor(200, 120, 0)

BEARING_RADIUS = 10.0
BAR_WIDTH = 10.0
PISTON_LENGTH = 30.0
PISTON_WIDTH = 50.0
AXES_EXTENT = 1000
AXES_TICK_SPACING = 10
AXES_TICK_SIZE = 5.0
