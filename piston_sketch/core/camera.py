# -*- coding: utf-8 -*-
"""2D camera: world millimetres <-> display pixels.

World space has y pointing up and the crankshaft at the origin. Display space
is the widget's pixel grid with y pointing down. The camera is a single 3x3
homogeneous matrix; pan and zoom post-multiply it, so their arguments are in
world units.
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

import numpy as np

from .geometry import Vec2, is_zero

logger = logging.getLogger(__name__)

MIN_PIXELS_PER_MM = 0.1


def _translation(x: float, y: float) -> np.ndarray:
    m = np.identity(3)
    m[0, 2] = x
    m[1, 2] = y
    return m


def _scaling(sx: float, sy: float) -> np.ndarray:
    return np.diag([sx, sy, 1.0])


class Camera:
    def __init__(self, width: int = 800, height: int = 600):
        self.width = int(width)
        self.height = int(height)
        self.matrix = self._initial_matrix(self.width, self.height)

    @staticmethod
    def _initial_matrix(width: int, height: int) -> np.ndarray:
        return _scaling(1.0, -1.0) @ _translation(width / 2, -height / 2)

    def reset(self):
        self.matrix = self._initial_matrix(self.width, self.height)
        logger.debug("Camera reset to %dx%d", self.width, self.height)

    def resize(self, width: int, height: int):
        """Keep the current pan/zoom but re-centre on the new widget size."""
        dw = (int(width) - self.width) / 2
        dh = (int(height) - self.height) / 2
        self.matrix = _translation(dw, dh) @ self.matrix
        self.width, self.height = int(width), int(height)

    def translate(self, vec: Vec2):
        self.matrix = self.matrix @ _translation(vec[0], vec[1])

    def scale(self, value: float):
        self.matrix = self.matrix @ _scaling(value, value)

    def to_display(self, point: Vec2) -> Vec2:
        v = self.matrix @ np.array([point[0], point[1], 1.0])
        return float(v[0]), float(v[1])

    def to_world(self, point: Vec2) -> Vec2:
        v = np.linalg.inv(self.matrix) @ np.array([point[0], point[1], 1.0])
        return float(v[0]), float(v[1])

    def length_to_display(self, value: float) -> float:
        v = self.matrix @ np.array([value, 0.0, 0.0])
        return float(np.linalg.norm(v))

    def length_to_world(self, value: float) -> float:
        v = np.linalg.inv(self.matrix) @ np.array([value, 0.0, 0.0])
        return float(np.linalg.norm(v))


class CameraMotion:
    """Damped pan/zoom driven by held keys and wheel notches."""

    KEY_DIRECTIONS = {
        "W": (0.0, -1.0),
        "S": (0.0, 1.0),
        "A": (1.0, 0.0),
        "D": (-1.0, 0.0),
    }

    def __init__(self, zoom_max_speed: float = 0.05, zoom_damping: float = 0.8, pan_damping: float = 0.8):
        self.zoom_max_speed = zoom_max_speed
        self.zoom_damping = zoom_damping
        self.pan_damping = pan_damping
        self.zoom_speed = 0.0
        self.pan_speed: Tuple[float, float] = (0.0, 0.0)

    def stop(self):
        self.zoom_speed = 0.0
        self.pan_speed = (0.0, 0.0)

    def update(self, camera: Camera, delta: float, keys: Iterable[str] = (), wheel: float = 0.0):
        # Decay first, then add this frame's input. Exponent form keeps the
        # decay below 1 at any frame length.
        self.zoom_speed *= self.zoom_damping ** delta
        if is_zero(self.zoom_speed):
            self.zoom_speed = 0.0
        px, py = self.pan_speed
        decay = self.pan_damping ** delta
        px *= decay
        py *= decay
        if is_zero(float(np.hypot(px, py))):
            px, py = 0.0, 0.0

        step = 1.0 / camera.length_to_display(1.0)
        for key in keys:
            kx, ky = self.KEY_DIRECTIONS.get(str(key).upper(), (0.0, 0.0))
            px += kx * step
            py += ky * step
        self.pan_speed = (px, py)

        if wheel:
            self.zoom_speed = float(np.sign(wheel)) * self.zoom_max_speed

        if not is_zero(float(np.hypot(px, py))):
            camera.translate((px * delta, py * delta))
        # Zooming out past this point would flip the view inside out.
        too_small = camera.length_to_display(1.0) < MIN_PIXELS_PER_MM
        if not is_zero(self.zoom_speed) and not (self.zoom_speed < 0 and too_small):
            camera.scale(1.0 + self.zoom_speed * delta)
