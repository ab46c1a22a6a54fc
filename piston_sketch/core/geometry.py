# -*- coding: utf-8 -*-
"""Geometry helpers."""

from __future__ import annotations

import math
from typing import List, Tuple

Vec2 = Tuple[float, float]

EPSILON = 0.001


def is_zero(a: float) -> bool:
    return abs(a) < EPSILON


def length(x: float, y: float) -> float:
    return math.hypot(x, y)


def normalize(x: float, y: float) -> Vec2:
    """Unit vector along (x, y); the zero vector maps to (0, 0)."""
    d = math.hypot(x, y)
    if d == 0.0:
        return 0.0, 0.0
    return x / d, y / d


def polar(radius: float, angle: float) -> Vec2:
    return radius * math.cos(angle), radius * math.sin(angle)


def rect_corners(start: Vec2, end: Vec2, width: float) -> List[Vec2]:
    """Corners of a bar of the given width running from start to end.

    Order is start+n, end+n, end-n, start-n so the result can be fed straight
    into a polygon.
    """
    nx, ny = normalize(-(end[1] - start[1]), end[0] - start[0])
    hx, hy = nx * width * 0.5, ny * width * 0.5
    return [
        (start[0] + hx, start[1] + hy),
        (end[0] + hx, end[1] + hy),
        (end[0] - hx, end[1] - hy),
        (start[0] - hx, start[1] - hy),
    ]
